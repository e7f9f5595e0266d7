"""
Main Window — the central hub of ApexRhythm.

Contains:
  - Setup screen (operator alias, wake/sleep, genre, intensity)
  - Results screen (see ResultsWidget)
  - Export of the protocol image and reset back to defaults
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from PySide6.QtCore import Qt, QTime, Slot
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QLineEdit, QComboBox, QMessageBox, QFormLayout,
    QStackedWidget, QTimeEdit, QFileDialog,
)

from apex_rhythm.core.models import Genre, Intensity
from apex_rhythm.services.schedule_service import (
    EmptyScheduleError, ProfileError, ScheduleService,
)
from apex_rhythm.ui.export_image import export_filename, save_protocol_image
from apex_rhythm.ui.results_widget import ResultsWidget

logger = logging.getLogger(__name__)

TIME_FORMAT = "HH:mm"


class MainWindow(QMainWindow):
    """The main application window."""

    def __init__(self, config: dict) -> None:
        super().__init__()
        self.setWindowTitle("ApexRhythm")
        self.setMinimumSize(760, 620)
        self.resize(900, 820)

        self.config = config
        self.schedule_svc = ScheduleService(config["form_defaults"])

        self._build_ui()
        self._apply_form(self.schedule_svc.form_defaults)

    # ── UI Construction ─────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.setup_screen = self._build_setup_screen()
        self.stack.addWidget(self.setup_screen)

        self.results_screen = ResultsWidget(self.config["chart"]["height"])
        self.results_screen.export_requested.connect(self._on_export)
        self.results_screen.reset_requested.connect(self._on_reset)
        self.stack.addWidget(self.results_screen)

    def _build_setup_screen(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)
        layout.setSpacing(16)
        layout.setContentsMargins(48, 36, 48, 36)

        title = QLabel("APEX RHYTHM")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("NEURAL-SYNC PROTOCOL")
        subtitle.setObjectName("subtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(subtitle)

        form = QFormLayout()
        form.setSpacing(12)

        self.username_input = QLineEdit()
        self.username_input.setPlaceholderText("Operator alias")
        form.addRow("Alias", self.username_input)

        self.wake_input = QTimeEdit()
        self.wake_input.setDisplayFormat(TIME_FORMAT)
        form.addRow("Wake time", self.wake_input)

        self.sleep_input = QTimeEdit()
        self.sleep_input.setDisplayFormat(TIME_FORMAT)
        form.addRow("Sleep time", self.sleep_input)

        self.genre_input = QComboBox()
        self.genre_input.addItems([g.label for g in Genre if g is not Genre.OTHER])
        form.addRow("Game genre", self.genre_input)

        self.intensity_input = QComboBox()
        self.intensity_input.addItems(
            [i.label for i in Intensity if i is not Intensity.OTHER]
        )
        form.addRow("Intensity", self.intensity_input)

        layout.addLayout(form)

        btn_layout = QHBoxLayout()
        self.btn_analyze = QPushButton("ANALYZE RHYTHM")
        self.btn_analyze.setObjectName("primary")
        self.btn_analyze.setMinimumHeight(48)
        self.btn_analyze.clicked.connect(self._on_analyze)
        btn_layout.addWidget(self.btn_analyze)
        layout.addLayout(btn_layout)

        layout.addStretch()
        return widget

    # ── Form helpers ────────────────────────────────────────────────────

    def _read_form(self) -> Dict[str, str]:
        return {
            "username": self.username_input.text(),
            "wake_time": self.wake_input.time().toString(TIME_FORMAT),
            "sleep_time": self.sleep_input.time().toString(TIME_FORMAT),
            "genre": self.genre_input.currentText(),
            "intensity": self.intensity_input.currentText(),
        }

    def _apply_form(self, values: Dict[str, str]) -> None:
        self.username_input.setText(values.get("username", ""))
        self.wake_input.setTime(QTime.fromString(values["wake_time"], TIME_FORMAT))
        self.sleep_input.setTime(QTime.fromString(values["sleep_time"], TIME_FORMAT))
        self.genre_input.setCurrentText(values["genre"])
        self.intensity_input.setCurrentText(values["intensity"])

    # ── Actions ─────────────────────────────────────────────────────────

    @Slot()
    def _on_analyze(self) -> None:
        try:
            analysis = self.schedule_svc.analyze(self._read_form())
        except ProfileError as e:
            QMessageBox.warning(self, "ApexRhythm", str(e))
            return
        except EmptyScheduleError as e:
            logger.warning("Analysis rejected: %s", e)
            QMessageBox.warning(self, "ApexRhythm", str(e))
            return

        self.results_screen.show_analysis(analysis)
        self.stack.setCurrentWidget(self.results_screen)

    @Slot()
    def _on_export(self) -> None:
        try:
            analysis = self.schedule_svc.require_analysis("export")
        except RuntimeError as e:
            QMessageBox.warning(self, "Export", str(e))
            return

        export_cfg = self.config["export"]
        directory = Path(export_cfg["directory"]) if export_cfg["directory"] else Path.home()
        default_path = directory / export_filename(analysis.profile.username)
        path, _ = QFileDialog.getSaveFileName(
            self, "Save Protocol Image", str(default_path), "PNG images (*.png)"
        )
        if not path:
            return

        try:
            saved = save_protocol_image(
                analysis, Path(path), export_cfg["width"], export_cfg["height"]
            )
        except (RuntimeError, OSError) as e:
            logger.error("Export failed: %s", e)
            QMessageBox.critical(self, "Export", str(e))
            return
        QMessageBox.information(self, "Export", f"Protocol saved to {saved}")

    @Slot()
    def _on_reset(self) -> None:
        self._apply_form(self.schedule_svc.reset())
        self.stack.setCurrentWidget(self.setup_screen)


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Two screens in a QStackedWidget. The setup screen collects the form;
#   Analyze hands it to ScheduleService and flips to the results screen.
#   Export renders the 1920x1080 PNG, Reset restores configured defaults.
#
# Key points:
#   - The window never does schedule math itself. Every number on screen
#     comes from the Analysis object.
#   - ProfileError / EmptyScheduleError are turned into dialogs here and
#     nowhere else, so the user stays on the setup screen to fix input.
#   - QTimeEdit guarantees well-formed HH:mm, but the service still
#     validates since it's the real boundary.
