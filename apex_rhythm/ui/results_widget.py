"""
Results Widget — the screen shown after a successful analysis.

Top to bottom: operator card, peak performance window, APM / flush metrics,
the interactive rhythm chart, and the phase timeline.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QFrame, QProgressBar, QSizePolicy,
)
from PySide6.QtCharts import QChartView

from apex_rhythm.services.schedule_service import Analysis
from apex_rhythm.services.timeline import SlotKind, TimeSlot
from apex_rhythm.ui import plot_backend

logger = logging.getLogger(__name__)

_SURFACE = "#111111"
_BORDER = "#222222"


class MetricCard(QFrame):
    """Neon value over a small caption."""

    def __init__(self, label: str, tooltip: str = "",
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setFixedHeight(90)
        self.setStyleSheet(f"""
            MetricCard {{
                background-color: {_SURFACE};
                border-radius: 6px;
                border: 1px solid {_BORDER};
            }}
        """)
        if tooltip:
            self.setToolTip(tooltip)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 8)
        layout.setSpacing(4)

        self.value_label = QLabel("—")
        self.value_label.setObjectName("metric_value")
        self.name_label = QLabel(label.upper())
        self.name_label.setObjectName("metric_label")

        layout.addWidget(self.value_label)
        layout.addWidget(self.name_label)

    def set_text(self, text: str) -> None:
        self.value_label.setText(text)


class FlushCard(MetricCard):
    """Metric card with a progress bar underneath."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(
            "metabolic flush rate",
            tooltip="Rises with the number of rest phases in your day.",
            parent=parent,
        )
        self.bar = QProgressBar()
        self.bar.setRange(0, 100)
        self.bar.setTextVisible(False)
        self.bar.setFixedHeight(8)
        self.layout().addWidget(self.bar)

    def set_rate(self, label: str, percentage: float) -> None:
        self.set_text(label)
        self.bar.setValue(int(percentage))


class ChartSlot(QFrame):
    """Container that holds a QChartView widget — swappable on refresh."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setStyleSheet(f"""
            ChartSlot {{
                background-color: {_SURFACE};
                border-radius: 8px;
                border: 1px solid {_BORDER};
            }}
        """)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(2, 2, 2, 2)
        self._layout.setSpacing(0)
        self._current_view: Optional[QChartView] = None

    def set_chart(self, view: QChartView) -> None:
        """Replace the current chart with a new one."""
        if self._current_view is not None:
            self._layout.removeWidget(self._current_view)
            self._current_view.deleteLater()
        self._current_view = view
        self._layout.addWidget(view)


class TimeSlotRow(QFrame):
    """One line of the phase timeline."""

    def __init__(self, slot: TimeSlot, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("slot_peak" if slot.is_optimal else "slot")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(16)

        time_label = QLabel(slot.clock)
        time_label.setObjectName("slot_time")
        time_label.setFixedWidth(60)
        layout.addWidget(time_label)

        text = QVBoxLayout()
        text.setSpacing(0)
        title = QLabel(slot.title)
        title.setObjectName("slot_title")
        desc = QLabel(slot.description)
        desc.setObjectName("slot_description")
        text.addWidget(title)
        text.addWidget(desc)
        layout.addLayout(text, 1)

        if slot.kind == SlotKind.REST:
            self.setToolTip("20 min recovery")


class ResultsWidget(QWidget):
    """Read-only view of one Analysis, plus export/reset actions."""

    export_requested = Signal()
    reset_requested = Signal()

    def __init__(self, chart_height: int = 300,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.chart_height = chart_height
        self._slot_rows: List[TimeSlotRow] = []
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        outer.addWidget(scroll)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setSpacing(14)
        layout.setContentsMargins(28, 20, 28, 20)

        # ── Operator ────────────────────────────────────────────────
        self.alias_label = QLabel("")
        self.alias_label.setObjectName("alias")
        layout.addWidget(self.alias_label)

        self.profile_label = QLabel("")
        self.profile_label.setObjectName("subtitle")
        layout.addWidget(self.profile_label)

        # ── Peak window ─────────────────────────────────────────────
        caption = QLabel("PEAK PERFORMANCE WINDOW")
        caption.setObjectName("peak_caption")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(caption)

        self.peak_label = QLabel("--:-- - --:--")
        self.peak_label.setObjectName("peak_window")
        self.peak_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.peak_label)

        # ── Metrics ─────────────────────────────────────────────────
        metrics = QHBoxLayout()
        metrics.setSpacing(12)
        self.apm_card = MetricCard(
            "apm potential",
            tooltip="Genre base APM scaled by your optimal window score.",
        )
        self.flush_card = FlushCard()
        metrics.addWidget(self.apm_card)
        metrics.addWidget(self.flush_card)
        layout.addLayout(metrics)

        # ── Chart ───────────────────────────────────────────────────
        self.chart_slot = ChartSlot()
        self.chart_slot.setMinimumHeight(self.chart_height)
        layout.addWidget(self.chart_slot)

        self.wake_sleep_label = QLabel("")
        self.wake_sleep_label.setObjectName("subtitle")
        layout.addWidget(self.wake_sleep_label)

        # ── Timeline ────────────────────────────────────────────────
        self.slots_layout = QVBoxLayout()
        self.slots_layout.setSpacing(6)
        layout.addLayout(self.slots_layout)

        # ── Actions ─────────────────────────────────────────────────
        actions = QHBoxLayout()
        actions.setSpacing(12)
        self.btn_export = QPushButton("EXPORT PROTOCOL")
        self.btn_export.setObjectName("accent")
        self.btn_export.clicked.connect(self.export_requested.emit)
        self.btn_reset = QPushButton("RESET")
        self.btn_reset.clicked.connect(self.reset_requested.emit)
        actions.addWidget(self.btn_export)
        actions.addWidget(self.btn_reset)
        layout.addLayout(actions)

        layout.addStretch()
        scroll.setWidget(content)

    def show_analysis(self, analysis: Analysis) -> None:
        profile = analysis.profile
        self.alias_label.setText(profile.username)
        self.profile_label.setText(f"{profile.genre_label} • {profile.intensity_label}")
        self.peak_label.setText(analysis.peak_window)
        self.apm_card.set_text(str(analysis.apm))
        self.flush_card.set_rate(analysis.flush.label, analysis.flush.percentage)
        self.wake_sleep_label.setText(
            f"WAKE: {profile.wake_time}    SLEEP: {profile.sleep_time}"
        )
        self.chart_slot.set_chart(
            plot_backend.plot_rhythm_curve(analysis.result, self.chart_height)
        )
        self._set_slots(analysis.slots)

    def _set_slots(self, slots: List[TimeSlot]) -> None:
        for row in self._slot_rows:
            self.slots_layout.removeWidget(row)
            row.deleteLater()
        self._slot_rows = [TimeSlotRow(slot) for slot in slots]
        for row in self._slot_rows:
            self.slots_layout.addWidget(row)
