"""
ApexRhythm — ultradian performance scheduling.
Application bootstrap: logging, config, Qt application, main window.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from apex_rhythm.config import load_config
from apex_rhythm.ui.main_window import MainWindow
from apex_rhythm.ui.styles import DARK_STYLESHEET


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("apex_rhythm.log", encoding="utf-8"),
        ],
    )


def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting ApexRhythm...")

    config = load_config()

    app = QApplication(sys.argv)
    app.setApplicationName("ApexRhythm")
    app.setOrganizationName("ApexRhythm")

    # Apply dark theme globally
    app.setStyleSheet(DARK_STYLESHEET)

    window = MainWindow(config)
    window.show()

    logger.info("Application started.")
    sys.exit(app.exec())
