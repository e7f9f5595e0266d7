"""Shared fixtures. Qt runs headless so export tests work without a display."""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def form():
    """A valid default form: 06:00 -> 22:30, FPS, Casual."""
    return {
        "username": "Viper",
        "wake_time": "06:00",
        "sleep_time": "22:30",
        "genre": "FPS",
        "intensity": "Casual",
    }
