"""Smoke tests for the widgets (offscreen Qt platform)."""

import pytest

from apex_rhythm.config import DEFAULT_CONFIG
from apex_rhythm.core.engine import generate_cycles
from apex_rhythm.core.models import Genre, Intensity
from apex_rhythm.ui import plot_backend
from apex_rhythm.ui.main_window import MainWindow


@pytest.fixture
def window(qapp):
    w = MainWindow(DEFAULT_CONFIG)
    yield w
    w.close()
    w.deleteLater()


class TestPlotBackend:
    def test_rhythm_curve_chart(self, qapp):
        result = generate_cycles(360, 1350, Genre.FPS, Intensity.CASUAL)
        view = plot_backend.plot_rhythm_curve(result)
        # 4 glow line layers + area + 2x (halo + dots)
        assert len(view.chart().series()) == 9

    def test_empty_chart(self, qapp):
        result = generate_cycles(360, 540, Genre.FPS, Intensity.CASUAL)
        view = plot_backend.plot_rhythm_curve(result)
        assert view.chart().series() == []
        assert "no cycles" in view.chart().title()

    def test_peak_label(self):
        result = generate_cycles(360, 1350, Genre.FPS, Intensity.CASUAL)
        assert plot_backend.peak_label(result, 1) == "09:30 - 11:00: 118.6"


class TestMainWindow:
    def test_form_starts_at_defaults(self, window):
        form = window._read_form()
        assert form["wake_time"] == "06:00"
        assert form["sleep_time"] == "22:30"
        assert form["genre"] == "FPS"
        assert form["intensity"] == "Casual"
        assert form["username"] == ""

    def test_analyze_then_reset(self, window):
        window.username_input.setText("Viper")
        window._on_analyze()
        assert window.stack.currentWidget() is window.results_screen
        assert window.results_screen.peak_label.text() == "09:30 - 11:00"
        assert window.results_screen.apm_card.value_label.text() == "213"

        window.genre_input.setCurrentText("RTS")
        window._on_reset()
        assert window.stack.currentWidget() is window.setup_screen
        assert window.genre_input.currentText() == "FPS"
        assert window.username_input.text() == ""
        assert window.schedule_svc.current is None
