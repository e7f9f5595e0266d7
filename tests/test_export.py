"""Tests for the protocol image export (runs on the offscreen Qt platform)."""

import pytest

from apex_rhythm.config import DEFAULT_CONFIG
from apex_rhythm.services.schedule_service import ScheduleService
from apex_rhythm.ui.export_image import (
    export_filename, render_protocol_image, save_protocol_image,
)


@pytest.fixture
def analysis(form):
    svc = ScheduleService(DEFAULT_CONFIG["form_defaults"])
    return svc.analyze(form)


class TestExportImage:
    def test_filename(self):
        assert export_filename("Viper") == "apex-rhythm-viper-protocol.png"
        assert export_filename("NoScope") == "apex-rhythm-noscope-protocol.png"

    def test_render_size(self, qapp, analysis):
        img = render_protocol_image(analysis)
        assert img.width() == 1920
        assert img.height() == 1080
        assert not img.isNull()

    def test_render_custom_size(self, qapp, analysis):
        img = render_protocol_image(analysis, 960, 1080)
        assert (img.width(), img.height()) == (960, 1080)

    def test_save_png(self, qapp, analysis, tmp_path):
        target = tmp_path / "out" / export_filename(analysis.profile.username)
        path = save_protocol_image(analysis, target)
        assert path == target
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
