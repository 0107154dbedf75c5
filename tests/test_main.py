"""Tests for the program entry point.

``main()`` itself calls ``ti.init``, which would discard the fields of the
test session, so these tests drive ``render_to_file`` directly.
"""

import logging

import pytest


class TestRenderToFile:
    """Test rendering the reference sphere to disk."""

    def test_writes_output_png_in_working_directory(self, tmp_path, monkeypatch):
        from spheretrace.__main__ import render_to_file
        from spheretrace.preview.export import load_png

        monkeypatch.chdir(tmp_path)

        path = render_to_file()

        assert path == "output.png"
        image = load_png(str(tmp_path / "output.png"))
        assert image.shape == (1024, 1024, 3)
        assert image[512, 512, 0] in range(124, 132)
        assert tuple(image[0, 0]) == (0, 0, 0)

    def test_logs_progress(self, tmp_path, caplog):
        from spheretrace.__main__ import render_to_file
        from spheretrace.camera.pinhole import PinholeCamera
        from spheretrace.core.config import RenderConfig

        config = RenderConfig(
            camera=PinholeCamera(focal_length=1.0, sensor_width=32, sensor_height=32, pixel_size=0.032),
            output_path=str(tmp_path / "small.png"),
        )

        with caplog.at_level(logging.INFO, logger="spheretrace"):
            render_to_file(config)

        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "Rendering 32x32" in messages
        assert "small.png" in messages

    def test_write_failure_propagates(self, tmp_path):
        from spheretrace.__main__ import render_to_file
        from spheretrace.camera.pinhole import PinholeCamera
        from spheretrace.core.config import RenderConfig

        config = RenderConfig(
            camera=PinholeCamera(focal_length=1.0, sensor_width=16, sensor_height=16, pixel_size=0.064),
            output_path=str(tmp_path / "missing" / "output.png"),
        )

        with pytest.raises(OSError):
            render_to_file(config)
