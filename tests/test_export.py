"""Tests for PNG export and the gradient test image.

Note: Imports are done inside test methods to avoid Taichi initialization issues.
"""

import numpy as np
import pytest


class TestSavePngFromArray:
    """Test save_png_from_array."""

    def test_roundtrip_preserves_pixels(self, tmp_path):
        from spheretrace.preview.export import load_png, save_png_from_array

        rng = np.random.default_rng(0)
        image = rng.integers(0, 256, size=(12, 20, 3), dtype=np.uint8)
        path = tmp_path / "noise.png"

        save_png_from_array(image, str(path))

        assert np.array_equal(load_png(str(path)), image)

    def test_rejects_wrong_shape(self, tmp_path):
        from spheretrace.preview.export import save_png_from_array

        with pytest.raises(ValueError, match="H, W, 3"):
            save_png_from_array(np.zeros((4, 4), dtype=np.uint8), str(tmp_path / "x.png"))

        with pytest.raises(ValueError, match="H, W, 3"):
            save_png_from_array(np.zeros((4, 4, 4), dtype=np.uint8), str(tmp_path / "x.png"))

    def test_rejects_float_image(self, tmp_path):
        from spheretrace.preview.export import save_png_from_array

        with pytest.raises(ValueError, match="uint8"):
            save_png_from_array(np.zeros((4, 4, 3), dtype=np.float32), str(tmp_path / "x.png"))

    def test_unwritable_destination_raises(self, tmp_path):
        from spheretrace.preview.export import save_png_from_array

        image = np.zeros((4, 4, 3), dtype=np.uint8)
        with pytest.raises(OSError):
            save_png_from_array(image, str(tmp_path / "no" / "such" / "dir.png"))

    def test_non_png_extension_still_writes_png(self, tmp_path):
        from spheretrace.preview.export import save_png_from_array

        path = tmp_path / "image.out"
        save_png_from_array(np.zeros((2, 2, 3), dtype=np.uint8), str(path))

        assert path.read_bytes()[:4] == b"\x89PNG"


class TestGradient:
    """Test the gradient test image."""

    def test_gradient_values(self):
        from spheretrace.core.gradient import render_gradient
        from spheretrace.core.target import get_image_dimensions, get_image_numpy

        render_gradient()
        image = get_image_numpy()

        assert get_image_dimensions() == (512, 512)
        assert image.shape == (512, 512, 3)

        ys, xs = np.mgrid[0:512, 0:512]
        assert np.array_equal(image[:, :, 0], (xs % 255).astype(np.uint8))
        assert np.array_equal(image[:, :, 1], (ys % 255).astype(np.uint8))
        assert np.all(image[:, :, 2] == 50)

    def test_gradient_wraps_at_255(self):
        from spheretrace.core.gradient import render_gradient
        from spheretrace.core.target import get_image_numpy

        render_gradient()
        image = get_image_numpy()

        # Column 254 is the brightest red, column 255 wraps back to 0
        assert image[0, 254, 0] == 254
        assert image[0, 255, 0] == 0
        assert image[300, 0, 1] == 300 % 255

    def test_gradient_custom_size(self):
        from spheretrace.core.gradient import render_gradient
        from spheretrace.core.target import get_image_numpy

        render_gradient(64, 32)
        image = get_image_numpy()

        assert image.shape == (32, 64, 3)
        assert tuple(image[31, 63]) == (63, 31, 50)

    def test_gradient_saved_to_png(self, tmp_path):
        from spheretrace.core.gradient import render_gradient
        from spheretrace.core.target import get_image_numpy
        from spheretrace.preview.export import load_png, save_png_from_array

        render_gradient()
        path = tmp_path / "output.png"
        save_png_from_array(get_image_numpy(), str(path))

        loaded = load_png(str(path))
        assert loaded.shape == (512, 512, 3)
        assert tuple(loaded[10, 20]) == (20, 10, 50)
