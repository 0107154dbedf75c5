"""Image export for rendered images.

This module is the image sink of the renderer: it takes an 8-bit RGB buffer
and writes it to disk as a PNG via Pillow. Write failures (missing
directory, permission denied, ...) surface as ``OSError`` and are not
retried; no partial file is cleaned up.

Example:
    >>> from spheretrace.core.config import default_render_config
    >>> from spheretrace.core.renderer import SphereRenderer
    >>> from spheretrace.preview.export import save_png
    >>>
    >>> renderer = SphereRenderer(default_render_config())
    >>> renderer.render()
    >>> save_png(renderer, "output.png")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from spheretrace.core.renderer import SphereRenderer


def save_png(renderer: SphereRenderer, filepath: str) -> None:
    """Save the renderer's current image as a PNG file.

    Args:
        renderer: The SphereRenderer whose buffer should be written.
        filepath: Output file path (should end in .png). Overwritten if it
            already exists.

    Raises:
        OSError: If the file cannot be created or written.
    """
    save_png_from_array(renderer.get_image_uint8(), filepath)


def save_png_from_array(image: npt.NDArray[np.uint8], filepath: str) -> None:
    """Save an 8-bit RGB array as a PNG file.

    Args:
        image: Array of shape (H, W, 3) with dtype uint8, row 0 at the top.
        filepath: Output file path (should end in .png).

    Raises:
        ValueError: If the array is not an (H, W, 3) uint8 image.
        OSError: If the file cannot be created or written.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected dtype uint8, got {image.dtype}")

    pil_image = PILImage.fromarray(np.ascontiguousarray(image))
    pil_image.save(filepath, format="PNG")


def load_png(filepath: str) -> npt.NDArray[np.uint8]:
    """Read a PNG back into an (H, W, 3) uint8 array."""
    with PILImage.open(filepath) as pil_image:
        return np.asarray(pil_image.convert("RGB"), dtype=np.uint8)
