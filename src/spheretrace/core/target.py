"""Render target: the 8-bit RGB pixel buffer kernels write into.

The buffer is preallocated to MAX_IMAGE_WIDTH x MAX_IMAGE_HEIGHT so that
changing the image size never forces kernel recompilation; only the active
region set by ``setup_render_target`` is rendered and exported. It is indexed
``[x, y]`` with ``y = 0`` the top row, so the exported array needs a
transpose but no vertical flip.

Every kernel that fills the buffer writes each pixel from exactly one
iteration, so the buffer needs no locking.
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

# Maximum supported image dimensions (preallocated to avoid kernel recompilation)
MAX_IMAGE_WIDTH = 2048
MAX_IMAGE_HEIGHT = 2048

# Image dimensions (actual active size)
_image_width = ti.field(dtype=ti.i32, shape=())
_image_height = ti.field(dtype=ti.i32, shape=())

# Quantized RGB pixels (preallocated to max size)
pixels = ti.Vector.field(3, dtype=ti.u8, shape=(MAX_IMAGE_WIDTH, MAX_IMAGE_HEIGHT))

# Flag to track if render target is initialized
_render_target_initialized = ti.field(dtype=ti.i32, shape=())


def setup_render_target(width: int, height: int) -> None:
    """Initialize the render target.

    Sets the active image dimensions and clears the buffer to black.

    Args:
        width: Image width in pixels (max MAX_IMAGE_WIDTH).
        height: Image height in pixels (max MAX_IMAGE_HEIGHT).

    Raises:
        ValueError: If a dimension is not positive or exceeds the maximum
            supported size.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions ({width}x{height}) must be positive")
    if width > MAX_IMAGE_WIDTH or height > MAX_IMAGE_HEIGHT:
        raise ValueError(
            f"Image dimensions ({width}x{height}) exceed maximum supported "
            f"({MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT})"
        )

    _image_width[None] = width
    _image_height[None] = height
    _render_target_initialized[None] = 1

    clear_render_target()


@ti.kernel
def _clear_pixels():
    for x, y in pixels:
        pixels[x, y] = ti.Vector([0, 0, 0], dt=ti.u8)


def clear_render_target() -> None:
    """Clear the pixel buffer to black."""
    _clear_pixels()


def reset_render_target() -> None:
    """Clear the buffer and mark the render target as not set up."""
    clear_render_target()
    _render_target_initialized[None] = 0


def get_image_dimensions() -> tuple[int, int]:
    """Get the current render target dimensions.

    Returns:
        Tuple of (width, height).
    """
    return int(_image_width[None]), int(_image_height[None])


def check_render_target_initialized() -> None:
    """Raise if the render target has not been set up."""
    if _render_target_initialized[None] == 0:
        raise RuntimeError("Render target not set up. Call setup_render_target() first.")


def get_image_numpy() -> npt.NDArray[np.uint8]:
    """Get the active region of the pixel buffer as a NumPy array.

    Returns:
        Array of shape (height, width, 3) with dtype uint8, row 0 at the top.

    Raises:
        RuntimeError: If render target has not been set up.
    """
    check_render_target_initialized()

    width, height = get_image_dimensions()

    full_image = pixels.to_numpy()
    image = full_image[:width, :height, :]

    # (width, height, 3) -> (height, width, 3)
    image = np.transpose(image, (1, 0, 2))

    return np.ascontiguousarray(image, dtype=np.uint8)
