"""Sphere renderer driving the supersampling kernels.

This module provides a convenient wrapper around the sampler that:
- Uploads the camera and sphere from a RenderConfig
- Renders the image in bands of rows
- Reports progress through callbacks or a generator
- Exposes the finished buffer as a NumPy array or a PNG file

Rows are independent, so rendering in bands changes nothing in the output;
it only gives the caller a chance to report progress between kernel
launches.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from spheretrace.core.config import default_render_config
    >>> from spheretrace.core.renderer import SphereRenderer
    >>>
    >>> renderer = SphereRenderer(default_render_config())
    >>> renderer.render()
    >>> renderer.save_image("output.png")
"""

import logging
from collections.abc import Callable, Generator

import numpy as np
import numpy.typing as npt

from spheretrace.camera.pinhole import setup_camera
from spheretrace.core.config import RenderConfig
from spheretrace.core.sampler import render_rows, setup_sphere
from spheretrace.core.target import get_image_numpy, setup_render_target

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]

# Default number of rows rendered per kernel launch
DEFAULT_BAND_HEIGHT = 64


class SphereRenderer:
    """Renders one normal-shaded sphere image.

    The renderer owns the configuration and delegates to the global sampler
    and render target state (which lives in Taichi fields). Creating a
    renderer uploads its camera and sphere and resets the render target, so
    only the most recently created renderer should be used.

    Attributes:
        config: The render configuration.
    """

    def __init__(self, config: RenderConfig) -> None:
        """Initialize the renderer.

        Args:
            config: Camera, sphere and sampling settings. The camera sensor
                size is the image size.

        Raises:
            ValueError: If the sensor size is not supported by the render
                target.
        """
        self.config = config
        self._rows_done = 0
        self._upload()

    def _upload(self) -> None:
        setup_render_target(self.width, self.height)
        setup_camera(self.config.camera)
        setup_sphere(self.config.sphere.center, self.config.sphere.radius)
        self._rows_done = 0

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.config.width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.config.height

    @property
    def rows_done(self) -> int:
        """Number of rows rendered since the last reset."""
        return self._rows_done

    @property
    def is_complete(self) -> bool:
        return self._rows_done >= self.height

    def reset(self) -> None:
        """Clear the image and re-upload the scene for a fresh render.

        Setting up the render target again clears the buffer.
        """
        self._upload()

    def render(
        self,
        band_height: int = DEFAULT_BAND_HEIGHT,
        callback: ProgressCallback | None = None,
    ) -> None:
        """Render the whole image with an optional progress callback.

        Args:
            band_height: Rows rendered per kernel launch.
            callback: Optional callback function called after each band.
                Receives (rows_done, total_rows).

        Example:
            >>> def progress(done, total):
            ...     print(f"Progress: {done}/{total} rows")
            >>> renderer.render(band_height=128, callback=progress)
        """
        for done, total in self.render_progressive(band_height):
            if callback is not None:
                callback(done, total)

    def render_progressive(
        self,
        band_height: int = DEFAULT_BAND_HEIGHT,
    ) -> Generator[tuple[int, int], None, None]:
        """Render the image band by band, yielding progress after each band.

        Starts over from the first row; rows already rendered are rendered
        again.

        Args:
            band_height: Rows rendered per kernel launch.

        Yields:
            Tuple of (rows_done, total_rows).

        Raises:
            ValueError: If band_height is not positive.
        """
        if band_height <= 0:
            raise ValueError(f"band_height must be positive, got {band_height}")

        config = self.config
        logger.debug(
            "Rendering %dx%d with %d samples per pixel (jitter span %.3f)",
            self.width,
            self.height,
            config.samples_per_pixel,
            config.jitter_span,
        )

        self._rows_done = 0
        while self._rows_done < self.height:
            row_end = min(self._rows_done + band_height, self.height)
            render_rows(
                self._rows_done,
                row_end,
                samples_per_pixel=config.samples_per_pixel,
                jitter_span=config.jitter_span,
            )
            self._rows_done = row_end
            yield (self._rows_done, self.height)

    def get_image_uint8(self) -> npt.NDArray[np.uint8]:
        """Get the rendered image as an 8-bit NumPy array.

        Returns:
            NumPy array of shape (height, width, 3) with dtype uint8.
        """
        return get_image_numpy()

    def save_image(self, filepath: str | None = None) -> str:
        """Save the rendered image as a PNG.

        Args:
            filepath: Destination path. Defaults to the configured
                output path.

        Returns:
            The path written.

        Raises:
            OSError: If the file cannot be written.
        """
        from spheretrace.preview.export import save_png

        path = filepath if filepath is not None else self.config.output_path
        save_png(self, path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
        return path

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"SphereRenderer(width={self.width}, height={self.height}, "
            f"samples_per_pixel={self.config.samples_per_pixel}, "
            f"rows_done={self.rows_done})"
        )
