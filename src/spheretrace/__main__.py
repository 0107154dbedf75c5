"""Render the reference sphere to ``output.png``.

Usage:
    python -m spheretrace

There are no options: the scene, image size (1024x1024), sample count and
output path are fixed by ``spheretrace.core.config``. The output file is
overwritten on every run. The exit status is non-zero if the image cannot
be rendered or written.
"""

from __future__ import annotations

import logging
import sys
import time

import taichi as ti

logger = logging.getLogger("spheretrace")


def init_backend() -> None:
    """Initialize Taichi, preferring the GPU and falling back to the CPU."""
    try:
        ti.init(arch=ti.gpu)
        logger.info("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        logger.info("Using CPU backend")


def render_to_file(config=None) -> str:
    """Render a sphere image and write it to the configured output path.

    Taichi must already be initialized.

    Args:
        config: RenderConfig to use. Defaults to the reference scene.

    Returns:
        The path written.

    Raises:
        OSError: If the output file cannot be written.
    """
    # Lazy imports so Taichi fields are created after initialization
    from spheretrace.core.config import default_render_config
    from spheretrace.core.renderer import SphereRenderer

    if config is None:
        config = default_render_config()

    renderer = SphereRenderer(config)

    logger.info(
        "Rendering %dx%d sphere, %d samples per pixel...",
        renderer.width,
        renderer.height,
        config.samples_per_pixel,
    )
    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        logger.debug("  Progress: %d/%d rows (%.1f%%)", done, total, 100.0 * done / total)

    renderer.render(callback=progress_callback)
    path = renderer.save_image()

    logger.info("Total time: %.2fs", time.time() - start_time)
    return path


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    init_backend()

    try:
        render_to_file()
        return 0
    except Exception as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
