#!/usr/bin/env python3
"""Render the 512x512 gradient test image to output.png.

Pixel (x, y) is (x mod 255, y mod 255, 50). No ray tracing is involved;
this checks the render target and PNG export on their own.

Usage:
    python examples/render_gradient.py
"""

from __future__ import annotations

import logging
import sys

import taichi as ti

logger = logging.getLogger("spheretrace.examples")


def render_gradient_to_file(output_path: str | None = None) -> str:
    """Render the gradient and save it.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from spheretrace.core.config import OUTPUT_PATH
    from spheretrace.core.gradient import render_gradient
    from spheretrace.core.target import get_image_numpy
    from spheretrace.preview.export import save_png_from_array

    path = output_path if output_path is not None else OUTPUT_PATH
    render_gradient()
    save_png_from_array(get_image_numpy(), path)
    logger.info("Saved gradient to %s", path)
    return path


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    ti.init(arch=ti.cpu)

    try:
        render_gradient_to_file()
        return 0
    except Exception as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
