"""Gradient test image.

Fills the render target with a two-axis color ramp, pixel (x, y) =
(x mod 255, y mod 255, 50). It exercises the render target and the PNG
export without any ray tracing, which makes it a quick check that the
output side of the pipeline works.
"""

import taichi as ti

from spheretrace.core.config import GRADIENT_BLUE, GRADIENT_SIZE, GRADIENT_WRAP
from spheretrace.core.target import pixels, setup_render_target


@ti.kernel
def _fill_gradient(width: ti.i32, height: ti.i32, wrap: ti.i32, blue: ti.i32):
    for x, y in ti.ndrange(width, height):
        pixels[x, y] = ti.cast(ti.Vector([x % wrap, y % wrap, blue]), ti.u8)


def render_gradient(width: int = GRADIENT_SIZE, height: int = GRADIENT_SIZE) -> None:
    """Set up a render target of the given size and fill it with the gradient.

    Raises:
        ValueError: If the dimensions are not supported by the render target.
    """
    setup_render_target(width, height)
    _fill_gradient(width, height, GRADIENT_WRAP, GRADIENT_BLUE)
