"""Supersampling kernels for the normal-shaded sphere.

For every pixel the sampler takes a fixed number of jittered camera rays,
intersects each with the sphere, shades the hits by their surface normal and
averages the results:

    accumulator = 0
    repeat samples_per_pixel times:
        ray = camera ray through pixel (x, y) + random jitter
        t = hit_sphere(ray, sphere)
        if t is a hit:
            accumulator += shade_normal(sphere_normal(sphere, ray_at(ray, t)))
    color = accumulator / samples_per_pixel

The sum is divided by the number of samples, not the number of hits, so a
pixel only partly covered by the sphere is darkened toward the black
background. This is what produces the soft antialiased silhouette. The
average is quantized to 8 bits by truncation (``channel * 255`` cast to an
integer, no rounding and no clamping).

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from spheretrace.camera.pinhole import PinholeCamera, setup_camera
    >>> from spheretrace.core.sampler import render_image, setup_sphere
    >>> from spheretrace.core.target import setup_render_target
    >>>
    >>> setup_camera(PinholeCamera(1.0, 1024, 1024, 0.001))
    >>> setup_sphere((0.0, 0.0, 10.0), 1.0)
    >>> setup_render_target(1024, 1024)
    >>> render_image()
"""

import taichi as ti

from spheretrace.camera.pinhole import get_ray, get_ray_jittered
from spheretrace.core.config import JITTER_SPAN, SUPERSAMPLE
from spheretrace.core.ray import Ray, ray_at, vec3
from spheretrace.core.target import (
    check_render_target_initialized,
    get_image_dimensions,
    pixels,
)
from spheretrace.geometry.sphere import Sphere, hit_sphere, sphere_normal
from spheretrace.materials.normal import BACKGROUND_COLOR, shade_normal

# Integer 8-bit channel values returned to Python
ivec3 = ti.types.vector(3, ti.i32)

# =============================================================================
# Sphere Configuration
# =============================================================================

_sphere_center = ti.Vector.field(3, dtype=ti.f32, shape=())
_sphere_radius = ti.field(dtype=ti.f32, shape=())


def setup_sphere(center: tuple[float, float, float], radius: float) -> None:
    """Store the sphere that every kernel in this module renders.

    Args:
        center: Sphere center in world space.
        radius: Sphere radius (should be positive).
    """
    _sphere_center[None] = [center[0], center[1], center[2]]
    _sphere_radius[None] = radius


def get_sphere_info() -> dict[str, object]:
    """Get the configured sphere for debugging."""
    c = _sphere_center[None]
    return {
        "center": (float(c[0]), float(c[1]), float(c[2])),
        "radius": float(_sphere_radius[None]),
    }


@ti.func
def _scene_sphere() -> Sphere:
    return Sphere(center=_sphere_center[None], radius=_sphere_radius[None])


# =============================================================================
# Sampling Core
# =============================================================================


@ti.func
def shade_ray(ray: Ray) -> vec3:
    """Color contributed by a single ray: the shaded normal on a hit,
    BACKGROUND_COLOR on a miss."""
    sphere = _scene_sphere()
    color = BACKGROUND_COLOR
    t = hit_sphere(ray, sphere)
    if t >= 0.0:
        color = shade_normal(sphere_normal(sphere, ray_at(ray, t)))
    return color


@ti.func
def supersample_pixel(x: ti.i32, y: ti.i32, samples: ti.i32, jitter_span: ti.f32) -> vec3:
    """Average of ``samples`` jittered sample colors for pixel (x, y)."""
    accumulator = vec3(0.0, 0.0, 0.0)
    for _ in range(samples):
        ray = get_ray_jittered(x, y, jitter_span)
        accumulator += shade_ray(ray)
    return accumulator / ti.cast(samples, ti.f32)


@ti.func
def quantize(color: vec3):
    """Truncate a [0, 1] color to 8-bit channels."""
    return ti.cast(color * 255.0, ti.u8)


# =============================================================================
# Rendering Kernels
# =============================================================================


@ti.kernel
def _render_rows(
    row_start: ti.i32,
    row_end: ti.i32,
    width: ti.i32,
    samples: ti.i32,
    jitter_span: ti.f32,
):
    """Render rows [row_start, row_end) into the pixel buffer.

    Each (x, y) iteration owns exactly one buffer cell.
    """
    for x, y in ti.ndrange(width, (row_start, row_end)):
        pixels[x, y] = quantize(supersample_pixel(x, y, samples, jitter_span))


@ti.kernel
def _render_single_pixel(x: ti.i32, y: ti.i32, samples: ti.i32, jitter_span: ti.f32) -> ivec3:
    """Supersampled, quantized color of one pixel."""
    return ti.cast(supersample_pixel(x, y, samples, jitter_span) * 255.0, ti.i32)


@ti.kernel
def _trace_single_sample(x: ti.i32, y: ti.i32, jitter_x: ti.f32, jitter_y: ti.f32) -> vec3:
    """Color of one camera ray with an explicit jitter."""
    return shade_ray(get_ray(x, y, jitter_x, jitter_y))


# =============================================================================
# Public Rendering API
# =============================================================================


def render_rows(
    row_start: int,
    row_end: int,
    samples_per_pixel: int = SUPERSAMPLE,
    jitter_span: float = JITTER_SPAN,
) -> None:
    """Render a band of rows into the render target.

    Args:
        row_start: First row to render (inclusive).
        row_end: Last row to render (exclusive); clipped to the image height.
        samples_per_pixel: Jittered samples averaged per pixel.
        jitter_span: Width of the per-axis jitter interval.

    Raises:
        RuntimeError: If render target has not been set up.
    """
    check_render_target_initialized()

    width, height = get_image_dimensions()
    row_start = max(row_start, 0)
    row_end = min(row_end, height)
    if row_start >= row_end:
        return

    _render_rows(row_start, row_end, width, samples_per_pixel, jitter_span)


def render_image(
    samples_per_pixel: int = SUPERSAMPLE,
    jitter_span: float = JITTER_SPAN,
) -> None:
    """Render every pixel of the render target.

    Args:
        samples_per_pixel: Jittered samples averaged per pixel.
        jitter_span: Width of the per-axis jitter interval.

    Raises:
        RuntimeError: If render target has not been set up.
    """
    check_render_target_initialized()

    _, height = get_image_dimensions()
    render_rows(0, height, samples_per_pixel, jitter_span)


def render_pixel(
    x: int,
    y: int,
    samples_per_pixel: int = SUPERSAMPLE,
    jitter_span: float = JITTER_SPAN,
) -> tuple[int, int, int]:
    """Render a single pixel without touching the render target.

    Applies the same averaging and truncation as ``render_image``.

    Returns:
        Tuple of 8-bit (R, G, B) values.
    """
    color = _render_single_pixel(x, y, samples_per_pixel, jitter_span)
    return (int(color[0]), int(color[1]), int(color[2]))


def trace_sample(x: int, y: int, jitter_x: float = 0.0, jitter_y: float = 0.0) -> tuple[float, float, float]:
    """Trace one camera ray and return its unquantized color.

    Returns:
        Tuple of (R, G, B) values in [0, 1]; (0, 0, 0) for a miss.
    """
    color = _trace_single_sample(x, y, jitter_x, jitter_y)
    return (float(color[0]), float(color[1]), float(color[2]))
