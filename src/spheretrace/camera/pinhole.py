"""Pinhole camera model for primary ray generation.

The eye sits at the world origin and looks along +z. A virtual sensor of
``sensor_width x sensor_height`` pixels, each ``pixel_size`` world units wide,
is centered on the optical axis at depth ``focal_length``. Pixel (0, 0) is
the upper-left corner of the sensor; image rows grow downward while world y
grows upward, so the y coordinate is flipped when mapping pixels to the
sensor plane.

For pixel (x, y) and sub-pixel jitter (jx, jy):

    upper_left_x = -pixel_size * sensor_width / 2
    upper_left_y = +pixel_size * sensor_height / 2
    sample_x     = upper_left_x + (x + jx) * pixel_size
    sample_y     = upper_left_y - (y + jy) * pixel_size

and the ray runs from the origin toward (sample_x, sample_y, focal_length).

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from spheretrace.camera.pinhole import PinholeCamera, setup_camera, get_ray
    >>>
    >>> camera = PinholeCamera(
    ...     focal_length=1.0,
    ...     sensor_width=1024,
    ...     sensor_height=1024,
    ...     pixel_size=0.001,
    ... )
    >>> setup_camera(camera)
    >>>
    >>> @ti.kernel
    ... def render():
    ...     ray = get_ray(512, 512, 0.0, 0.0)  # Ray through the sensor center
"""

from dataclasses import dataclass

import taichi as ti

from spheretrace.core.ray import Ray, make_ray, normalize, vec3

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass
class PinholeCamera:
    """Configuration for a pinhole camera fixed at the origin.

    Attributes:
        focal_length: Distance from the eye to the sensor plane (positive).
        sensor_width: Sensor width in pixels.
        sensor_height: Sensor height in pixels.
        pixel_size: World units covered by one pixel.
    """

    focal_length: float
    sensor_width: int
    sensor_height: int
    pixel_size: float


# =============================================================================
# Taichi Fields for Camera State
# =============================================================================

_upper_left_x = ti.field(dtype=ti.f32, shape=())
_upper_left_y = ti.field(dtype=ti.f32, shape=())
_pixel_size = ti.field(dtype=ti.f32, shape=())
_focal_length = ti.field(dtype=ti.f32, shape=())
_sensor_width = ti.field(dtype=ti.i32, shape=())
_sensor_height = ti.field(dtype=ti.i32, shape=())


# =============================================================================
# Camera Setup (Python-side, called once per camera configuration)
# =============================================================================


def setup_camera(camera: PinholeCamera) -> None:
    """Initialize camera state from configuration.

    Computes the upper-left corner of the sensor and stores it, together with
    the pixel size and focal length, in Taichi fields. This must be called
    before rendering.

    Args:
        camera: Camera configuration.

    Note:
        This function writes to Taichi fields and should be called from
        Python (not from within a Taichi kernel).
    """
    _upper_left_x[None] = -camera.pixel_size * camera.sensor_width / 2.0
    _upper_left_y[None] = camera.pixel_size * camera.sensor_height / 2.0
    _pixel_size[None] = camera.pixel_size
    _focal_length[None] = camera.focal_length
    _sensor_width[None] = camera.sensor_width
    _sensor_height[None] = camera.sensor_height


# =============================================================================
# Ray Generation
# =============================================================================


@ti.func
def get_ray(x: ti.i32, y: ti.i32, jitter_x: ti.f32, jitter_y: ti.f32) -> Ray:
    """Generate a ray through a (possibly jittered) point of pixel (x, y).

    Args:
        x: Pixel column, 0 <= x < sensor_width (0 = left).
        y: Pixel row, 0 <= y < sensor_height (0 = top).
        jitter_x: Horizontal sub-pixel offset, normally in [-0.5, 0.5).
        jitter_y: Vertical sub-pixel offset, normally in [-0.5, 0.5).

    Returns:
        A Ray from the origin with unit-length direction toward the sensor
        point.
    """
    pixel_size = _pixel_size[None]
    sample_x = _upper_left_x[None] + (ti.cast(x, ti.f32) + jitter_x) * pixel_size
    sample_y = _upper_left_y[None] - (ti.cast(y, ti.f32) + jitter_y) * pixel_size

    origin = vec3(0.0, 0.0, 0.0)
    sensor_point = vec3(sample_x, sample_y, _focal_length[None])
    direction = normalize(sensor_point - origin)

    return make_ray(origin, direction)


@ti.func
def get_ray_jittered(x: ti.i32, y: ti.i32, jitter_span: ti.f32) -> Ray:
    """Generate a randomly jittered ray for anti-aliasing.

    Draws two independent uniform offsets in
    [-jitter_span / 2, jitter_span / 2), i.e. [-0.5, 0.5) for the default
    span of 1.0. A span of 0.0 yields the unjittered ray.

    Args:
        x: Pixel column (0 = left).
        y: Pixel row (0 = top).
        jitter_span: Width of the jitter interval.

    Returns:
        A Ray with random sub-pixel offset.
    """
    jitter_x = (ti.random(ti.f32) - 0.5) * jitter_span
    jitter_y = (ti.random(ti.f32) - 0.5) * jitter_span
    return get_ray(x, y, jitter_x, jitter_y)


# =============================================================================
# Utility Functions
# =============================================================================


def get_camera_info() -> dict[str, float | int]:
    """Get current camera state for debugging.

    Returns:
        Dictionary with upper_left_x, upper_left_y, pixel_size,
        focal_length, sensor_width and sensor_height.
    """
    return {
        "upper_left_x": float(_upper_left_x[None]),
        "upper_left_y": float(_upper_left_y[None]),
        "pixel_size": float(_pixel_size[None]),
        "focal_length": float(_focal_length[None]),
        "sensor_width": int(_sensor_width[None]),
        "sensor_height": int(_sensor_height[None]),
    }
