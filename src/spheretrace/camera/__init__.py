"""Camera module for primary ray generation.

Camera responsibilities:
    - Map integer pixel coordinates plus sub-pixel jitter to world-space rays
    - Draw random jitter for stochastic anti-aliasing

Pixel coordinates use image conventions:
    x in [0, sensor_width): left to right
    y in [0, sensor_height): top to bottom
"""

from .pinhole import (
    PinholeCamera,
    get_camera_info,
    get_ray,
    get_ray_jittered,
    setup_camera,
)

__all__ = [
    "PinholeCamera",
    "setup_camera",
    "get_ray",
    "get_ray_jittered",
    "get_camera_info",
]
