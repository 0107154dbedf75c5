"""Core rendering module.

Components:
    ray: Ray data structure and vector helpers
    config: Named constants and the RenderConfig dataclass
    target: Preallocated 8-bit RGB render target
    sampler: Per-pixel supersampling kernels
    gradient: Gradient test image
    renderer: SphereRenderer orchestration class

All per-pixel work runs in Taichi kernels parallelised over pixels.
"""

from .ray import (
    Ray,
    dot,
    length_squared,
    make_ray,
    normalize,
    ray_at,
    vec3,
)

# Note: config, sampler and renderer are NOT imported here to avoid circular
# imports (config depends on the camera package, which depends on core.ray).
# Import directly from spheretrace.core.renderer when needed:
#   from spheretrace.core.renderer import SphereRenderer

__all__ = [
    "Ray",
    "ray_at",
    "make_ray",
    "vec3",
    "length_squared",
    "normalize",
    "dot",
]
