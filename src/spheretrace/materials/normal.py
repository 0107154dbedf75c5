"""Normal-shading material.

Colors a surface point by its geometric normal: each component of the unit
normal, which lies in [-1, 1], is remapped to a color channel in [0, 1]:

    color = (normal + 1) * 0.5

There is no light source, no shadowing and no view dependence. Rays that
miss the sphere are not shaded at all; they contribute BACKGROUND_COLOR
(black) to the pixel estimate.

Example:
    >>> # Within a Taichi kernel:
    >>> # color = shade_normal(sphere_normal(sphere, hit_point))
"""

import taichi as ti

from spheretrace.core.ray import vec3

# Contribution of a sample that misses the sphere
BACKGROUND_COLOR = vec3(0.0, 0.0, 0.0)


@ti.func
def shade_normal(normal: vec3) -> vec3:
    """Map a unit surface normal to an RGB color in [0, 1].

    Args:
        normal: The unit-length surface normal at the hit point.

    Returns:
        (normal + 1) * 0.5, component-wise.
    """
    return (normal + 1.0) * 0.5
