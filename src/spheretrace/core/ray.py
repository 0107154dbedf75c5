"""Ray data structure and vector utilities.

This module provides the Ray dataclass and the small set of vector helpers
used by the camera, the intersection test and the shader. All operations are
Taichi functions and run inside kernels.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> origin = ti.math.vec3(0.0, 0.0, 0.0)
    >>> direction = ti.math.vec3(0.0, 0.0, 1.0)
    >>> ray = Ray(origin=origin, direction=direction)
    >>> point = ray_at(ray, 5.0)  # Point 5 units along the ray
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction vector of the ray (vec3). Expected to be
            unit length; the camera normalizes before building a ray and
            the intersection test does not re-normalize.
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: Ray, t: ti.f32) -> vec3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    """Create a ray from origin and direction."""
    return Ray(origin=origin, direction=direction)


# =============================================================================
# Vector Helpers
# =============================================================================
#
# Used by geometry.sphere and camera.pinhole.


@ti.func
def dot(a: vec3, b: vec3) -> ti.f32:
    return tm.dot(a, b)


@ti.func
def length_squared(v: vec3) -> ti.f32:
    """Squared magnitude, v . v. The sphere test compares it against r^2."""
    return dot(v, v)


@ti.func
def normalize(v: vec3) -> vec3:
    """Scale v to unit length. Undefined for the zero vector."""
    return tm.normalize(v)
