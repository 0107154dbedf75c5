"""Sphere primitive with geometric ray-sphere intersection.

This module provides a Sphere dataclass and an intersection function based on
the geometric construction: project the sphere center onto the ray, measure
the perpendicular distance from the center to the ray line, and step back and
forth along the ray by the half-chord length.

Given a ray with origin O and unit direction D, and a sphere with center C
and radius r:

    L   = C - O
    tca = dot(L, D)              distance along the ray to the closest approach
    d2  = dot(L, L) - tca^2      squared distance from C to the ray line
    thc = sqrt(r^2 - d2)         half-chord length
    t0, t1 = tca - thc, tca + thc

The test assumes the ray origin is outside the sphere. A sphere whose center
projects behind the origin (tca < 0) is reported as a miss without solving
for the chord, even if the infinite line would cross it.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from spheretrace.geometry.sphere import Sphere, hit_sphere
    >>> sphere = Sphere(center=ti.math.vec3(0, 0, 10), radius=1.0)
    >>> # Use hit_sphere within a Taichi kernel
"""

import taichi as ti

from spheretrace.core.ray import Ray, dot, length_squared, normalize, vec3

# Distance returned when the ray misses
NO_HIT = -1.0


@ti.dataclass
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (positive float).
    """

    center: vec3
    radius: ti.f32


@ti.func
def hit_sphere(ray: Ray, sphere: Sphere) -> ti.f32:
    """Find the nearest non-negative intersection distance along a ray.

    Selection between the two chord endpoints:
        - both negative: miss
        - t0 negative: t1
        - t1 negative: t0
        - otherwise: min(t0, t1)

    Args:
        ray: The ray to test. Its direction must be unit length, so the
            returned distance is a world-space length.
        sphere: The sphere to test against.

    Returns:
        The hit distance, or NO_HIT (negative) if there is no intersection.
    """
    result = NO_HIT

    l_vec = sphere.center - ray.origin
    tca = dot(l_vec, ray.direction)

    if tca >= 0.0:
        d2 = length_squared(l_vec) - tca * tca
        radius2 = sphere.radius * sphere.radius

        if d2 <= radius2:
            thc = ti.sqrt(radius2 - d2)
            t0 = tca - thc
            t1 = tca + thc

            if t0 < 0.0 and t1 < 0.0:
                result = NO_HIT
            elif t0 < 0.0:
                result = t1
            elif t1 < 0.0:
                result = t0
            else:
                result = ti.min(t0, t1)

    return result


@ti.func
def sphere_normal(sphere: Sphere, point: vec3) -> vec3:
    """Outward unit normal of the sphere at a surface point."""
    return normalize(point - sphere.center)
