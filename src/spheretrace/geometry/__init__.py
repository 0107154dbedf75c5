"""Geometry module: the sphere primitive and its ray intersection.

Intersection routines are Taichi functions (@ti.func) called from the
sampler kernels. A miss is reported as the negative NO_HIT distance.
"""

from .sphere import NO_HIT, Sphere, hit_sphere, sphere_normal

__all__ = [
    "Sphere",
    "NO_HIT",
    "hit_sphere",
    "sphere_normal",
]
