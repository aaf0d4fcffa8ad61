"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Vector3/Ray primitives, vector utilities and random sampling
    integrator: ray_color, the background gradient and intersection bounds
    color: Averaging, gamma correction and 8-bit quantization
    renderer: Render settings and the per-pixel sampling loop

All random sampling goes through an explicitly passed
``numpy.random.Generator``.
"""

from .ray import (
    Color,
    Point3,
    Ray,
    Vec3,
    as_vec3,
    cross,
    dot,
    length,
    length_squared,
    near_zero,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    random_vec3,
    reflect,
    reflectance,
    refract,
    unit_vector,
    vec3,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports
# (they depend on geometry and camera, which depend on this module).
# Import directly from spherecast.core.integrator or spherecast.core.renderer.

__all__ = [
    "Vec3",
    "Point3",
    "Color",
    "Ray",
    "vec3",
    "as_vec3",
    "length",
    "length_squared",
    "unit_vector",
    "dot",
    "cross",
    "reflect",
    "refract",
    "reflectance",
    "near_zero",
    "random_vec3",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_in_unit_disk",
]
