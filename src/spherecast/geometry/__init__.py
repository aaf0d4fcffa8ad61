"""Geometry module for shape primitives.

Components:
    hittable: HitRecord and the Hittable protocol
    sphere: Sphere primitive with ray-sphere intersection

Ray-object intersection follows the pattern:
    rec = shape.hit(ray, t_min, t_max)  # HitRecord or None
"""

from .hittable import HitRecord, Hittable
from .sphere import Sphere

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
]
