"""Dielectric (glass/water) material implementation.

Key physics:
    - Snell's law for refraction: n1 * sin(theta1) = n2 * sin(theta2)
    - Schlick's approximation for Fresnel reflectance
    - Total internal reflection when sin(theta_t) > 1

The material randomly chooses between reflection and refraction based on
the Fresnel reflectance probability, which increases at grazing angles.
Dielectrics never absorb: the attenuation is always white.

Example:
    >>> from spherecast.materials.dielectric import Dielectric
    >>> glass = Dielectric(refractive_index=1.5)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from spherecast.core.ray import (
    Ray,
    Vec3,
    dot,
    reflect,
    reflectance,
    refract,
    unit_vector,
    vec3,
)
from spherecast.materials.material import ScatterResult

if TYPE_CHECKING:
    from spherecast.geometry.hittable import HitRecord

# Common indices of refraction
IOR_AIR = 1.0
IOR_WATER = 1.33
IOR_GLASS = 1.5
IOR_DIAMOND = 2.4


def refraction_ratio(ior: float, front_face: bool) -> float:
    """Ratio of refractive indices for a ray crossing the surface.

    Entering the medium (front face) gives ``1 / ior``; leaving it gives ``ior``.
    """
    return 1.0 / ior if front_face else ior


def will_reflect(ior: float, unit_direction: Vec3, normal: Vec3, front_face: bool) -> bool:
    """Determine if total internal reflection will occur.

    Args:
        ior: Index of refraction of the material.
        unit_direction: The incoming ray direction (unit length).
        normal: The surface normal (unit length, facing the incident ray).
        front_face: True if the ray hits the outside of the surface.

    Returns:
        True if the ray cannot refract.
    """
    ratio = refraction_ratio(ior, front_face)
    cos_theta = min(dot(-unit_direction, normal), 1.0)
    sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)
    return ratio * sin_theta > 1.0


def fresnel_reflectance(ior: float, unit_direction: Vec3, normal: Vec3, front_face: bool) -> float:
    """Compute Fresnel reflectance using Schlick's approximation."""
    ratio = refraction_ratio(ior, front_face)
    cos_theta = min(dot(-unit_direction, normal), 1.0)
    return reflectance(cos_theta, ratio)


@dataclass(frozen=True, eq=False)
class Dielectric:
    """Dielectric (glass/water) material.

    Attributes:
        refractive_index: Index of refraction. Values below 1.0 are allowed
            and model an air pocket inside a denser medium.
    """

    refractive_index: float = IOR_GLASS

    def __post_init__(self) -> None:
        if not self.refractive_index > 0.0:
            raise ValueError(
                f"Index of refraction = {self.refractive_index} must be positive."
            )
        object.__setattr__(self, "refractive_index", float(self.refractive_index))

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterResult | None:
        """Reflect or refract; never absorbs."""
        attenuation = vec3(1.0, 1.0, 1.0)
        ratio = refraction_ratio(self.refractive_index, rec.front_face)
        unit_direction = unit_vector(ray_in.direction)

        # Matched indices would still draw against (1 - cos)^5 and reflect
        # near grazing angles; an index of 1.0 must never bend the ray.
        if ratio == 1.0:
            return attenuation, Ray(rec.point, unit_direction)

        ior = self.refractive_index
        cannot_refract = will_reflect(ior, unit_direction, rec.normal, rec.front_face)
        if cannot_refract or rng.random() < fresnel_reflectance(
            ior, unit_direction, rec.normal, rec.front_face
        ):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return attenuation, Ray(rec.point, direction)
