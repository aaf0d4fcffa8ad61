"""Lambertian (ideal diffuse) material implementation.

The scattered direction is the surface normal plus a random unit vector,
which distributes outgoing rays with a cosine-weighted falloff around the
normal. The attenuation is always the albedo.

Example:
    >>> import numpy as np
    >>> from spherecast.materials.lambertian import Lambertian
    >>> material = Lambertian(albedo=(0.8, 0.3, 0.3))
    >>> # attenuation, scattered = material.scatter(ray_in, rec, rng)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from spherecast.core.ray import Color, Ray, Vec3, near_zero, random_unit_vector
from spherecast.materials.material import ScatterResult, validate_albedo

if TYPE_CHECKING:
    from spherecast.geometry.hittable import HitRecord


def lambertian_direction(normal: Vec3, rng: np.random.Generator) -> Vec3:
    """Sample a diffuse scatter direction around a normal.

    Args:
        normal: The surface normal at the hit point (unit length).
        rng: Random number generator.

    Returns:
        ``normal + random_unit_vector()``, or the normal itself if the sum
        degenerates to (almost) zero.
    """
    scatter_direction = normal + random_unit_vector(rng)

    # Catch degenerate scatter direction (random vector opposite the normal)
    if near_zero(scatter_direction):
        scatter_direction = normal

    return scatter_direction


@dataclass(frozen=True, eq=False)
class Lambertian:
    """Lambertian (ideal diffuse) material.

    Attributes:
        albedo: The diffuse reflectance color (RGB, each component in [0, 1]).
    """

    albedo: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", validate_albedo(self.albedo))

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterResult | None:
        """Scatter diffusely. Lambertian surfaces never absorb."""
        scattered = Ray(rec.point, lambertian_direction(rec.normal, rng))
        return self.albedo, scattered
