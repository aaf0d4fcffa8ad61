"""Metal (specular reflective) material implementation.

Perfect metals (fuzz=0) produce mirror-like reflections, while fuzzier
metals perturb the reflected direction by a random offset inside a sphere
of radius ``fuzz``.

The reflection formula is:
    R = I - 2(I . N)N

where I is the unit incident direction and N is the surface normal.

The ray is absorbed when the perturbed direction ends up below the surface.

Example:
    >>> from spherecast.materials.metal import Metal
    >>> gold = Metal(albedo=(0.8, 0.6, 0.2), fuzz=0.3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from spherecast.core.ray import (
    Color,
    Ray,
    dot,
    random_in_unit_sphere,
    reflect,
    unit_vector,
)
from spherecast.materials.material import ScatterResult, validate_albedo

if TYPE_CHECKING:
    from spherecast.geometry.hittable import HitRecord


def clamp_fuzz(fuzz: float) -> float:
    """Clamp a fuzz value to [0, 1]."""
    return min(max(float(fuzz), 0.0), 1.0)


@dataclass(frozen=True, eq=False)
class Metal:
    """Metal (specular reflective) material.

    Attributes:
        albedo: The reflective color (RGB, each component in [0, 1]).
        fuzz: The surface roughness, clamped to [0, 1] at construction.
            0 = perfect mirror, 1 = maximum fuzziness.
    """

    albedo: Color
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", validate_albedo(self.albedo))
        object.__setattr__(self, "fuzz", clamp_fuzz(self.fuzz))

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterResult | None:
        """Reflect about the normal, perturbed by fuzz.

        Returns:
            (albedo, reflected ray), or None if the perturbed direction points
            into the surface.
        """
        reflected = reflect(unit_vector(ray_in.direction), rec.normal)
        direction = reflected
        if self.fuzz > 0.0:
            direction = reflected + self.fuzz * random_in_unit_sphere(rng)

        if dot(direction, rec.normal) <= 0.0:
            return None
        return self.albedo, Ray(rec.point, direction)
