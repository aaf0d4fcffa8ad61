"""Material capability shared by all scattering models.

A material decides what happens to a ray that strikes a surface::

    scatter(ray_in, rec, rng) -> (attenuation, scattered_ray) | None

Returning None means the ray was absorbed. Materials are immutable after
construction, so a single instance can be shared by any number of
primitives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import numpy as np
import numpy.typing as npt

from spherecast.core.ray import Color, Ray, as_vec3

if TYPE_CHECKING:
    from spherecast.geometry.hittable import HitRecord

# Result of a successful scatter: (attenuation, scattered ray)
ScatterResult = tuple[Color, Ray]


class Material(Protocol):
    """Polymorphic scattering behavior of a surface."""

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterResult | None: ...


def validate_albedo(albedo: npt.ArrayLike) -> Color:
    """Convert an albedo to a color vector, checking it lies in [0, 1].

    Raises:
        ValueError: If any albedo component is outside [0, 1].
    """
    color = as_vec3(albedo)
    for i, component in enumerate(color):
        if component < 0.0 or component > 1.0:
            raise ValueError(
                f"Albedo component {i} = {component} is outside [0, 1]. "
                "This would violate energy conservation."
            )
    color.setflags(write=False)
    return color
