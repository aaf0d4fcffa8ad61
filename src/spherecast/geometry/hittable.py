"""Hit records and the Hittable capability.

Every object a ray can strike (a single sphere or a whole scene) exposes
the same method::

    hit(ray, t_min, t_max) -> HitRecord | None

A hit is only valid if its ray parameter lies strictly inside
``(t_min, t_max)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from spherecast.core.ray import Point3, Ray, Vec3, dot

if TYPE_CHECKING:
    from spherecast.materials.material import Material


@dataclass
class HitRecord:
    """Record of a ray-surface intersection.

    Attributes:
        point: The 3D point where the ray intersected the surface.
        normal: The surface normal at the intersection point. Unit length
            and always oriented against the incoming ray.
        t: The parameter value along the ray where intersection occurred.
        front_face: True if the ray struck the outward-facing side.
        material: The material of the struck surface (shared reference).
    """

    point: Point3
    normal: Vec3
    t: float
    front_face: bool
    material: Material

    @classmethod
    def from_outward_normal(
        cls,
        ray: Ray,
        t: float,
        point: Point3,
        outward_normal: Vec3,
        material: Material,
    ) -> HitRecord:
        """Build a record, orienting the normal against the ray."""
        rec = cls(point=point, normal=outward_normal, t=t, front_face=True, material=material)
        rec.set_face_normal(ray, outward_normal)
        return rec

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the stored normal against the ray and record the face side.

        Args:
            ray: The incoming ray.
            outward_normal: The geometric normal (unit length).
        """
        self.front_face = dot(ray.direction, outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(Protocol):
    """Anything a ray can be intersected with."""

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None: ...
