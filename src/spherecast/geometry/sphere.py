"""Sphere primitive with ray-sphere intersection.

The intersection substitutes the ray into the implicit sphere equation and
solves the resulting quadratic using the half-b formulation:

    a*t^2 + 2*h*t + c = 0

where:
    a = dot(direction, direction)
    h = dot(oc, direction)  (half of traditional b)
    c = dot(oc, oc) - radius^2
    oc = origin - center

A negative radius is allowed and models a hollow shell: the radius only
enters the intersection math squared, while the outward normal is divided by
the signed radius, so it points inward and every hit on the shell from
outside is reported as a back-face hit.

Example:
    >>> from spherecast.core.ray import Ray, vec3
    >>> from spherecast.geometry.sphere import Sphere
    >>> from spherecast.materials.lambertian import Lambertian
    >>> sphere = Sphere(vec3(0, 0, -1), 0.5, Lambertian(vec3(0.5, 0.5, 0.5)))
    >>> rec = sphere.hit(Ray(vec3(0, 0, 0), vec3(0, 0, -1)), 0.001, float("inf"))
    >>> rec.t
    0.5
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy.typing as npt

from spherecast.core.ray import Point3, Ray, as_vec3, dot, length_squared
from spherecast.geometry.hittable import HitRecord

if TYPE_CHECKING:
    from spherecast.materials.material import Material


class Sphere:
    """A sphere defined by center point, radius and material.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere. Negative values flip the normal
            to build hollow shells.
        material: The material shared with other primitives.
    """

    __slots__ = ("center", "radius", "material")

    def __init__(self, center: npt.ArrayLike, radius: float, material: Material) -> None:
        """Create a sphere.

        Raises:
            ValueError: If the radius is zero.
        """
        if radius == 0.0:
            raise ValueError("Sphere radius must be nonzero")
        self.center: Point3 = as_vec3(center)
        self.radius = float(radius)
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test for ray-sphere intersection.

        The smaller root is preferred; if it lies outside ``(t_min, t_max)``
        the larger root is tried.

        Args:
            ray: The ray to test.
            t_min: Minimum t value for a valid hit (avoids self-intersection).
            t_max: Maximum t value for a valid hit (closest hit so far).

        Returns:
            A HitRecord for the nearest valid root, or None on a miss.
        """
        oc = ray.origin - self.center
        a = length_squared(ray.direction)
        half_b = dot(oc, ray.direction)
        c = length_squared(oc) - self.radius * self.radius

        # Discriminant (half-b form: h^2 - ac instead of b^2 - 4ac)
        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)

        root = (-half_b - sqrt_d) / a
        if not t_min < root < t_max:
            root = (-half_b + sqrt_d) / a
            if not t_min < root < t_max:
                return None

        point = ray.at(root)
        # Signed radius: a negative radius yields an inward-pointing normal
        outward_normal = (point - self.center) / self.radius
        return HitRecord.from_outward_normal(ray, root, point, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center.tolist()}, radius={self.radius})"
