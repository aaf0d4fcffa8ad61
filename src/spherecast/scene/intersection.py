"""Scene-level intersection testing.

The Scene aggregate holds an ordered collection of hittables and is itself
hittable: it tests every member, narrowing ``t_max`` to the closest hit found
so far, and returns the globally nearest intersection. The result does not
depend on insertion order; order only affects how much work is skipped.

Example:
    >>> from spherecast.core.ray import Ray, vec3
    >>> from spherecast.materials.lambertian import Lambertian
    >>> from spherecast.scene.intersection import Scene
    >>> scene = Scene()
    >>> gray = Lambertian(albedo=(0.5, 0.5, 0.5))
    >>> scene.add_sphere((0, 0, -1), 0.5, gray)
    0
    >>> scene.add_sphere((0, -100.5, -1), 100, gray)
    1
    >>> rec = scene.hit(Ray(vec3(0, 0, 0), vec3(0, 0, -1)), 0.001, float("inf"))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy.typing as npt

from spherecast.core.ray import Ray
from spherecast.geometry.hittable import HitRecord, Hittable
from spherecast.geometry.sphere import Sphere

if TYPE_CHECKING:
    from spherecast.materials.material import Material


class Scene:
    """Ordered collection of hittables, itself satisfying the Hittable contract.

    Attributes:
        objects: The members of the scene, in insertion order.
    """

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def add(self, obj: Hittable) -> int:
        """Add a hittable to the scene.

        Returns:
            The index of the added object.
        """
        self.objects.append(obj)
        return len(self.objects) - 1

    def add_sphere(self, center: npt.ArrayLike, radius: float, material: Material) -> int:
        """Create a sphere and add it to the scene.

        Args:
            center: The center point of the sphere.
            radius: The radius (negative for a hollow shell).
            material: The material, shared by reference.

        Returns:
            The index of the added sphere.
        """
        return self.add(Sphere(center, radius, material))

    def clear(self) -> None:
        """Remove all objects from the scene."""
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test the ray against every object and keep the closest hit.

        Args:
            ray: The ray to test.
            t_min: Minimum t value to consider a valid hit.
            t_max: Maximum t value to consider a valid hit.

        Returns:
            The HitRecord of the closest intersection, or None if nothing
            was struck.
        """
        closest_so_far = t_max
        result = None
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                result = rec
        return result
