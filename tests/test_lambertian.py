"""Unit tests for Lambertian (diffuse) material.

Tests cover:
- Albedo validation
- Attenuation equals albedo
- Scattered rays start at the hit point and leave the surface
- Degenerate direction fallback
- Cosine-weighted distribution around the normal
"""

import numpy as np
import pytest

from spherecast.core.ray import Ray, dot, length, vec3
from spherecast.geometry.hittable import HitRecord
from spherecast.materials.lambertian import Lambertian, lambertian_direction


def _hit_record(material, normal=(0.0, 1.0, 0.0)):
    return HitRecord(
        point=vec3(0.0, 0.0, 0.0),
        normal=vec3(*normal),
        t=1.0,
        front_face=True,
        material=material,
    )


class TestLambertianConstruction:
    """Tests for Lambertian creation and validation."""

    def test_albedo_stored(self):
        """Albedo is converted to a vector."""
        material = Lambertian(albedo=(0.8, 0.3, 0.3))
        np.testing.assert_allclose(material.albedo, [0.8, 0.3, 0.3])

    def test_albedo_out_of_range(self):
        """Albedo components above 1 violate energy conservation."""
        with pytest.raises(ValueError, match="Albedo"):
            Lambertian(albedo=(1.5, 0.5, 0.5))

    def test_negative_albedo(self):
        """Negative albedo components are rejected."""
        with pytest.raises(ValueError):
            Lambertian(albedo=(0.5, -0.1, 0.5))

    def test_albedo_read_only(self):
        """The stored albedo cannot be mutated through a shared reference."""
        material = Lambertian(albedo=(0.5, 0.5, 0.5))
        with pytest.raises(ValueError):
            material.albedo[0] = 1.0


class TestLambertianScatter:
    """Tests for Lambertian scattering."""

    def test_attenuation_is_albedo(self, rng):
        """Every scatter is attenuated by exactly the albedo."""
        material = Lambertian(albedo=(0.8, 0.3, 0.3))
        rec = _hit_record(material)
        ray_in = Ray(vec3(0.0, 1.0, 1.0), vec3(0.0, -1.0, -1.0))

        for _ in range(20):
            result = material.scatter(ray_in, rec, rng)
            assert result is not None
            attenuation, _ = result
            np.testing.assert_allclose(attenuation, [0.8, 0.3, 0.3])

    def test_scattered_from_hit_point(self, rng):
        """Scattered rays originate at the hit point."""
        material = Lambertian(albedo=(0.5, 0.5, 0.5))
        rec = _hit_record(material)
        rec.point = vec3(1.0, 2.0, 3.0)
        ray_in = Ray(vec3(1.0, 3.0, 3.0), vec3(0.0, -1.0, 0.0))

        _, scattered = material.scatter(ray_in, rec, rng)

        np.testing.assert_allclose(scattered.origin, [1.0, 2.0, 3.0])

    def test_never_absorbs(self, rng):
        """Lambertian surfaces always scatter."""
        material = Lambertian(albedo=(0.5, 0.5, 0.5))
        rec = _hit_record(material)
        ray_in = Ray(vec3(0.0, 1.0, 0.0), vec3(0.0, -1.0, 0.0))
        for _ in range(100):
            assert material.scatter(ray_in, rec, rng) is not None

    def test_direction_in_hemisphere(self, rng):
        """normal + unit vector never points below the surface."""
        normal = vec3(0.0, 1.0, 0.0)
        for _ in range(200):
            direction = lambertian_direction(normal, rng)
            assert dot(direction, normal) >= 0.0
            assert length(direction - normal) == pytest.approx(1.0)

    def test_cosine_weighted(self, rng):
        """The mean cosine of a cosine-weighted lobe is 2/3."""
        normal = vec3(0.0, 0.0, 1.0)
        cosines = []
        for _ in range(4000):
            direction = lambertian_direction(normal, rng)
            cosines.append(dot(direction, normal) / length(direction))
        assert np.mean(cosines) == pytest.approx(2.0 / 3.0, abs=0.03)


class _OppositeRng:
    """Stand-in generator whose uniform draws cancel the +y normal."""

    def uniform(self, low, high, size=None):
        return np.array([0.0, -1.0 + 1e-12, 0.0])[:size]


class TestDegenerateDirection:
    """Tests for the near-zero scatter direction fallback."""

    def test_falls_back_to_normal(self):
        """A random vector exactly opposite the normal yields the normal."""
        normal = vec3(0.0, 1.0, 0.0)
        direction = lambertian_direction(normal, _OppositeRng())
        np.testing.assert_allclose(direction, normal)
