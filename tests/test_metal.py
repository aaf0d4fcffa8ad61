"""Unit tests for Metal material.

Tests cover:
- Fuzz clamping and albedo validation
- Mirror reflection when fuzz is zero
- Fuzzy reflection stays within the fuzz sphere
- Absorption of rays scattered below the surface
"""

import math

import numpy as np
import pytest

from spherecast.core.ray import Ray, dot, length, reflect, unit_vector, vec3
from spherecast.geometry.hittable import HitRecord
from spherecast.materials.metal import Metal, clamp_fuzz


def _floor_hit(material):
    return HitRecord(
        point=vec3(0.0, 0.0, 0.0),
        normal=vec3(0.0, 1.0, 0.0),
        t=1.0,
        front_face=True,
        material=material,
    )


class _NoDrawRng:
    """Generator that fails the test if any random number is requested."""

    def random(self, *args, **kwargs):
        raise AssertionError("unexpected random draw")

    uniform = random


class TestMetalConstruction:
    """Tests for Metal creation."""

    def test_default_fuzz(self):
        """Metal defaults to a perfect mirror."""
        assert Metal(albedo=(0.8, 0.8, 0.8)).fuzz == 0.0

    @pytest.mark.parametrize(
        "fuzz, expected",
        [(0.3, 0.3), (1.0, 1.0), (2.5, 1.0), (-0.5, 0.0)],
    )
    def test_fuzz_clamped(self, fuzz, expected):
        """Fuzz is clamped to [0, 1]."""
        assert Metal(albedo=(0.8, 0.8, 0.8), fuzz=fuzz).fuzz == expected
        assert clamp_fuzz(fuzz) == expected

    def test_invalid_albedo(self):
        """Albedo components must be in [0, 1]."""
        with pytest.raises(ValueError):
            Metal(albedo=(0.8, 1.2, 0.8))


class TestMetalScatter:
    """Tests for Metal scattering."""

    def test_mirror_reflection(self, rng):
        """With fuzz 0 the scattered direction is the exact mirror direction."""
        material = Metal(albedo=(0.8, 0.6, 0.2), fuzz=0.0)
        rec = _floor_hit(material)
        ray_in = Ray(vec3(-1.0, 1.0, 0.0), vec3(1.0, -1.0, 0.0))

        result = material.scatter(ray_in, rec, rng)

        assert result is not None
        attenuation, scattered = result
        np.testing.assert_allclose(attenuation, [0.8, 0.6, 0.2])
        np.testing.assert_allclose(scattered.origin, rec.point)
        np.testing.assert_allclose(
            scattered.direction, [1.0 / math.sqrt(2.0), 1.0 / math.sqrt(2.0), 0.0]
        )

    def test_mirror_draws_no_random_numbers(self):
        """A perfect mirror is deterministic."""
        material = Metal(albedo=(0.8, 0.8, 0.8), fuzz=0.0)
        rec = _floor_hit(material)
        ray_in = Ray(vec3(0.0, 1.0, 0.0), vec3(0.3, -1.0, 0.2))
        assert material.scatter(ray_in, rec, _NoDrawRng()) is not None

    def test_fuzzy_reflection_bounded(self, rng):
        """Fuzzy directions stay within fuzz of the mirror direction."""
        fuzz = 0.3
        material = Metal(albedo=(0.8, 0.8, 0.8), fuzz=fuzz)
        rec = _floor_hit(material)
        ray_in = Ray(vec3(0.0, 1.0, 0.0), vec3(0.0, -1.0, 0.0))
        mirror = reflect(unit_vector(ray_in.direction), rec.normal)

        for _ in range(100):
            result = material.scatter(ray_in, rec, rng)
            assert result is not None
            _, scattered = result
            assert length(scattered.direction - mirror) < fuzz

    def test_absorbs_below_surface(self, rng):
        """Grazing rays with maximum fuzz are sometimes absorbed, never scattered inward."""
        material = Metal(albedo=(0.8, 0.8, 0.8), fuzz=1.0)
        rec = _floor_hit(material)
        ray_in = Ray(vec3(-1.0, 0.01, 0.0), vec3(1.0, -0.01, 0.0))

        absorbed = 0
        for _ in range(500):
            result = material.scatter(ray_in, rec, rng)
            if result is None:
                absorbed += 1
            else:
                _, scattered = result
                assert dot(scattered.direction, rec.normal) > 0.0
        assert absorbed > 0
