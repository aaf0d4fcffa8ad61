"""Unit tests for the vector and ray primitives.

Tests cover:
- Vector construction and validation
- Ray evaluation at parameter t
- Length, dot, cross and normalization
- Reflection, refraction and Schlick reflectance
- Random sampling helpers
"""

import math

import numpy as np
import pytest

from spherecast.core.ray import (
    Ray,
    as_vec3,
    cross,
    dot,
    length,
    length_squared,
    near_zero,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    random_vec3,
    reflect,
    reflectance,
    refract,
    unit_vector,
    vec3,
)


class TestVectorConstruction:
    """Tests for vec3 and as_vec3."""

    def test_vec3_components(self):
        """vec3 builds a float64 array of shape (3,)."""
        v = vec3(1.0, 2.0, 3.0)
        assert v.shape == (3,)
        assert v.dtype == np.float64
        assert v.tolist() == [1.0, 2.0, 3.0]

    def test_vec3_defaults_to_zero(self):
        """vec3 with no arguments is the zero vector."""
        assert vec3().tolist() == [0.0, 0.0, 0.0]

    def test_as_vec3_from_tuple(self):
        """as_vec3 accepts any length-3 sequence."""
        assert as_vec3((1, 2, 3)).tolist() == [1.0, 2.0, 3.0]

    def test_as_vec3_copies(self):
        """as_vec3 does not alias its input array."""
        original = vec3(1.0, 2.0, 3.0)
        copy = as_vec3(original)
        copy[0] = 99.0
        assert original[0] == 1.0

    def test_as_vec3_wrong_shape(self):
        """as_vec3 rejects anything that is not three components."""
        with pytest.raises(ValueError):
            as_vec3((1.0, 2.0))


class TestRay:
    """Tests for Ray."""

    def test_at_origin(self):
        """At t=0 the ray is at its origin."""
        ray = Ray(vec3(1.0, 2.0, 3.0), vec3(0.0, 0.0, -1.0))
        np.testing.assert_allclose(ray.at(0.0), [1.0, 2.0, 3.0])

    def test_at_parameter(self):
        """at(t) = origin + t * direction."""
        ray = Ray(vec3(1.0, 0.0, 0.0), vec3(0.0, 2.0, 0.0))
        np.testing.assert_allclose(ray.at(2.5), [1.0, 5.0, 0.0])


class TestVectorUtilities:
    """Tests for length, dot, cross, unit_vector and near_zero."""

    def test_length(self):
        """A 3-4-0 vector has length 5."""
        v = vec3(3.0, 4.0, 0.0)
        assert length(v) == pytest.approx(5.0)
        assert length_squared(v) == pytest.approx(25.0)

    def test_dot(self):
        """Dot product of known vectors."""
        assert dot(vec3(1.0, 2.0, 3.0), vec3(4.0, -5.0, 6.0)) == pytest.approx(12.0)

    def test_dot_returns_float(self):
        """Dot product is a plain Python float."""
        assert isinstance(dot(vec3(1.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0)), float)

    def test_cross_right_handed(self):
        """x cross y = z."""
        np.testing.assert_allclose(
            cross(vec3(1.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0)), [0.0, 0.0, 1.0]
        )

    def test_unit_vector_length(self):
        """unit_vector returns a vector of length 1 in the same direction."""
        v = unit_vector(vec3(3.0, -4.0, 12.0))
        assert length(v) == pytest.approx(1.0)
        np.testing.assert_allclose(v, np.array([3.0, -4.0, 12.0]) / 13.0)

    def test_unit_vector_zero_raises(self):
        """Normalizing the zero vector is a caller error."""
        with pytest.raises(ValueError):
            unit_vector(vec3(0.0, 0.0, 0.0))

    def test_near_zero(self):
        """near_zero is true only when every component is tiny."""
        assert near_zero(vec3(1e-9, -1e-9, 0.0))
        assert not near_zero(vec3(1e-9, 1e-3, 0.0))


class TestReflectRefract:
    """Tests for reflect, refract and reflectance."""

    def test_reflect_about_normal(self):
        """A ray hitting a floor at 45 degrees bounces up at 45 degrees."""
        reflected = reflect(vec3(1.0, -1.0, 0.0), vec3(0.0, 1.0, 0.0))
        np.testing.assert_allclose(reflected, [1.0, 1.0, 0.0])

    def test_refract_unit_ratio_unchanged(self):
        """With eta = 1 the direction does not bend."""
        incident = unit_vector(vec3(1.0, -1.0, 0.0))
        refracted = refract(incident, vec3(0.0, 1.0, 0.0), 1.0)
        np.testing.assert_allclose(refracted, incident, atol=1e-12)

    def test_refract_normal_incidence(self):
        """A ray along the normal passes straight through at any ratio."""
        incident = vec3(0.0, -1.0, 0.0)
        refracted = refract(incident, vec3(0.0, 1.0, 0.0), 1.0 / 1.5)
        np.testing.assert_allclose(refracted, [0.0, -1.0, 0.0], atol=1e-12)

    def test_refract_snell(self):
        """Refraction obeys eta * sin(theta_in) = sin(theta_out)."""
        eta = 1.0 / 1.5
        incident = unit_vector(vec3(1.0, -1.0, 0.0))
        refracted = refract(incident, vec3(0.0, 1.0, 0.0), eta)
        sin_in = abs(incident[0])
        sin_out = abs(refracted[0]) / length(refracted)
        assert sin_out == pytest.approx(eta * sin_in)

    def test_reflectance_normal_incidence(self):
        """At normal incidence Schlick gives r0 = ((1 - n) / (1 + n))^2."""
        assert reflectance(1.0, 1.5) == pytest.approx(0.04)

    def test_reflectance_grazing(self):
        """At grazing incidence everything reflects."""
        assert reflectance(0.0, 1.5) == pytest.approx(1.0)


class TestRandomSampling:
    """Tests for the random sampling helpers."""

    def test_random_vec3_range(self, rng):
        """random_vec3 components lie in [low, high)."""
        for _ in range(100):
            v = random_vec3(rng, -2.0, 3.0)
            assert np.all(v >= -2.0)
            assert np.all(v < 3.0)

    def test_random_in_unit_sphere(self, rng):
        """Samples lie strictly inside the unit sphere."""
        for _ in range(200):
            assert length_squared(random_in_unit_sphere(rng)) < 1.0

    def test_random_unit_vector(self, rng):
        """Samples lie on the unit sphere."""
        for _ in range(200):
            assert length(random_unit_vector(rng)) == pytest.approx(1.0)

    def test_random_in_unit_disk(self, rng):
        """Samples lie inside the unit disk in the z = 0 plane."""
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p[2] == 0.0
            assert p[0] * p[0] + p[1] * p[1] < 1.0

    def test_sampling_is_reproducible(self):
        """Equal seeds produce equal sample sequences."""
        a = np.random.default_rng(7)
        b = np.random.default_rng(7)
        for _ in range(10):
            np.testing.assert_array_equal(random_unit_vector(a), random_unit_vector(b))

    def test_unit_vector_mean_near_zero(self, rng):
        """Uniform directions average out to roughly the zero vector."""
        samples = np.array([random_unit_vector(rng) for _ in range(2000)])
        assert math.sqrt(float(np.sum(samples.mean(axis=0) ** 2))) < 0.1
