"""Pytest configuration for spherecast tests.

This module provides shared fixtures for all test modules: a seeded random
number generator (all sampling takes an explicit generator, so seeding it
makes every test deterministic) and a few common scene pieces.
"""

import numpy as np
import pytest

from spherecast.camera.thin_lens import CameraSettings
from spherecast.materials.lambertian import Lambertian
from spherecast.scene.intersection import Scene


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible sampling."""
    return np.random.default_rng(42)


@pytest.fixture
def gray():
    """A mid-gray diffuse material."""
    return Lambertian(albedo=(0.5, 0.5, 0.5))


@pytest.fixture
def simple_scene(gray):
    """A unit-radius-0.5 sphere at (0, 0, -1) resting on a large ground sphere."""
    scene = Scene()
    scene.add_sphere((0.0, 0.0, -1.0), 0.5, gray)
    scene.add_sphere((0.0, -100.5, -1.0), 100.0, gray)
    return scene


@pytest.fixture
def default_camera_settings():
    """Pinhole camera at the origin looking down -z with a 90 degree view."""
    return CameraSettings(
        lookfrom=(0.0, 0.0, 0.0),
        lookat=(0.0, 0.0, -1.0),
        vup=(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=16.0 / 9.0,
        aperture=0.0,
        focus_dist=1.0,
    )
