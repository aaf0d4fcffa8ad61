"""Preset scenes with matching camera settings.

Each factory returns a ``(SceneManager, CameraSettings)`` pair ready to be
handed to the renderer:

- ``three_spheres``: a diffuse sphere between a hollow glass sphere and a
  gold metal sphere, all resting on a large diffuse ground sphere, seen
  through a wide-open lens focused on the middle sphere.
- ``random``: a ground plane scattered with a grid of small randomly chosen
  spheres plus three large feature spheres.

Example:
    >>> from spherecast.camera.thin_lens import ThinLensCamera
    >>> from spherecast.scene.presets import create_three_spheres_scene
    >>>
    >>> scene, camera_settings = create_three_spheres_scene(aspect_ratio=16 / 9)
    >>> camera = ThinLensCamera(camera_settings)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from spherecast.camera.thin_lens import CameraSettings
from spherecast.core.ray import length, vec3
from spherecast.scene.manager import SceneManager

logger = logging.getLogger(__name__)

DEFAULT_ASPECT_RATIO = 16.0 / 9.0


# =============================================================================
# Three Spheres
# =============================================================================


def create_three_spheres_scene(
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[SceneManager, CameraSettings]:
    """Create the three-spheres scene.

    The left sphere is a glass shell: an outer sphere of radius 0.5 and an
    inner sphere of radius -0.45 sharing the same dielectric material. The
    negative radius flips the inner surface's normals so it refracts like the
    inside wall of a bubble.

    Args:
        aspect_ratio: Image width divided by height.

    Returns:
        Tuple of (scene, camera settings).
    """
    scene = SceneManager()

    material_ground = scene.add_lambertian_material(albedo=(0.8, 0.8, 0.0))
    material_center = scene.add_lambertian_material(albedo=(0.1, 0.2, 0.5))
    material_left = scene.add_dielectric_material(refractive_index=1.5)
    material_right = scene.add_metal_material(albedo=(0.8, 0.6, 0.2), fuzz=0.0)

    scene.add_sphere((0.0, -100.5, -1.0), 100.0, material_ground)
    scene.add_sphere((0.0, 0.0, -1.0), 0.5, material_center)
    scene.add_sphere((-1.0, 0.0, -1.0), 0.5, material_left)
    scene.add_sphere((-1.0, 0.0, -1.0), -0.45, material_left)
    scene.add_sphere((1.0, 0.0, -1.0), 0.5, material_right)

    lookfrom = (3.0, 3.0, 2.0)
    lookat = (0.0, 0.0, -1.0)
    camera = CameraSettings(
        lookfrom=lookfrom,
        lookat=lookat,
        vup=(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=2.0,
        # Focus on the center sphere
        focus_dist=length(vec3(*lookfrom) - vec3(*lookat)),
    )
    return scene, camera


# =============================================================================
# Random Spheres
# =============================================================================


def create_random_scene(
    rng: np.random.Generator,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[SceneManager, CameraSettings]:
    """Create the random-spheres scene.

    A 22 x 22 grid of small spheres (radius 0.2) is jittered around the
    origin; each picks a material at random: 80% diffuse, 15% metal, 5%
    glass. Spheres that would overlap the large metal sphere's footprint
    at (4, 0.2, 0) are skipped.

    Args:
        rng: Random number generator used to lay out the scene.
        aspect_ratio: Image width divided by height.

    Returns:
        Tuple of (scene, camera settings).
    """
    scene = SceneManager()

    ground = scene.add_lambertian_material(albedo=(0.5, 0.5, 0.5))
    scene.add_sphere((0.0, -1000.0, 0.0), 1000.0, ground)

    glass = scene.add_dielectric_material(refractive_index=1.5)
    clearance_point = vec3(4.0, 0.2, 0.0)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = vec3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if length(center - clearance_point) <= 0.9:
                continue

            center_tuple = (float(center[0]), float(center[1]), float(center[2]))
            if choose_mat < 0.8:
                # Diffuse
                albedo = rng.random(3) * rng.random(3)
                scene.add_lambertian_sphere(center_tuple, 0.2, tuple(albedo))
            elif choose_mat < 0.95:
                # Metal
                albedo = rng.uniform(0.5, 1.0, 3)
                fuzz = rng.uniform(0.0, 0.5)
                scene.add_metal_sphere(center_tuple, 0.2, tuple(albedo), fuzz)
            else:
                # Glass
                scene.add_sphere(center_tuple, 0.2, glass)

    scene.add_sphere((0.0, 1.0, 0.0), 1.0, glass)
    scene.add_lambertian_sphere((-4.0, 1.0, 0.0), 1.0, (0.4, 0.2, 0.1))
    scene.add_metal_sphere((4.0, 1.0, 0.0), 1.0, (0.7, 0.6, 0.5), 0.0)

    logger.debug("Random scene: %d spheres", scene.get_sphere_count())

    camera = CameraSettings(
        lookfrom=(13.0, 2.0, 3.0),
        lookat=(0.0, 0.0, 0.0),
        vup=(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )
    return scene, camera


# =============================================================================
# Preset Registry
# =============================================================================

PRESETS: dict[str, Callable[[np.random.Generator, float], tuple[SceneManager, CameraSettings]]] = {
    "three_spheres": lambda rng, aspect_ratio: create_three_spheres_scene(aspect_ratio),
    "random": create_random_scene,
}


def create_preset_scene(
    name: str,
    rng: np.random.Generator,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[SceneManager, CameraSettings]:
    """Create a preset scene by name.

    Args:
        name: One of the keys of ``PRESETS``.
        rng: Random number generator (used by randomized presets).
        aspect_ratio: Image width divided by height.

    Raises:
        ValueError: If the preset name is unknown.
    """
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scene preset {name!r}; choose from {sorted(PRESETS)}"
        ) from None
    return factory(rng, aspect_ratio)
