"""Light transport for the recursive ray caster.

This module resolves the color carried back along a single camera ray:

    - depth exhausted: black (a safety bound on the number of bounces)
    - ray hits the scene: the surface material scatters it and the color of
      the scattered ray is tinted by the attenuation, or the ray is absorbed
      and contributes black
    - ray escapes: a vertical white-to-sky-blue background gradient

The recursion ``attenuation * ray_color(scattered, depth - 1)`` is unrolled
into a loop carrying the product of attenuations and the remaining depth,
which keeps the call stack flat for large depths while computing exactly the
same value.

Example:
    >>> import numpy as np
    >>> from spherecast.core.integrator import ray_color
    >>> # color = ray_color(ray, scene, depth=50, rng=np.random.default_rng())
"""

from __future__ import annotations

import math

import numpy as np

from spherecast.core.ray import Color, Ray, unit_vector, vec3
from spherecast.geometry.hittable import Hittable

# =============================================================================
# Rendering Constants
# =============================================================================

# Default maximum ray bounces (path length)
MAX_DEPTH = 50

# t_min and t_max for ray intersection; t_min > 0 suppresses shadow acne
T_MIN = 0.001
T_MAX = math.inf

# Background gradient endpoints
BACKGROUND_BOTTOM = vec3(1.0, 1.0, 1.0)
BACKGROUND_TOP = vec3(0.5, 0.7, 1.0)

BLACK = vec3(0.0, 0.0, 0.0)


def background_color(ray: Ray) -> Color:
    """Color of a ray that escapes the scene.

    Linearly interpolates from white (looking straight down) to sky blue
    (looking straight up) based on the vertical component of the unit
    direction.

    Args:
        ray: The escaping ray.

    Returns:
        The background color for the ray direction.
    """
    unit_direction = unit_vector(ray.direction)
    t = 0.5 * (unit_direction[1] + 1.0)
    return (1.0 - t) * BACKGROUND_BOTTOM + t * BACKGROUND_TOP


def ray_color(
    ray: Ray,
    world: Hittable,
    depth: int,
    rng: np.random.Generator,
) -> Color:
    """Compute the color seen along a ray.

    Args:
        ray: The ray to trace.
        world: The scene (any Hittable).
        depth: Remaining bounce budget. ``depth <= 0`` yields black.
        rng: Random number generator for material scattering.

    Returns:
        The RGB color carried back along the ray.
    """
    # Product of all attenuations along the path so far
    throughput = vec3(1.0, 1.0, 1.0)

    while depth > 0:
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return throughput * background_color(ray)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            # Absorbed
            return BLACK.copy()

        attenuation, ray = scattered
        throughput = throughput * attenuation
        depth -= 1

    # Bounce budget exhausted
    return BLACK.copy()
