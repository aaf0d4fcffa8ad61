"""Ray data structure and vector utilities for CPU ray tracing.

This module provides the fundamental Ray dataclass and the vector utility
functions used throughout the renderer. Vectors are plain NumPy arrays of
shape (3,) and dtype float64; the same type is used for points, directions
and RGB colors (see the ``Point3`` and ``Color`` aliases).

Random sampling helpers never touch a global random source. Every helper
takes an explicit ``numpy.random.Generator`` so renders can be seeded.

Example:
    >>> import numpy as np
    >>> from spherecast.core.ray import Ray, vec3
    >>> ray = Ray(origin=vec3(0.0, 0.0, 0.0), direction=vec3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    array([ 0.,  0., -5.])
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Type aliases: a single 3-vector type serves as point, direction and color
Vec3 = npt.NDArray[np.float64]
Point3 = Vec3
Color = Vec3

# Components below this magnitude count as zero in near_zero()
NEAR_ZERO_EPSILON = 1e-8


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vec3:
    """Create a 3-vector from its components."""
    return np.array((x, y, z), dtype=np.float64)


def as_vec3(value: npt.ArrayLike) -> Vec3:
    """Convert a 3-sequence (tuple, list or array) to a float64 vector.

    Raises:
        ValueError: If the value does not have exactly three components.
    """
    result = np.asarray(value, dtype=np.float64)
    if result.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {result.shape}")
    return result.copy()


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            unit length; intersection math handles arbitrary lengths.
    """

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """Return the point ``origin + t * direction``."""
        return self.origin + t * self.direction


# =============================================================================
# Vector Utility Functions
# =============================================================================


def length_squared(v: Vec3) -> float:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes, as it avoids
    the square root.
    """
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def length(v: Vec3) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(length_squared(v))


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product a . b."""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product a x b."""
    return vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def unit_vector(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector. Must have nonzero length.

    Returns:
        A unit vector in the same direction as v.

    Raises:
        ValueError: If v has zero length.
    """
    n = length(v)
    if n == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")
    return v / n




def near_zero(v: Vec3) -> bool:
    """Check if every component of a vector is near zero.

    Used to catch degenerate scatter directions.
    """
    s = NEAR_ZERO_EPSILON
    return abs(v[0]) < s and abs(v[1]) < s and abs(v[2]) < s


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Reflect an incident vector about a normal.

    Computes ``v - 2 * dot(v, n) * n``. The normal should be unit length.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal.

    Returns:
        The reflected direction vector.
    """
    return incident - 2.0 * dot(incident, normal) * normal


def refract(incident: Vec3, normal: Vec3, eta: float) -> Vec3:
    """Refract a unit incident vector through a surface using Snell's law.

    The refracted ray is split into the components perpendicular and
    parallel to the normal. Callers check for total internal reflection
    before calling; see ``materials.dielectric``.

    Args:
        incident: The incoming direction (unit length).
        normal: The surface normal (unit length, facing the incident ray).
        eta: The ratio of refractive indices (n_incident / n_transmitted).

    Returns:
        The refracted direction vector.
    """
    cos_theta = min(dot(-incident, normal), 1.0)
    r_out_perp = eta * (incident + cos_theta * normal)
    r_out_parallel = -math.sqrt(abs(1.0 - length_squared(r_out_perp))) * normal
    return r_out_perp + r_out_parallel


def reflectance(cosine: float, ref_idx: float) -> float:
    """Compute Fresnel reflectance using Schlick's approximation.

    Args:
        cosine: Cosine of the angle between incident direction and normal.
        ref_idx: Refractive index (or ratio of indices).

    Returns:
        The approximate Fresnel reflectance coefficient.
    """
    r0 = ((1.0 - ref_idx) / (1.0 + ref_idx)) ** 2
    return r0 + (1.0 - r0) * ((1.0 - cosine) ** 5)


# =============================================================================
# Random Sampling Utilities
# =============================================================================


def random_vec3(rng: np.random.Generator, low: float = 0.0, high: float = 1.0) -> Vec3:
    """Generate a vector with components uniform in [low, high)."""
    return rng.uniform(low, high, size=3)


def random_in_unit_sphere(rng: np.random.Generator) -> Vec3:
    """Generate a random point inside the unit sphere.

    Uses rejection sampling over the [-1, 1) cube.

    Returns:
        A random point with length < 1.
    """
    while True:
        p = random_vec3(rng, -1.0, 1.0)
        if length_squared(p) < 1.0:
            return p


def random_unit_vector(rng: np.random.Generator) -> Vec3:
    """Generate a random unit vector uniformly distributed on the sphere."""
    while True:
        p = random_in_unit_sphere(rng)
        # Reject points too close to the center to normalize reliably
        if length_squared(p) > 1e-160:
            return unit_vector(p)


def random_in_unit_disk(rng: np.random.Generator) -> Vec3:
    """Generate a random point inside the unit disk in the xy-plane.

    Used for depth-of-field lens sampling.

    Returns:
        A random point (x, y, 0) with x^2 + y^2 < 1.
    """
    while True:
        x, y = rng.uniform(-1.0, 1.0, size=2)
        if x * x + y * y < 1.0:
            return vec3(x, y, 0.0)
