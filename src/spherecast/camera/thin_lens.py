"""Thin-lens camera model with depth of field.

The camera supports:
- Look-at positioning (lookfrom, lookat, vup)
- Vertical field of view specification
- Arbitrary aspect ratios
- A circular aperture for defocus blur, focused at a given distance

The camera builds an orthonormal basis (u, v, w) from the view parameters:
- w: points from lookat toward lookfrom (opposite view direction)
- u: points right in the image plane
- v: points up in the image plane

Ray origins are sampled on a lens disk of radius ``aperture / 2`` and every
ray is aimed at the matching point of the viewport placed at the focus
distance, so objects on that plane stay sharp and blur grows away from it.
With a zero aperture the camera is a pinhole and draws no random numbers.

Example:
    >>> import numpy as np
    >>> from spherecast.camera.thin_lens import CameraSettings, ThinLensCamera
    >>>
    >>> settings = CameraSettings(
    ...     lookfrom=(0.0, 0.0, 3.0),
    ...     lookat=(0.0, 0.0, 0.0),
    ...     vup=(0.0, 1.0, 0.0),
    ...     vfov=60.0,
    ...     aspect_ratio=16.0 / 9.0,
    ... )
    >>> camera = ThinLensCamera(settings)
    >>> ray = camera.get_ray(0.5, 0.5, np.random.default_rng(0))  # Image center
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any

import numpy as np

from spherecast.core.ray import (
    Ray,
    as_vec3,
    cross,
    length,
    random_in_unit_disk,
    unit_vector,
)

# Basis vectors whose cross product is shorter than this are treated as parallel
_PARALLEL_EPSILON = 1e-12

# =============================================================================
# Camera Configuration
# =============================================================================


@dataclass(frozen=True)
class CameraSettings:
    """Configuration for a thin-lens camera.

    Attributes:
        lookfrom: Camera position in world space (x, y, z).
        lookat: Point the camera is looking at in world space (x, y, z).
        vup: Up direction vector for camera orientation (typically (0, 1, 0)).
        vfov: Vertical field of view in degrees.
        aspect_ratio: Width divided by height of the output image.
        aperture: Lens diameter. 0 gives a pinhole camera with no blur.
        focus_dist: Distance from lookfrom to the plane in perfect focus.
    """

    lookfrom: tuple[float, float, float] = (0.0, 0.0, 0.0)
    lookat: tuple[float, float, float] = (0.0, 0.0, -1.0)
    vup: tuple[float, float, float] = (0.0, 1.0, 0.0)
    vfov: float = 90.0
    aspect_ratio: float = 16.0 / 9.0
    aperture: float = 0.0
    focus_dist: float = 1.0

    def __post_init__(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If any parameter is out of range or the view is degenerate.
        """
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov = {self.vfov} must be in (0, 180) degrees")
        if not self.aspect_ratio > 0.0:
            raise ValueError(f"aspect_ratio = {self.aspect_ratio} must be positive")
        if self.aperture < 0.0:
            raise ValueError(f"aperture = {self.aperture} must be non-negative")
        if not self.focus_dist > 0.0:
            raise ValueError(f"focus_dist = {self.focus_dist} must be positive")

        view = as_vec3(self.lookfrom) - as_vec3(self.lookat)
        if length(view) == 0.0:
            raise ValueError("lookfrom and lookat must be different points")
        if length(cross(as_vec3(self.vup), view)) < _PARALLEL_EPSILON:
            raise ValueError("vup must not be parallel to the view direction")

    def to_dict(self) -> dict[str, Any]:
        """Export the settings to a dictionary (for JSON serialization)."""
        data = asdict(self)
        for key in ("lookfrom", "lookat", "vup"):
            data[key] = list(data[key])
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CameraSettings:
        """Load settings from a dictionary; missing keys take defaults.

        Raises:
            ValueError: If data is not a mapping, names an unknown setting,
                or holds a value of the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Camera settings must be an object, got {type(data).__name__}")
        unknown = sorted(set(data) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown camera settings: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            try:
                if key in ("lookfrom", "lookat", "vup"):
                    x, y, z = value
                    kwargs[key] = (float(x), float(y), float(z))
                else:
                    kwargs[key] = float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid camera setting {key}={value!r}") from e
        return cls(**kwargs)


# =============================================================================
# Camera
# =============================================================================


class ThinLensCamera:
    """Maps normalized image coordinates to world-space rays.

    All derived quantities are computed once at construction; the camera is
    immutable afterwards and can be shared freely.

    Attributes:
        settings: The configuration the camera was built from.
        origin: Camera position (center of the lens).
        u, v, w: Orthonormal basis (right, up, backward).
        horizontal: Full viewport width vector at the focus plane.
        vertical: Full viewport height vector at the focus plane.
        lower_left_corner: Lower-left corner of the viewport at the focus plane.
        lens_radius: Half the aperture.
    """

    def __init__(self, settings: CameraSettings) -> None:
        self.settings = settings

        # Viewport dimensions at unit distance
        theta = math.radians(settings.vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h
        viewport_width = settings.aspect_ratio * viewport_height

        lookfrom = as_vec3(settings.lookfrom)
        lookat = as_vec3(settings.lookat)
        vup = as_vec3(settings.vup)

        # w points from lookat toward lookfrom (backward)
        self.w = unit_vector(lookfrom - lookat)
        # u points right (perpendicular to w and vup)
        self.u = unit_vector(cross(vup, self.w))
        # v points up in the camera's frame
        self.v = cross(self.w, self.u)

        self.origin = lookfrom
        self.horizontal = settings.focus_dist * viewport_width * self.u
        self.vertical = settings.focus_dist * viewport_height * self.v
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2.0
            - self.vertical / 2.0
            - settings.focus_dist * self.w
        )
        self.lens_radius = settings.aperture / 2.0

        for vector in (
            self.origin,
            self.u,
            self.v,
            self.w,
            self.horizontal,
            self.vertical,
            self.lower_left_corner,
        ):
            vector.setflags(write=False)

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generate a ray through normalized image coordinates (s, t).

        - s = 0: left edge, s = 1: right edge
        - t = 0: bottom edge, t = 1: top edge

        Args:
            s: Horizontal coordinate in [0, 1].
            t: Vertical coordinate in [0, 1].
            rng: Random number generator for lens sampling.

        Returns:
            A ray from a point on the lens toward the focus-plane point (s, t).
        """
        origin = self.origin
        if self.lens_radius > 0.0:
            rd = self.lens_radius * random_in_unit_disk(rng)
            origin = origin + self.u * rd[0] + self.v * rd[1]

        target = self.lower_left_corner + s * self.horizontal + t * self.vertical
        return Ray(origin, target - origin)

    def get_camera_info(self) -> dict[str, tuple[float, float, float]]:
        """Get the derived camera vectors for debugging.

        Returns:
            Dictionary with origin, u, v, w, horizontal, vertical, lower_left.
        """

        def _as_tuple(vector: np.ndarray) -> tuple[float, float, float]:
            return (float(vector[0]), float(vector[1]), float(vector[2]))

        return {
            "origin": _as_tuple(self.origin),
            "u": _as_tuple(self.u),
            "v": _as_tuple(self.v),
            "w": _as_tuple(self.w),
            "horizontal": _as_tuple(self.horizontal),
            "vertical": _as_tuple(self.vertical),
            "lower_left": _as_tuple(self.lower_left_corner),
        }

    def __repr__(self) -> str:
        return f"ThinLensCamera({self.settings!r})"
