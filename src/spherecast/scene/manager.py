"""Scene manager coordinating spheres and shared materials.

This module provides a high-level scene building API on top of the Scene
aggregate. Materials are registered once and receive an integer material ID
in registration order; spheres refer to a material by ID, and every sphere
naming the same ID shares the same material instance.

The SceneManager maintains:
- A material_id space across all material types
- The Scene aggregate used for intersection
- High-level methods for adding objects with materials in one call
- Scene serialization (dict / JSON) support

Example:
    >>> from spherecast.scene.manager import SceneManager
    >>> scene = SceneManager()
    >>> mat_id = scene.add_lambertian_material(albedo=(0.8, 0.3, 0.3))
    >>> scene.add_sphere(center=(0, 0, -1), radius=0.5, material_id=mat_id)
    0
    >>> # Render with scene.world as the hittable
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any

from spherecast.camera.thin_lens import CameraSettings
from spherecast.core.ray import Ray
from spherecast.geometry.hittable import HitRecord
from spherecast.materials.dielectric import Dielectric
from spherecast.materials.lambertian import Lambertian
from spherecast.materials.material import Material
from spherecast.materials.metal import Metal
from spherecast.scene.intersection import Scene

logger = logging.getLogger(__name__)

Triple = tuple[float, float, float]


class MaterialType(IntEnum):
    """Enumeration of supported material types."""

    LAMBERTIAN = 0
    METAL = 1
    DIELECTRIC = 2


@dataclass
class MaterialInfo:
    """Information about a registered material.

    Attributes:
        material_id: The material ID.
        material_type: The type of material (Lambertian, Metal, Dielectric).
        material: The shared material instance.
        params: The material parameters as provided during creation.
    """

    material_id: int
    material_type: MaterialType
    material: Material
    params: dict[str, Any]


@dataclass
class SphereInfo:
    """Information about a sphere in the scene.

    Attributes:
        sphere_index: The index of the sphere in the Scene aggregate.
        center: The center of the sphere.
        radius: The radius of the sphere.
        material_id: The material ID assigned to the sphere.
    """

    sphere_index: int
    center: Triple
    radius: float
    material_id: int


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        materials: List of material configurations.
        spheres: List of sphere configurations.
    """

    materials: list[dict[str, Any]] = field(default_factory=list)
    spheres: list[dict[str, Any]] = field(default_factory=list)


def _as_triple(values: Any) -> Triple:
    x, y, z = values
    return (float(x), float(y), float(z))


class SceneManager:
    """Scene builder with a shared-material registry.

    Attributes:
        materials: List of MaterialInfo for all registered materials.
        spheres: List of SphereInfo for all spheres in the scene.
        world: The Scene aggregate holding the sphere objects.

    Example:
        >>> scene = SceneManager()
        >>> # Add materials
        >>> red_diffuse = scene.add_lambertian_material(albedo=(0.8, 0.1, 0.1))
        >>> gold_metal = scene.add_metal_material(albedo=(0.8, 0.6, 0.2), fuzz=0.3)
        >>> glass = scene.add_dielectric_material(refractive_index=1.5)
        >>> # Add objects with materials
        >>> scene.add_sphere((0, 0, -1), 0.5, red_diffuse)
        0
        >>> scene.add_sphere((1, 0, -1), 0.5, gold_metal)
        1
        >>> scene.add_sphere((-1, 0, -1), 0.5, glass)
        2
    """

    def __init__(self) -> None:
        """Initialize an empty scene."""
        self.materials: list[MaterialInfo] = []
        self.spheres: list[SphereInfo] = []
        self.world = Scene()

    def clear(self) -> None:
        """Clear the entire scene (spheres and materials)."""
        self.materials.clear()
        self.spheres.clear()
        self.world.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Intersect a ray with the scene (delegates to the Scene aggregate)."""
        return self.world.hit(ray, t_min, t_max)

    # =========================================================================
    # Material Management
    # =========================================================================

    def _register_material(
        self,
        material_type: MaterialType,
        material: Material,
        params: dict[str, Any],
    ) -> int:
        material_id = len(self.materials)
        self.materials.append(
            MaterialInfo(
                material_id=material_id,
                material_type=material_type,
                material=material,
                params=params,
            )
        )
        return material_id

    def add_lambertian_material(self, albedo: Triple) -> int:
        """Add a Lambertian (diffuse) material to the scene.

        Args:
            albedo: The diffuse reflectance color as (R, G, B) tuple.
                Each component should be in [0, 1] for energy conservation.

        Returns:
            The material ID for this material.

        Raises:
            ValueError: If any albedo component is outside [0, 1].
        """
        albedo = _as_triple(albedo)
        return self._register_material(
            MaterialType.LAMBERTIAN, Lambertian(albedo), {"albedo": albedo}
        )

    def add_metal_material(self, albedo: Triple, fuzz: float = 0.0) -> int:
        """Add a metal (specular reflective) material to the scene.

        Args:
            albedo: The reflective color as (R, G, B) tuple.
                Each component should be in [0, 1].
            fuzz: The reflection blur. Values above 1 are clamped to 1.
                Default is 0 (perfect mirror).

        Returns:
            The material ID for this material.

        Raises:
            ValueError: If any albedo component is outside [0, 1].
        """
        albedo = _as_triple(albedo)
        metal = Metal(albedo, fuzz)
        return self._register_material(
            MaterialType.METAL, metal, {"albedo": albedo, "fuzz": metal.fuzz}
        )

    def add_dielectric_material(self, refractive_index: float = 1.5) -> int:
        """Add a dielectric (glass/water) material to the scene.

        Args:
            refractive_index: Index of refraction. Default is 1.5 (typical glass).
                Common values: Air=1.0, Water=1.33, Glass=1.5, Diamond=2.4

        Returns:
            The material ID for this material.

        Raises:
            ValueError: If the refractive index is not positive.
        """
        refractive_index = float(refractive_index)
        return self._register_material(
            MaterialType.DIELECTRIC,
            Dielectric(refractive_index),
            {"refractive_index": refractive_index},
        )

    def get_material_count(self) -> int:
        """Get the total number of materials in the scene."""
        return len(self.materials)

    def get_material_info(self, material_id: int) -> MaterialInfo | None:
        """Get information about a material by ID.

        Args:
            material_id: The material ID.

        Returns:
            MaterialInfo for the material, or None if not found.
        """
        if 0 <= material_id < len(self.materials):
            return self.materials[material_id]
        return None

    def get_material(self, material_id: int) -> Material:
        """Get the shared material instance for an ID.

        Raises:
            ValueError: If material_id is invalid.
        """
        info = self.get_material_info(material_id)
        if info is None:
            raise ValueError(
                f"Invalid material_id: {material_id} "
                f"(scene has {len(self.materials)} materials)"
            )
        return info.material

    # =========================================================================
    # Sphere Management
    # =========================================================================

    def add_sphere(self, center: Triple, radius: float, material_id: int) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center point of the sphere as (x, y, z).
            radius: The radius of the sphere. A negative radius makes a
                hollow shell whose normals point inward.
            material_id: The material ID to assign to the sphere.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If material_id is invalid or radius is zero.
        """
        material = self.get_material(material_id)
        center = _as_triple(center)
        radius = float(radius)

        sphere_index = self.world.add_sphere(center, radius, material)
        self.spheres.append(
            SphereInfo(
                sphere_index=sphere_index,
                center=center,
                radius=radius,
                material_id=material_id,
            )
        )
        return sphere_index

    def add_lambertian_sphere(
        self, center: Triple, radius: float, albedo: Triple
    ) -> tuple[int, int]:
        """Add a sphere with a new Lambertian material.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_lambertian_material(albedo)
        return self.add_sphere(center, radius, material_id), material_id

    def add_metal_sphere(
        self, center: Triple, radius: float, albedo: Triple, fuzz: float = 0.0
    ) -> tuple[int, int]:
        """Add a sphere with a new metal material.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_metal_material(albedo, fuzz)
        return self.add_sphere(center, radius, material_id), material_id

    def add_dielectric_sphere(
        self, center: Triple, radius: float, refractive_index: float = 1.5
    ) -> tuple[int, int]:
        """Add a sphere with a new dielectric material.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_dielectric_material(refractive_index)
        return self.add_sphere(center, radius, material_id), material_id

    def get_sphere_count(self) -> int:
        """Get the number of spheres in the scene."""
        return len(self.spheres)

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object.

        Returns:
            A SceneConfig containing all materials and spheres.
        """
        config = SceneConfig()

        for mat in self.materials:
            mat_config: dict[str, Any] = {"type": mat.material_type.name.lower()}
            for key, value in mat.params.items():
                mat_config[key] = list(value) if isinstance(value, tuple) else value
            config.materials.append(mat_config)

        for sphere in self.spheres:
            config.spheres.append(
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "material_id": sphere.material_id,
                }
            )

        return config

    def from_config(self, config: SceneConfig) -> None:
        """Load a scene from a configuration object.

        Clears the current scene and loads the configuration.

        Args:
            config: The scene configuration to load.

        Raises:
            ValueError: If the configuration contains invalid data.
        """
        self.clear()

        # Load materials first (needed for spheres)
        for index, mat_config in enumerate(config.materials):
            if not isinstance(mat_config, dict):
                raise ValueError(f"Material {index} must be an object, got {mat_config!r}")
            mat_type = str(mat_config.get("type", "")).lower()
            try:
                if mat_type == "lambertian":
                    self.add_lambertian_material(mat_config.get("albedo", [0.5, 0.5, 0.5]))
                elif mat_type == "metal":
                    self.add_metal_material(
                        mat_config.get("albedo", [0.8, 0.8, 0.8]),
                        float(mat_config.get("fuzz", 0.0)),
                    )
                elif mat_type == "dielectric":
                    self.add_dielectric_material(float(mat_config.get("refractive_index", 1.5)))
                else:
                    raise ValueError(f"Unknown material type: {mat_type!r}")
            except TypeError as e:
                raise ValueError(f"Invalid material {index}: {e}") from e

        for index, sphere_config in enumerate(config.spheres):
            if not isinstance(sphere_config, dict):
                raise ValueError(f"Sphere {index} must be an object, got {sphere_config!r}")
            if "material_id" not in sphere_config:
                raise ValueError(f"Sphere {index} has no material_id")
            try:
                self.add_sphere(
                    sphere_config.get("center", [0.0, 0.0, 0.0]),
                    float(sphere_config.get("radius", 1.0)),
                    int(sphere_config["material_id"]),
                )
            except TypeError as e:
                raise ValueError(f"Invalid sphere {index}: {e}") from e

        logger.debug(
            "Loaded scene with %d materials and %d spheres",
            len(self.materials),
            len(self.spheres),
        )

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization).

        Returns:
            A dictionary representation of the scene.
        """
        config = self.to_config()
        return {
            "materials": config.materials,
            "spheres": config.spheres,
        }

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load a scene from a dictionary.

        Args:
            data: Dictionary with 'materials' and 'spheres' keys.

        Raises:
            ValueError: If either key holds something other than a list.
        """
        for key in ("materials", "spheres"):
            if not isinstance(data.get(key, []), list):
                raise ValueError(f"Scene '{key}' must be a list")
        config = SceneConfig(
            materials=data.get("materials", []),
            spheres=data.get("spheres", []),
        )
        self.from_config(config)

    def __repr__(self) -> str:
        return (
            f"SceneManager(materials={len(self.materials)}, spheres={len(self.spheres)})"
        )


# =============================================================================
# Scene Files
# =============================================================================


def load_scene_file(path: str | Path) -> tuple[SceneManager, CameraSettings | None]:
    """Load a scene (and optional camera) from a JSON file.

    The document holds ``materials`` and ``spheres`` lists as produced by
    :meth:`SceneManager.to_dict`, plus an optional ``camera`` object with
    :class:`CameraSettings` fields.

    Args:
        path: Path to the JSON file.

    Returns:
        Tuple of (scene, camera settings or None if the file has no camera).

    Raises:
        ValueError: If the file contents are not a valid scene description.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    logger.debug("Loading scene file %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Scene file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Scene file {path} must contain a JSON object")

    scene = SceneManager()
    scene.from_dict(data)

    camera_data = data.get("camera")
    camera = CameraSettings.from_dict(camera_data) if camera_data is not None else None
    return scene, camera


def save_scene_file(
    path: str | Path,
    scene: SceneManager,
    camera: CameraSettings | None = None,
) -> None:
    """Write a scene (and optional camera) to a JSON file.

    Args:
        path: Output path.
        scene: The scene to serialize.
        camera: Optional camera settings stored under ``camera``.
    """
    data = scene.to_dict()
    if camera is not None:
        data["camera"] = camera.to_dict()
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.debug("Saved scene file %s", path)
