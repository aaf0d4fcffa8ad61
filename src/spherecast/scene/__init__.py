"""Scene management module.

Components:
    intersection: Scene aggregate returning the nearest hit over all objects
    manager: SceneManager with shared materials and dict/JSON serialization
    presets: Ready-made scenes with matching camera settings
"""

from .intersection import Scene
from .manager import (
    MaterialInfo,
    MaterialType,
    SceneConfig,
    SceneManager,
    SphereInfo,
    load_scene_file,
    save_scene_file,
)
from .presets import (
    PRESETS,
    create_preset_scene,
    create_random_scene,
    create_three_spheres_scene,
)

__all__ = [
    "Scene",
    "MaterialInfo",
    "MaterialType",
    "SceneConfig",
    "SceneManager",
    "SphereInfo",
    "load_scene_file",
    "save_scene_file",
    "PRESETS",
    "create_preset_scene",
    "create_random_scene",
    "create_three_spheres_scene",
]
