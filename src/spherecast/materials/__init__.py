"""Materials module for surface scattering models.

Components:
    material: The Material protocol every model implements
    lambertian: Ideal diffuse reflection
    metal: Specular reflection with optional fuzz
    dielectric: Glass-like materials with refraction (Schlick reflectance)

Each material provides:
    - scatter(ray_in, rec, rng): (attenuation, scattered_ray), or None if
      the ray is absorbed

Materials are frozen dataclasses and may be shared across many spheres.
"""

from .dielectric import (
    IOR_AIR,
    IOR_DIAMOND,
    IOR_GLASS,
    IOR_WATER,
    Dielectric,
    fresnel_reflectance,
    refraction_ratio,
    will_reflect,
)
from .lambertian import Lambertian, lambertian_direction
from .material import Material, ScatterResult, validate_albedo
from .metal import Metal, clamp_fuzz

__all__ = [
    # Protocol
    "Material",
    "ScatterResult",
    "validate_albedo",
    # Lambertian
    "Lambertian",
    "lambertian_direction",
    # Metal
    "Metal",
    "clamp_fuzz",
    # Dielectric
    "Dielectric",
    "refraction_ratio",
    "fresnel_reflectance",
    "will_reflect",
    "IOR_AIR",
    "IOR_WATER",
    "IOR_GLASS",
    "IOR_DIAMOND",
]
