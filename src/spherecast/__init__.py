"""Recursive ray-casting renderer for scenes made of spheres.

This package renders still images by tracing jittered camera rays through a
scene of spheres, with support for:
- Diffuse, metal and glass materials shared between spheres
- A look-at thin-lens camera with depth of field
- Antialiasing by averaging random samples per pixel
- Plain-text PPM (P3) and PNG output

Subpackages:
    core: Vectors, rays, the ray color integrator, color encoding and the renderer
    geometry: Hit records, the Hittable protocol and the sphere primitive
    materials: Lambertian, metal and dielectric scattering
    scene: Scene aggregate, scene manager and preset scenes
    camera: Thin-lens camera
    preview: PPM/PNG export and matplotlib preview
"""

__version__ = "0.1.0"
