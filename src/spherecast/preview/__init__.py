"""Preview module for output and visualization.

Components:
    display: Matplotlib-based preview display
    export: PPM/PNG image export utilities

Example:
    >>> from spherecast.preview import save_image, show_preview
    >>> pixels = renderer.get_image_uint8()
    >>> save_image(pixels, "output.ppm")
    >>> show_preview(pixels)
"""

from spherecast.preview.display import show_preview
from spherecast.preview.export import save_image, save_png, save_ppm, write_ppm

__all__ = [
    # Display functions
    "show_preview",
    # Export functions
    "write_ppm",
    "save_ppm",
    "save_png",
    "save_image",
]
