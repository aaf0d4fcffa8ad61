"""Camera module for view and ray generation.

Components:
    thin_lens: Look-at camera with field of view and depth of field

Camera responsibilities:
    - Transform (s, t) image coordinates to world-space rays
    - Support look-at positioning with up vector
    - Size the viewport from the vertical field of view and aspect ratio
    - Sample ray origins over the lens for defocus blur

Ray generation uses normalized image coordinates:
    s in [0, 1]: left to right across image
    t in [0, 1]: bottom to top across image
"""

from .thin_lens import CameraSettings, ThinLensCamera

__all__ = [
    "CameraSettings",
    "ThinLensCamera",
]
