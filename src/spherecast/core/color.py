"""Color encoding for display.

Accumulated sample sums are converted to 8-bit channel values by:

1. Dividing by the number of samples
2. Gamma-2 correction (square root per channel)
3. Clamping to [0, 0.999]
4. Scaling by 256 and truncating, which yields integers in [0, 255]
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from spherecast.core.ray import Color

# Upper clamp bound; 256 * 0.999 truncates to 255
MAX_INTENSITY = 0.999


def encode_color(pixel_color: Color, samples_per_pixel: int) -> tuple[int, int, int]:
    """Encode the summed samples of one pixel as 8-bit RGB.

    Args:
        pixel_color: Sum of all sample colors for the pixel.
        samples_per_pixel: Number of samples in the sum.

    Returns:
        Tuple of (r, g, b) integers in [0, 255].
    """
    channels = []
    for component in pixel_color:
        # Negative sums cannot come out of the integrator; clamp anyway
        value = math.sqrt(max(float(component) / samples_per_pixel, 0.0))
        channels.append(int(256 * min(max(value, 0.0), MAX_INTENSITY)))
    return channels[0], channels[1], channels[2]


def encode_image(
    image: npt.NDArray[np.float64],
    samples_per_pixel: int = 1,
) -> npt.NDArray[np.uint8]:
    """Vectorized encode_color over a whole raster.

    Args:
        image: Array of shape (H, W, 3) holding per-pixel sample sums
            (or averages, with ``samples_per_pixel=1``).
        samples_per_pixel: Number of samples in each sum.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    averaged = np.maximum(np.asarray(image, dtype=np.float64) / samples_per_pixel, 0.0)
    gamma_corrected = np.clip(np.sqrt(averaged), 0.0, MAX_INTENSITY)
    return (256 * gamma_corrected).astype(np.uint8)
