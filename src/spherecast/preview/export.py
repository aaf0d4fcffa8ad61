"""Image export utilities for rendered images.

Rendered images reach this module already encoded: ``uint8`` arrays of
shape (H, W, 3), row 0 being the top scanline (see
``spherecast.core.color.encode_image``).

Supported formats:
    - PPM P3 (plain-text, written directly)
    - PNG (8-bit via Pillow)

Example:
    >>> from spherecast.preview.export import save_ppm
    >>> # renderer.render()
    >>> save_ppm(renderer.get_image_uint8(), "output.ppm")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255


def _check_pixels(pixels: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    array = np.asarray(pixels)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {array.shape}")
    if array.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got dtype {array.dtype}")
    return array


def write_ppm(stream: TextIO, pixels: npt.ArrayLike) -> None:
    """Write an encoded image to a text stream as plain PPM (P3).

    The output is the magic number ``P3``, the dimensions ``<w> <h>``, the
    maximum value ``255``, then one ``r g b`` line per pixel, top row first,
    left to right within a row.

    Args:
        stream: Writable text stream.
        pixels: uint8 array of shape (H, W, 3).

    Raises:
        ValueError: If the array is not an (H, W, 3) uint8 image.
    """
    image = _check_pixels(pixels)
    height, width, _ = image.shape

    stream.write(f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n")
    for row in image:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def save_ppm(pixels: npt.ArrayLike, filepath: str | Path) -> None:
    """Save an encoded image as a plain PPM (P3) file.

    Args:
        pixels: uint8 array of shape (H, W, 3).
        filepath: Output file path (should end in .ppm).
    """
    with open(filepath, "w", encoding="ascii", newline="\n") as f:
        write_ppm(f, pixels)
    logger.debug("Wrote PPM %s", filepath)


def save_png(pixels: npt.ArrayLike, filepath: str | Path) -> None:
    """Save an encoded image as a PNG file.

    Args:
        pixels: uint8 array of shape (H, W, 3).
        filepath: Output file path (should end in .png).
    """
    image = _check_pixels(pixels)

    # Save using Pillow
    pil_image = PILImage.fromarray(np.ascontiguousarray(image))
    pil_image.save(filepath)
    logger.debug("Wrote PNG %s", filepath)


def save_image(pixels: npt.ArrayLike, filepath: str | Path) -> None:
    """Save an encoded image, choosing the format from the file extension.

    ``.png`` is written with Pillow; every other extension gets plain PPM.

    Args:
        pixels: uint8 array of shape (H, W, 3).
        filepath: Output file path.
    """
    if Path(filepath).suffix.lower() == ".png":
        save_png(pixels, filepath)
    else:
        save_ppm(pixels, filepath)
