"""Matplotlib-based preview display for rendered images.

Example:
    >>> from spherecast.preview.display import show_preview
    >>> # renderer.render()
    >>> show_preview(renderer.get_image_uint8(), title="three_spheres")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def show_preview(
    pixels: npt.NDArray[np.uint8],
    *,
    title: str | None = None,
    samples_per_pixel: int | None = None,
    figsize: tuple[float, float] = (8, 4.5),
    block: bool = True,
) -> None:
    """Display an encoded render as a Matplotlib figure.

    Args:
        pixels: uint8 image of shape (H, W, 3), row 0 at the top.
        title: Custom title (default shows the image size and sample count).
        samples_per_pixel: Sample count shown in the default title.
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    ax.imshow(pixels)
    ax.axis("off")

    if title is None:
        height, width = pixels.shape[:2]
        title = f"Render Preview - {width}x{height}"
        if samples_per_pixel is not None:
            title += f", {samples_per_pixel} SPP"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
