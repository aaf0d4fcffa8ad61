"""Scanline renderer with antialiasing.

For each pixel (i, j) the renderer traces ``samples_per_pixel`` rays through
randomly jittered positions inside the pixel, resolves each with
``ray_color`` and averages them into a preallocated float raster. Row 0 of
the raster is the top scanline, so rows are stored in output order.

Every pixel is independent of every other pixel and of the order of its own
samples. Pixels or samples could be distributed over workers writing disjoint
slots of the raster; this renderer runs them sequentially on one thread.

Example:
    >>> import numpy as np
    >>> from spherecast.camera.thin_lens import CameraSettings, ThinLensCamera
    >>> from spherecast.core.renderer import Renderer, RenderSettings
    >>> from spherecast.scene.presets import create_three_spheres_scene
    >>>
    >>> settings = RenderSettings(image_width=200, samples_per_pixel=10)
    >>> scene, camera_settings = create_three_spheres_scene(settings.aspect_ratio)
    >>> renderer = Renderer(scene.world, ThinLensCamera(camera_settings), settings)
    >>> image = renderer.render()  # (height, width, 3) linear colors
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from spherecast.camera.thin_lens import ThinLensCamera
from spherecast.core.color import encode_image
from spherecast.core.integrator import MAX_DEPTH, ray_color
from spherecast.core.ray import Color, vec3
from spherecast.geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (completed_scanlines, total_scanlines)
ProgressCallback = Callable[[int, int], None]


# =============================================================================
# Render Settings
# =============================================================================


@dataclass(frozen=True)
class RenderSettings:
    """Image and sampling configuration.

    Attributes:
        image_width: Image width in pixels.
        aspect_ratio: Width divided by height; the height is derived.
        samples_per_pixel: Number of jittered samples averaged per pixel.
        max_depth: Maximum number of ray bounces.
    """

    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If any dimension or count is out of range.
        """
        if not self.aspect_ratio > 0.0:
            raise ValueError(f"aspect_ratio = {self.aspect_ratio} must be positive")
        # Pixel coordinates are normalized by (size - 1)
        if self.image_width < 2:
            raise ValueError(f"image_width = {self.image_width} must be at least 2")
        if self.image_height < 2:
            raise ValueError(
                f"Derived image height {self.image_height} "
                f"(width {self.image_width} / aspect {self.aspect_ratio}) must be at least 2"
            )
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel = {self.samples_per_pixel} must be at least 1")
        if self.max_depth < 1:
            raise ValueError(f"max_depth = {self.max_depth} must be at least 1")

    @property
    def image_height(self) -> int:
        """Image height in pixels, derived from width and aspect ratio."""
        return int(self.image_width / self.aspect_ratio)


# =============================================================================
# Renderer
# =============================================================================


class Renderer:
    """Renders a scene through a camera into a float raster.

    Attributes:
        world: The scene to render.
        camera: The camera generating primary rays.
        settings: Image and sampling configuration.
        rng: Random number generator threaded through all sampling.
    """

    def __init__(
        self,
        world: Hittable,
        camera: ThinLensCamera,
        settings: RenderSettings,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.world = world
        self.camera = camera
        self.settings = settings
        self.rng = rng if rng is not None else np.random.default_rng()
        self._image = np.zeros((settings.image_height, settings.image_width, 3), dtype=np.float64)
        self._completed_scanlines = 0

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.settings.image_width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.settings.image_height

    @property
    def completed_scanlines(self) -> int:
        """Number of scanlines rendered into the raster so far."""
        return self._completed_scanlines

    def render_pixel(self, i: int, j: int) -> Color:
        """Sum the samples for one pixel.

        Args:
            i: Pixel column (0 = left).
            j: Pixel row counted from the bottom (0 = bottom scanline).

        Returns:
            The sum (not the average) of ``samples_per_pixel`` sample colors.
        """
        settings = self.settings
        pixel_color = vec3(0.0, 0.0, 0.0)
        for _ in range(settings.samples_per_pixel):
            s = (i + self.rng.random()) / (settings.image_width - 1)
            t = (j + self.rng.random()) / (settings.image_height - 1)
            ray = self.camera.get_ray(s, t, self.rng)
            pixel_color += ray_color(ray, self.world, settings.max_depth, self.rng)
        return pixel_color

    def render_scanline(self, j: int) -> npt.NDArray[np.float64]:
        """Render one scanline and store its averaged colors in the raster.

        Args:
            j: Pixel row counted from the bottom.

        Returns:
            The averaged linear colors of the row, shape (width, 3).
        """
        row = self.height - 1 - j
        scale = 1.0 / self.settings.samples_per_pixel
        for i in range(self.width):
            self._image[row, i] = self.render_pixel(i, j) * scale
        return self._image[row]

    def render_progressive(self) -> Generator[tuple[int, int], None, None]:
        """Render the image top to bottom, yielding after each scanline.

        Yields:
            Tuple of (completed_scanlines, total_scanlines).
        """
        self._image.fill(0.0)
        self._completed_scanlines = 0
        total = self.height

        logger.info(
            "Rendering %dx%d, %d spp, max depth %d",
            self.width,
            self.height,
            self.settings.samples_per_pixel,
            self.settings.max_depth,
        )
        start_time = time.perf_counter()

        for j in range(self.height - 1, -1, -1):
            self.render_scanline(j)
            self._completed_scanlines += 1
            logger.debug("Scanlines remaining: %d", total - self._completed_scanlines)
            yield self._completed_scanlines, total

        logger.info("Render finished in %.2fs", time.perf_counter() - start_time)

    def render(self, callback: ProgressCallback | None = None) -> npt.NDArray[np.float64]:
        """Render the full image.

        Args:
            callback: Optional callback called after each scanline.
                Receives (completed_scanlines, total_scanlines).

        Returns:
            Array of shape (height, width, 3) with averaged linear colors,
            row 0 being the top scanline.
        """
        for completed, total in self.render_progressive():
            if callback is not None:
                callback(completed, total)
        return self.get_image()

    def get_image(self) -> npt.NDArray[np.float64]:
        """Get a copy of the linear float raster (height, width, 3)."""
        return self._image.copy()

    def get_image_uint8(self) -> npt.NDArray[np.uint8]:
        """Get the raster gamma-corrected and quantized to 8 bits."""
        return encode_image(self._image)

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"samples={self.settings.samples_per_pixel})"
        )
