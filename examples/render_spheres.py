#!/usr/bin/env python3
"""Render a sphere scene to a PPM or PNG image.

This script builds a preset scene (or loads one from a JSON scene file),
renders it scanline by scanline and writes the result. By default the image
is written to standard output as plain PPM (P3) while progress goes to
standard error.

Usage:
    python -m examples.render_spheres [options] > image.ppm

Options:
    --width WIDTH           Image width in pixels (default: 400)
    --aspect-ratio RATIO    Width / height (default: 16/9)
    --samples SAMPLES       Samples per pixel (default: 100)
    --max-depth DEPTH       Maximum ray bounces (default: 50)
    --scene NAME            Preset scene: three_spheres or random
    --scene-file PATH       Load the scene from a JSON file instead
    --seed SEED             Random seed for reproducible renders
    --output OUTPUT         Output path (.ppm or .png), '-' for stdout PPM
    --preview               Show the result in a matplotlib window
    --quiet                 Suppress progress output
    --verbose               Enable debug logging

Example:
    python -m examples.render_spheres --width 200 --samples 20 --output spheres.png
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import time
from pathlib import Path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere scene to a PPM or PNG image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=16.0 / 9.0,
        help="Image width divided by height (default: 16/9)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Number of samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=50,
        help="Maximum number of ray bounces (default: 50)",
    )
    scene_group = parser.add_mutually_exclusive_group()
    scene_group.add_argument(
        "--scene",
        choices=["three_spheres", "random"],
        default="three_spheres",
        help="Preset scene to render (default: three_spheres)",
    )
    scene_group.add_argument(
        "--scene-file",
        type=str,
        default=None,
        help="JSON scene description to render instead of a preset",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: nondeterministic)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="-",
        help="Output path (.ppm or .png); '-' writes PPM to stdout (default: -)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the rendered image in a matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def render_spheres(
    width: int = 400,
    aspect_ratio: float = 16.0 / 9.0,
    num_samples: int = 100,
    max_depth: int = 50,
    scene_name: str = "three_spheres",
    scene_file: str | None = None,
    seed: int | None = None,
    output_path: str = "-",
    preview: bool = False,
    quiet: bool = False,
) -> Path | None:
    """Render a scene and write the image.

    Args:
        width: Image width in pixels.
        aspect_ratio: Image width divided by height.
        num_samples: Number of samples per pixel.
        max_depth: Maximum number of ray bounces.
        scene_name: Preset scene name (ignored when scene_file is given).
        scene_file: Optional JSON scene description.
        seed: Random seed, or None for a nondeterministic render.
        output_path: Output file path, or '-' for PPM on stdout.
        preview: If True, display the result with matplotlib.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file, or None when written to stdout.
    """
    # Lazy imports keep --help fast
    import numpy as np

    from spherecast.camera.thin_lens import CameraSettings, ThinLensCamera
    from spherecast.core.renderer import Renderer, RenderSettings
    from spherecast.preview.export import save_image, write_ppm
    from spherecast.scene.manager import load_scene_file
    from spherecast.scene.presets import create_preset_scene

    settings = RenderSettings(
        image_width=width,
        aspect_ratio=aspect_ratio,
        samples_per_pixel=num_samples,
        max_depth=max_depth,
    )
    rng = np.random.default_rng(seed)

    if scene_file is not None:
        if not quiet:
            print(f"Loading scene from {scene_file}...", file=sys.stderr)
        scene, camera_settings = load_scene_file(scene_file)
        if camera_settings is None:
            camera_settings = CameraSettings()
    else:
        if not quiet:
            print(f"Creating {scene_name} scene...", file=sys.stderr)
        scene, camera_settings = create_preset_scene(scene_name, rng, aspect_ratio)

    # The image shape decides the viewport shape
    camera_settings = dataclasses.replace(camera_settings, aspect_ratio=aspect_ratio)
    camera = ThinLensCamera(camera_settings)

    renderer = Renderer(scene.world, camera, settings, rng)

    if not quiet:
        print(
            f"Rendering {settings.image_width}x{settings.image_height}, "
            f"{settings.samples_per_pixel} samples per pixel...",
            file=sys.stderr,
        )

    start_time = time.time()

    def progress_callback(completed: int, total: int) -> None:
        if not quiet:
            print(
                f"\rScanlines remaining: {total - completed} ",
                end="",
                file=sys.stderr,
                flush=True,
            )

    renderer.render(callback=progress_callback)

    if not quiet:
        print(file=sys.stderr)  # Newline after progress

    pixels = renderer.get_image_uint8()

    output_file: Path | None = None
    if output_path == "-":
        write_ppm(sys.stdout, pixels)
        sys.stdout.flush()
    else:
        output_file = Path(output_path)
        save_image(pixels, output_file)

    total_time = time.time() - start_time
    if not quiet:
        if output_file is not None:
            print(f"Saved to: {output_file.absolute()}", file=sys.stderr)
        print(f"Done. Total time: {total_time:.2f}s", file=sys.stderr)

    if preview:
        from spherecast.preview.display import show_preview

        show_preview(pixels, title=scene_name, samples_per_pixel=settings.samples_per_pixel)

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        render_spheres(
            width=args.width,
            aspect_ratio=args.aspect_ratio,
            num_samples=args.samples,
            max_depth=args.max_depth,
            scene_name=args.scene,
            scene_file=args.scene_file,
            seed=args.seed,
            output_path=args.output,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
