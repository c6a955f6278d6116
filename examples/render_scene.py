#!/usr/bin/env python3
"""Render the demo scene.

This script renders the demo scene end to end: it builds the world and
camera, traces one ray per pixel with either the Python renderer or the
parallel Taichi renderer, and writes the canvas as PNG or PPM.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 320)
    --height HEIGHT     Image height in pixels (default: 160)
    --fov DEGREES       Horizontal field of view in degrees (default: 60)
    --output OUTPUT     Output file path, .png or .ppm (default: scene.png)
    --backend BACKEND   "python" or "taichi" (default: python)
    --plain-floor       Disable the checker pattern on the floor
    --show              Display the result with matplotlib
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --width 640 --height 320 --backend taichi
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=320,
        help="Image width in pixels (default: 320)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=160,
        help="Image height in pixels (default: 160)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Horizontal field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path, .png or .ppm (default: scene.png)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="python",
        help="Renderer to use (default: python)",
    )
    parser.add_argument(
        "--plain-floor",
        action="store_true",
        help="Disable the checker pattern on the floor",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the result with matplotlib",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_scene(
    width: int = 320,
    height: int = 160,
    fov_degrees: float = 60.0,
    output_path: str = "scene.png",
    backend: str = "python",
    checkered_floor: bool = True,
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Horizontal field of view in degrees.
        output_path: Output file path (.png or .ppm).
        backend: "python" for the reference loop, "taichi" for the parallel kernel.
        checkered_floor: If True the floor carries a checker pattern.
        show: If True, display the image after saving.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so a missing optional backend only fails when selected
    from whitted.preview.export import save_image
    from whitted.scene.demo import DemoSceneParams, create_demo_scene

    params = DemoSceneParams(
        width=width,
        height=height,
        field_of_view=math.radians(fov_degrees),
        checkered_floor=checkered_floor,
    )

    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")
    world, camera = create_demo_scene(params)

    if not quiet:
        print(f"Rendering with the {backend} backend...")
    start_time = time.time()

    if backend == "taichi":
        from whitted.core.integrator import TaichiRenderer

        canvas = TaichiRenderer().render(camera, world)
    else:

        def progress_callback(rows_done: int, total_rows: int) -> None:
            if not quiet:
                progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
                print(
                    f"\r  Progress: {rows_done}/{total_rows} rows ({progress_pct:.1f}%)",
                    end="",
                    flush=True,
                )

        canvas = camera.render(world, callback=progress_callback)
        if not quiet:
            print()  # Newline after progress

    output_file = save_image(canvas, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if show:
        from whitted.preview.display import show_canvas

        show_canvas(canvas, title=f"Demo scene ({backend})")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        render_scene(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
            backend=args.backend,
            checkered_floor=not args.plain_floor,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, OSError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
