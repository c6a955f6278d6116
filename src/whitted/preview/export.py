"""Image export utilities for rendered canvases.

The rendering core never writes files; this module is the encoder that turns
a canvas of linear, unclamped colour into 8-bit images.

Supported formats:
    - PPM (plain "P3" text, written directly)
    - PNG (8-bit RGB via Pillow)

Each channel is clamped to [0, 1], scaled to 0..255 and rounded.

Example:
    >>> from whitted.preview.export import save_png, save_ppm
    >>> canvas = camera.render(world)  # doctest: +SKIP
    >>> save_ppm(canvas, "scene.ppm")  # doctest: +SKIP
    >>> save_png(canvas, "scene.png")  # doctest: +SKIP
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.core.canvas import Canvas

# Maximum value of an 8-bit channel
MAX_COLOR_VALUE = 255

# Plain PPM readers may reject lines longer than 70 characters
PPM_MAX_LINE_LENGTH = 70


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit array of shape (height, width, 3).

    Args:
        canvas: The canvas to convert.

    Returns:
        Clamped, scaled and rounded channel values with dtype uint8.
    """
    image = np.clip(canvas.to_numpy(), 0.0, 1.0)
    # Round half up; np.rint would round half to even
    return np.floor(image * MAX_COLOR_VALUE + 0.5).astype(np.uint8)


def _wrap_values(values: list[str]) -> list[str]:
    """Join channel values with spaces, breaking lines before 70 characters."""
    lines: list[str] = []
    current = ""
    for value in values:
        if not current:
            current = value
        elif len(current) + 1 + len(value) <= PPM_MAX_LINE_LENGTH:
            current = f"{current} {value}"
        else:
            lines.append(current)
            current = value
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain PPM (P3) text.

    The header is ``P3``, ``width height`` and ``255``. Each canvas row
    starts on a new line and no line exceeds 70 characters. The text ends
    with a newline.
    """
    pixels = canvas_to_uint8(canvas)
    lines = ["P3", f"{canvas.width} {canvas.height}", str(MAX_COLOR_VALUE)]
    for row in pixels:
        lines.extend(_wrap_values([str(int(v)) for v in row.reshape(-1)]))
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas as a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas as an 8-bit RGB PNG file."""
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas))
    pil_image.save(filepath)


def save_image(canvas: Canvas, filepath: str | Path) -> Path:
    """Save a canvas, choosing the format from the file suffix.

    Args:
        canvas: The canvas to save.
        filepath: Output path ending in ``.ppm`` or ``.png``.

    Returns:
        The output path.

    Raises:
        ValueError: If the suffix is not a supported format.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        save_ppm(canvas, path)
    elif suffix == ".png":
        save_png(canvas, path)
    else:
        raise ValueError(f"Unsupported image format: {suffix!r} (use .ppm or .png)")
    return path


def compute_rmse(canvas_a: Canvas, canvas_b: Canvas) -> float:
    """Compute root mean squared error between two canvases.

    Args:
        canvas_a: First canvas.
        canvas_b: Second canvas (must have the same size as canvas_a).

    Returns:
        RMSE over all channels of the linear colour buffers.

    Raises:
        ValueError: If canvas sizes don't match.
    """
    image_a = canvas_a.to_numpy()
    image_b = canvas_b.to_numpy()
    if image_a.shape != image_b.shape:
        raise ValueError(f"Canvas sizes must match: {image_a.shape} vs {image_b.shape}")

    diff = image_a - image_b
    return float(np.sqrt(np.mean(diff**2)))
