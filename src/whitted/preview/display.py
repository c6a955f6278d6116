"""Matplotlib-based preview of rendered canvases.

Features:
    - Optional Reinhard tone mapping for canvases with bright highlights
    - Gamma correction for display
    - Non-blocking or blocking preview window

Example:
    >>> from whitted.preview.display import show_canvas
    >>> canvas = camera.render(world)  # doctest: +SKIP
    >>> show_canvas(canvas, title="Demo scene")  # doctest: +SKIP
"""

from __future__ import annotations

from typing import Literal

import numpy as np
import numpy.typing as npt

from whitted.core.canvas import Canvas

# Type alias for tone mapping options
ToneMapMethod = Literal["none", "reinhard"]


def process_canvas_for_display(
    canvas: Canvas,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Prepare a canvas for display.

    Applies, in order: optional Reinhard tone mapping (c / (1 + c)), clamping
    to [0, 1], then gamma encoding (c ** (1 / gamma)).

    Args:
        canvas: The canvas to display.
        tone_map: "none" or "reinhard".
        gamma: Display gamma; 1.0 leaves values linear.

    Returns:
        Array of shape (height, width, 3) with values in [0, 1].

    Raises:
        ValueError: If the tone mapping method is unknown or gamma is not
            positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")

    image = np.maximum(canvas.to_numpy(), 0.0)
    if tone_map == "reinhard":
        image = image / (1.0 + image)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    image = np.clip(image, 0.0, 1.0)
    if gamma != 1.0:
        image = np.power(image, 1.0 / gamma)
    return image


def show_canvas(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    title: str | None = None,
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib window.

    Args:
        canvas: The canvas to display.
        tone_map: Tone mapping method ("none" or "reinhard").
        gamma: Display gamma.
        title: Window title (default shows the canvas size).
        block: Whether to block execution until the window is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1)
    ax.imshow(process_canvas_for_display(canvas, tone_map=tone_map, gamma=gamma))
    ax.axis("off")
    ax.set_title(title if title is not None else f"{canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)
