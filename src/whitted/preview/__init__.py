"""Preview module for exporting and displaying rendered canvases.

Components:
    export: PPM and PNG encoding of a canvas (clamp, scale, round), RMSE
        comparison of two canvases
    display: Matplotlib preview with optional tone mapping and gamma

The rendering core hands a finished Canvas to these functions; it never
clamps colours or writes files itself.
"""

from .display import ToneMapMethod, process_canvas_for_display, show_canvas
from .export import (
    canvas_to_ppm,
    canvas_to_uint8,
    compute_rmse,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    # Export
    "canvas_to_uint8",
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "save_image",
    "compute_rmse",
    # Display
    "ToneMapMethod",
    "process_canvas_for_display",
    "show_canvas",
]
