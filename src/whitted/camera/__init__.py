"""Camera module for view and ray generation.

This module provides the pinhole camera used to render a world:

Components:
    camera: Camera with field of view, canvas size and view transform;
        ray_for_pixel maps a pixel centre to a world-space ray and render
        runs the per-pixel loop into a Canvas

Pixel coordinates are canvas coordinates:
    x in [0, hsize): left to right
    y in [0, vsize): top to bottom
"""

from .camera import Camera, ProgressCallback, render

__all__ = [
    "Camera",
    "ProgressCallback",
    "render",
]
