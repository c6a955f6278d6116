"""Pinhole camera and the per-pixel render loop.

The camera sits at the origin of its own space looking down -z at a canvas
one unit away. ``field_of_view`` is the angle spanned by the longer side of
the image; the shorter side follows from the aspect ratio:

    half_view = tan(field_of_view / 2)
    aspect = hsize / vsize
    half_width, half_height = (half_view, half_view / aspect)  if aspect >= 1
                              (half_view * aspect, half_view)  otherwise
    pixel_size = 2 * half_width / hsize

``transform`` is the world-to-camera matrix (usually from
``view_transform``); rays are mapped back to world space by its inverse.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.core.transforms import view_transform
    >>> from whitted.core.tuples import point, vector
    >>> camera = Camera(320, 240, math.pi / 3)
    >>> camera.transform = view_transform(
    ...     point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)
    ... )
    >>> canvas = camera.render(world)  # doctest: +SKIP
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from whitted.core.canvas import Canvas
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import normalize, point

if TYPE_CHECKING:
    from whitted.scene.world import World

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera mapping canvas pixels to world-space rays.

    Args:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle in radians spanned by the wider canvas side.
        transform: World-to-camera transform (default identity).

    Raises:
        ValueError: If a size is not positive or the field of view is not
            in (0, pi).
        SingularMatrixError: If the transform cannot be inverted.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera dimensions must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {field_of_view}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = (self._half_width * 2.0) / hsize

        self.transform = transform if transform is not None else IDENTITY

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._inverse = value.inverse()
        self._transform = value

    @property
    def inverse(self) -> Matrix:
        """Cached inverse of the transform (camera to world space)."""
        return self._inverse

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Return the world-space ray through the centre of pixel (px, py)."""
        # Offset from the canvas edge to the pixel centre
        x_offset = (px + 0.5) * self._pixel_size
        y_offset = (py + 0.5) * self._pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self._half_width - x_offset
        world_y = self._half_height - y_offset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ point(0.0, 0.0, 0.0)
        return Ray(origin, normalize(pixel - origin))

    def render(self, world: World, callback: ProgressCallback | None = None) -> Canvas:
        """Render the world into a new canvas, one ray per pixel.

        Pixels are visited in row-major order. The world and camera are only
        read, so every pixel is independent of every other.

        Args:
            world: The scene to render.
            callback: Optional function called after each row with
                (rows_done, total_rows).

        Returns:
            A canvas of size hsize x vsize.
        """
        canvas = Canvas(self._hsize, self._vsize)
        for y in range(self._vsize):
            for x in range(self._hsize):
                canvas.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))
            if callback is not None:
                callback(y + 1, self._vsize)
        return canvas


def render(camera: Camera, world: World, callback: ProgressCallback | None = None) -> Canvas:
    """Render ``world`` as seen by ``camera``; see ``Camera.render``."""
    return camera.render(world, callback=callback)
