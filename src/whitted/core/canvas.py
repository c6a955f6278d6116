"""Canvas: a 2-D grid of colour samples.

The canvas stores linear, unclamped colour in a float64 NumPy buffer of shape
``(height, width, 3)``, addressed as ``(x, y)`` with ``(0, 0)`` at the top-left.
The render loop is its single writer; exporters read it back through
``pixel_at`` or ``to_numpy``.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.core.color import BLACK, Color


class Canvas:
    """A width x height grid of colours, initially filled with ``fill``.

    Raises:
        ValueError: If width or height is not positive.
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.empty((height, width, 3), dtype=np.float64)
        self._pixels[:, :] = fill.to_tuple()

    @classmethod
    def from_numpy(cls, image: npt.ArrayLike) -> Canvas:
        """Build a canvas from an array of shape (height, width, 3)."""
        data = np.asarray(image, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (H, W, 3), got {data.shape}")
        canvas = cls(data.shape[1], data.shape[0])
        canvas._pixels[...] = data
        return canvas

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} canvas")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = color.to_tuple()

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the linear colour buffer, shape (height, width, 3)."""
        return self._pixels.copy()
