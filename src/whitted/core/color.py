"""RGB colour values.

Channels are unbounded real numbers: lighting may produce values above 1.0
and nothing in the rendering core clamps them. Clamping and quantisation
happen only when a canvas is exported (see ``whitted.preview.export``).
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.tuples import approx_equal


@dataclass(frozen=True, eq=False)
class Color:
    """A colour with red, green and blue channels.

    Multiplying two colours gives their component-wise (Hadamard) product;
    multiplying by a number scales every channel.
    """

    red: float
    green: float
    blue: float

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
