"""Surface patterns.

A pattern maps a point in **pattern space** to a colour. Like shapes, each
pattern owns a transform; a world-space point is taken into the shape's
object space by the shape's inverse transform, then into pattern space by the
pattern's inverse transform, so patterns move, scale and rotate with the
object they decorate.

Variants:
    StripePattern: alternates on floor(x)
    GradientPattern: blends linearly from a to b across each unit of x
    RingPattern: alternates on floor(sqrt(x^2 + z^2))
    CheckerPattern: alternates on floor(x) + floor(y) + floor(z)

Example:
    >>> from whitted.core.color import BLACK, WHITE
    >>> from whitted.core.transforms import scaling
    >>> from whitted.materials.patterns import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK, transform=scaling(0.25, 1.0, 1.0))
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from whitted.core.color import Color
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import Tuple4

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


class Pattern(ABC):
    """Base class for two-colour patterns.

    Args:
        a: First colour.
        b: Second colour.
        transform: Pattern-to-object transform (default identity).

    Raises:
        SingularMatrixError: If the transform cannot be inverted.
    """

    def __init__(self, a: Color, b: Color, transform: Matrix | None = None) -> None:
        self.a = a
        self.b = b
        self.transform = transform if transform is not None else IDENTITY

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._inverse = value.inverse()
        self._transform = value

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    @abstractmethod
    def pattern_at(self, pattern_point: Tuple4) -> Color:
        """Return the colour at a point already in pattern space."""

    def pattern_at_shape(self, shape: Shape, world_point: Tuple4) -> Color:
        """Return the colour at a world-space point on the given shape."""
        object_point = shape.inverse @ world_point
        return self.pattern_at(self._inverse @ object_point)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r})"


class StripePattern(Pattern):
    """Alternating stripes along x, constant in y and z."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        return self.a if math.floor(pattern_point.x) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Linear blend from a to b repeating every unit along x."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        distance = math.hypot(pattern_point.x, pattern_point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckerPattern(Pattern):
    """3-D checkerboard of unit cubes."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        total = (
            math.floor(pattern_point.x) + math.floor(pattern_point.y) + math.floor(pattern_point.z)
        )
        return self.a if total % 2 == 0 else self.b
