"""Homogeneous 4-component tuples for points and vectors.

A single ``Tuple4`` type represents both points (``w == 1``) and vectors
(``w == 0``). Arithmetic keeps the ``w`` component consistent: subtracting two
points yields a vector, adding a vector to a point yields a point, and the
cross product always yields a vector.

Equality is approximate: two tuples compare equal when every component
differs by less than ``EPSILON``.

Example:
    >>> from whitted.core.tuples import point, vector, normalize
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 2.0)
    >>> p + v
    Tuple4(x=1.0, y=2.0, z=5.0, w=1.0)
    >>> normalize(v)
    Tuple4(x=0.0, y=0.0, z=1.0, w=0.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Tolerance shared by every approximate comparison in the package
EPSILON = 1e-5


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return True if two scalars differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


@dataclass(frozen=True, eq=False)
class Tuple4:
    """A homogeneous (x, y, z, w) tuple.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    def is_point(self) -> bool:
        return approx_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        return approx_equal(self.w, 0.0)

    def __add__(self, other: Tuple4) -> Tuple4:
        return Tuple4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple4) -> Tuple4:
        return Tuple4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple4:
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple4:
        return Tuple4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple4:
        return Tuple4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return the components as a float64 array of shape (4,)."""
        return np.array((self.x, self.y, self.z, self.w), dtype=np.float64)


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return Tuple4(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return Tuple4(float(x), float(y), float(z), 0.0)


# =============================================================================
# Vector Utility Functions
# =============================================================================


def magnitude(v: Tuple4) -> float:
    """Compute the Euclidean length of a tuple (all four components)."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z + v.w * v.w)


def normalize(v: Tuple4) -> Tuple4:
    """Scale a tuple to unit length.

    Args:
        v: The tuple to normalize. Must not be zero-length.

    Returns:
        A unit-length tuple in the same direction as v.

    Raises:
        ZeroDivisionError: If v has zero length.
    """
    length = magnitude(v)
    if length == 0.0:
        raise ZeroDivisionError("cannot normalize a zero-length tuple")
    return v / length


def dot(a: Tuple4, b: Tuple4) -> float:
    """Compute the four-component dot product a . b."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    """Compute the cross product a x b of the xyz parts; always a vector."""
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def reflect(incident: Tuple4, normal: Tuple4) -> Tuple4:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        incident - normal * 2 * dot(incident, normal).
    """
    return incident - normal * (2.0 * dot(incident, normal))
