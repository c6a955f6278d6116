"""Ray data structure.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> ray = Ray(origin=point(2.0, 3.0, 4.0), direction=vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)  # Point 2.5 units along the ray
    Tuple4(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple4


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length: rays transformed into object space keep their scale so
            that ``t`` values stay comparable with world space.
    """

    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Compute the point origin + direction * t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction transformed by matrix."""
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)
