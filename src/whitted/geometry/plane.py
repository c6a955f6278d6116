"""Infinite plane primitive.

In object space the plane is the xz plane (y = 0) with normal (0, 1, 0)
everywhere. A ray whose direction has (nearly) no y component runs parallel
to the plane, or lies in it, and never intersects.
"""

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, vector
from whitted.geometry.shape import Shape

PLANE_NORMAL = vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The object-space xz plane."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        if abs(local_ray.direction.y) < EPSILON:
            return []
        return [-local_ray.origin.y / local_ray.direction.y]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        return PLANE_NORMAL
