"""Unit sphere primitive.

In object space the sphere is centred at the origin with radius 1. Scaling
and translation come from the shape transform.

The ray-sphere intersection substitutes the ray's parametric position into
``|P|^2 = 1``:

    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - 1

A negative discriminant means a miss; otherwise both roots are returned,
even when they coincide (tangent ray) and regardless of sign.
"""

import math

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple4, dot, point
from whitted.geometry.shape import Shape

ORIGIN = point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """A unit sphere centred at the object-space origin."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        sphere_to_ray = local_ray.origin - ORIGIN
        a = dot(local_ray.direction, local_ray.direction)
        b = 2.0 * dot(local_ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [t0, t1]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        return local_point - ORIGIN
