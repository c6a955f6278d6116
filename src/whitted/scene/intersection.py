"""Intersection records, hit selection and shading preparation.

An ``Intersection`` pairs a parametric distance ``t`` with the shape that was
struck. The **hit** of a collection is the intersection with the smallest
non-negative ``t``; intersections behind the ray origin (``t < 0``) are never
hits, even though they are kept in the collection.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry import Sphere
    >>> from whitted.scene.intersection import hit, intersect
    >>> sphere = Sphere()
    >>> xs = intersect(sphere, Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
    >>> hit(xs).t
    4.0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple4, dot

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray/shape intersection.

    Attributes:
        t: Parametric distance along the ray.
        shape: The shape that was hit (compared by identity).
    """

    t: float
    shape: Shape


@dataclass(frozen=True)
class Computations:
    """Values precomputed at a hit for shading.

    Attributes:
        t: Parametric distance of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        over_point: ``point`` nudged along the normal by EPSILON; used as the
            shadow-ray origin so a surface does not shadow itself.
        eyev: Unit vector toward the eye (the negated ray direction).
        normalv: Unit surface normal, flipped to face the eye.
        inside: True if the hit is on the inside of the surface.
    """

    t: float
    shape: Shape
    point: Tuple4
    over_point: Tuple4
    eyev: Tuple4
    normalv: Tuple4
    inside: bool


def intersect(shape: Shape, ray: Ray) -> list[Intersection]:
    """Intersect a world-space ray with one shape.

    Returns:
        One Intersection per candidate t, in the order the shape produced them.
    """
    return [Intersection(t, shape) for t in shape.intersect(ray)]


def intersections(*groups: Intersection | Iterable[Intersection]) -> list[Intersection]:
    """Aggregate intersections into a single collection sorted by t.

    Accepts individual Intersection objects, iterables of them, or a mix.
    The sort is stable, so equal t values keep their input order.
    """
    collected: list[Intersection] = []
    for group in groups:
        if isinstance(group, Intersection):
            collected.append(group)
        else:
            collected.extend(group)
    collected.sort(key=lambda i: i.t)
    return collected


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the intersection with the smallest non-negative t.

    Returns:
        The hit, or None if the collection is empty or every t is negative.
    """
    candidates = [i for i in xs if i.t >= 0.0]
    if not candidates:
        return None
    return min(candidates, key=lambda i: i.t)


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    """Compute the shading context for an intersection along a ray."""
    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = intersection.shape.normal_at(point)

    inside = dot(normalv, eyev) < 0.0
    if inside:
        normalv = -normalv

    return Computations(
        t=intersection.t,
        shape=intersection.shape,
        point=point,
        over_point=point + normalv * EPSILON,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
    )
