"""World: the aggregate of shapes and lights.

The world answers the three scene-level queries of the renderer:

- ``color_at(ray)``: intersect, pick the hit and shade it (black background
  when nothing is hit).
- ``shade_hit(comps)``: sum the Phong contribution of every light, each with
  its own shadow test.
- ``is_shadowed(point, light)``: cast a ray from the point toward the light
  and report whether something blocks it before the light.

Shapes and lights are kept in insertion order. None of these queries mutate
the world, so a single world may be rendered concurrently.

Example:
    >>> from whitted.scene.world import default_world
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> world = default_world()
    >>> world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    Color(red=0.38066..., green=0.47583..., blue=0.28549...)
"""

from __future__ import annotations

from collections.abc import Iterable

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.ray import Ray
from whitted.core.transforms import scaling
from whitted.core.tuples import Tuple4, magnitude, normalize, point
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.lighting import lighting
from whitted.materials.lights import PointLight
from whitted.materials.material import Material
from whitted.scene.intersection import (
    Computations,
    Intersection,
    hit,
    intersect,
    intersections,
    prepare_computations,
)

# Colour returned for rays that strike nothing
BACKGROUND_COLOR = BLACK


class World:
    """A collection of shapes and point lights.

    Args:
        shapes: Initial shapes, in iteration order.
        lights: Initial lights, in iteration order.
    """

    def __init__(
        self,
        shapes: Iterable[Shape] | None = None,
        lights: Iterable[PointLight] | None = None,
    ) -> None:
        self.shapes: list[Shape] = list(shapes) if shapes is not None else []
        self.lights: list[PointLight] = list(lights) if lights is not None else []

    def add_shape(self, shape: Shape) -> World:
        """Append a shape; returns the world for chaining."""
        self.shapes.append(shape)
        return self

    def add_light(self, light: PointLight) -> World:
        """Append a light; returns the world for chaining."""
        self.lights.append(light)
        return self

    def __contains__(self, shape: object) -> bool:
        return any(s is shape for s in self.shapes)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every shape; results sorted by t."""
        return intersections(*(intersect(shape, ray) for shape in self.shapes))

    def shade_hit(self, comps: Computations) -> Color:
        """Sum the lighting from every light at a prepared hit."""
        color = BLACK
        for light in self.lights:
            color = color + lighting(
                comps.shape.material,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                in_shadow=self.is_shadowed(comps.over_point, light),
                shape=comps.shape,
            )
        return color

    def color_at(self, ray: Ray) -> Color:
        """Return the colour seen along a ray."""
        nearest = hit(self.intersect(ray))
        if nearest is None:
            return BACKGROUND_COLOR
        return self.shade_hit(prepare_computations(nearest, ray))

    def is_shadowed(self, point: Tuple4, light: PointLight) -> bool:
        """Return True if a shape lies between the point and the light.

        Only hits with 0 < t < distance count, so a surface touching the
        point itself never shadows it.
        """
        to_light = light.position - point
        distance = magnitude(to_light)
        xs = self.intersect(Ray(point, normalize(to_light)))
        return any(0.0 < i.t < distance for i in xs)


def default_world() -> World:
    """Build the two-sphere reference world.

    An outer unit sphere (colour (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2)
    encloses an inner sphere scaled by 0.5, lit by a white light at
    (-10, 10, -10).
    """
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(point(-10.0, 10.0, -10.0), WHITE)
    return World(shapes=[outer, inner], lights=[light])
