"""Scene module for intersections and the world aggregate.

This module handles ray-scene queries:

Components:
    intersection: Intersection records, aggregation, hit selection and
        prepared shading computations (hit point, eye, normal, over point)
    world: World of shapes and lights; color_at, shade_hit, is_shadowed
    demo: Factory for the demo scene (floor plane, three spheres, one light)

The world is read-only during rendering: no query mutates a shape, material
or light, so pixels can be shaded independently.
"""

from .demo import DemoSceneParams, create_demo_scene
from .intersection import (
    Computations,
    Intersection,
    hit,
    intersect,
    intersections,
    prepare_computations,
)
from .world import BACKGROUND_COLOR, World, default_world

__all__ = [
    # Intersection module
    "Intersection",
    "Computations",
    "intersect",
    "intersections",
    "hit",
    "prepare_computations",
    # World module
    "World",
    "default_world",
    "BACKGROUND_COLOR",
    # Demo module
    "DemoSceneParams",
    "create_demo_scene",
]
