"""Geometry module for shape primitives.

This module provides the shape wrapper and its primitives:

Components:
    shape: Abstract Shape owning transform and material, converting rays and
        normals between world and object space
    sphere: Unit sphere centred at the object-space origin
    plane: Infinite xz plane

Every primitive implements the same two-function contract:
    local_intersect(local_ray) -> [t, ...]
    local_normal_at(local_point) -> normal
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
]
