"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Homogeneous points/vectors, EPSILON and approximate comparison
    color: RGB colour values
    matrix: Immutable matrices with inverse, transpose and cofactors
    transforms: Translation, scaling, rotation, shearing, view transform
    ray: Ray data structure
    canvas: 2-D grid of colour samples written by the render loop
    integrator: Taichi data-parallel renderer (optional backend)

Matrices compose right to left: ``A @ B @ C`` applies ``C`` first.
"""

from .canvas import Canvas
from .color import BLACK, WHITE, Color
from .matrix import IDENTITY, Matrix, SingularMatrixError
from .ray import Ray
from .transforms import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import (
    EPSILON,
    Tuple4,
    approx_equal,
    cross,
    dot,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)

# Note: integrator is NOT imported here; it pulls in Taichi and the geometry
# and materials packages. Import it directly when needed:
#   from whitted.core.integrator import TaichiRenderer

__all__ = [
    "EPSILON",
    "approx_equal",
    "Tuple4",
    "point",
    "vector",
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "reflect",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "SingularMatrixError",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "Canvas",
]
