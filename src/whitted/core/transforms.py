"""Transform builders.

Each builder returns a standalone 4x4 matrix meant to be left-multiplied into
a composed chain. With the right-to-left convention of ``Matrix``,
``translation(...) @ rotation_y(...) @ scaling(...)`` scales first, then
rotates, then translates.
"""

import math

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple4, cross, normalize


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z); vectors are unaffected."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale each axis independently. Negative factors reflect."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotate around the x axis (left-handed, looking down the axis)."""
    c = math.cos(radians)
    s = math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Rotate around the y axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Rotate around the z axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each coordinate in proportion to the other two.

    Args:
        xy: Moves x in proportion to y.
        xz: Moves x in proportion to z.
        yx: Moves y in proportion to x.
        yz: Moves y in proportion to z.
        zx: Moves z in proportion to x.
        zy: Moves z in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Tuple4, to_point: Tuple4, up: Tuple4) -> Matrix:
    """Build the world-to-camera matrix for an eye looking at a target.

    The basis is orthonormalized with cross products, so ``up`` only needs to
    point roughly upward.

    Args:
        from_point: The eye position.
        to_point: The point to look at.
        up: Approximate up direction.

    Returns:
        A matrix that orients the world relative to the eye, with the eye at
        the origin looking down -z.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
