"""Common wrapper for all shape primitives.

Every primitive implements two capabilities in its own **object space**:

    local_intersect(local_ray) -> list of t values
    local_normal_at(local_point) -> normal vector

``Shape`` owns the transform and material and performs the space conversion
once for every variant:

- ``intersect`` transforms the world-space ray by the inverse transform
  before delegating to ``local_intersect``.
- ``normal_at`` transforms the world-space point into object space, asks for
  the local normal, then maps it back by the inverse-transpose of the
  transform and renormalizes, so normals stay perpendicular to the surface
  under non-uniform scaling.

Adding a primitive means subclassing ``Shape`` and implementing the two
``local_*`` methods; the intersection engine and the world never change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple4, normalize, vector
from whitted.materials.material import Material


class Shape(ABC):
    """Base class for geometric primitives.

    Args:
        transform: Object-to-world transform (default identity). Its inverse
            is computed immediately, so a singular matrix raises here.
        material: Surface material (default ``Material()``).

    Raises:
        SingularMatrixError: If the transform cannot be inverted.
    """

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self.transform = transform if transform is not None else IDENTITY
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        if value.size != 4:
            raise ValueError("Shape transforms must be 4x4 matrices")
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        """Cached inverse of the transform (world to object space)."""
        return self._inverse

    @property
    def inverse_transpose(self) -> Matrix:
        """Cached inverse-transpose of the transform, used for normals."""
        return self._inverse_transpose

    def world_to_object(self, world_point: Tuple4) -> Tuple4:
        return self._inverse @ world_point

    def intersect(self, ray: Ray) -> list[float]:
        """Return the candidate t values where a world-space ray meets the shape.

        The values are returned as computed, including negative ones; hit
        selection is the caller's concern.
        """
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        """Return the unit surface normal at a world-space point."""
        local_normal = self.local_normal_at(self.world_to_object(world_point))
        world_normal = self._inverse_transpose @ local_normal
        # The transpose leaks translation into w; drop it before normalizing
        return normalize(vector(world_normal.x, world_normal.y, world_normal.z))

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Intersect a ray already transformed into object space."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        """Return the (not necessarily unit) normal at an object-space point."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r}, material={self.material!r})"
