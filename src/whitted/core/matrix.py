"""Immutable square matrices for affine transforms.

Matrices are backed by read-only NumPy arrays. They compose by the ``@``
operator with **right-to-left apply order**: transforming a tuple by
``A @ B @ C`` applies ``C`` first, then ``B``, then ``A``. Every transform
chain in the package relies on this convention.

4x4 matrices act on ``Tuple4`` values; 2x2 and 3x3 matrices exist as the
intermediates of determinant and cofactor computation.

Example:
    >>> from whitted.core.matrix import Matrix
    >>> from whitted.core.transforms import translation, scaling
    >>> from whitted.core.tuples import point
    >>> m = translation(10.0, 0.0, 0.0) @ scaling(2.0, 2.0, 2.0)
    >>> m @ point(1.0, 1.0, 1.0)
    Tuple4(x=12.0, y=2.0, z=2.0, w=1.0)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON, Tuple4

# Determinant magnitude below which a matrix is treated as singular. Kept far
# below EPSILON so small uniform scales (det = s**3) remain invertible.
SINGULAR_EPSILON = 1e-12


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


class Matrix:
    """An immutable square matrix of size 2, 3 or 4.

    Args:
        rows: Row-major values, e.g. a list of 4 lists of 4 numbers, or a
            NumPy array of shape (n, n).

    Raises:
        ValueError: If the rows do not form a 2x2, 3x3 or 4x4 matrix.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] not in (2, 3, 4):
            raise ValueError(f"Matrix must be 2x2, 3x3 or 4x4, got shape {data.shape}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Create the identity matrix of the given size."""
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the matrix values."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __matmul__(self, other: Matrix | Tuple4) -> Matrix | Tuple4:
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple4):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices can transform a tuple")
            x, y, z, w = self._data @ other.to_numpy()
            return Tuple4(float(x), float(y), float(z), float(w))
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    # =========================================================================
    # Determinants and cofactors
    # =========================================================================

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy of this matrix with the given row and column removed."""
        if self.size == 2:
            raise ValueError("A 2x2 matrix has no submatrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row.

        Expansion keeps results exact for matrices of small integers, which
        np.linalg.det (LU based) does not.
        """
        if self.size == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= SINGULAR_EPSILON

    def inverse(self) -> Matrix:
        """Compute the inverse matrix.

        Returns:
            The matrix M^-1 such that M @ M^-1 is (approximately) the identity.

        Raises:
            SingularMatrixError: If the determinant is within SINGULAR_EPSILON of zero.
        """
        det = self.determinant()
        if abs(det) < SINGULAR_EPSILON:
            raise SingularMatrixError(f"Matrix is not invertible (determinant {det!r})")
        return Matrix(np.linalg.inv(self._data))

    # =========================================================================
    # Fluent chaining (each call applies after the transforms already chained)
    # =========================================================================

    def translate(self, x: float, y: float, z: float) -> Matrix:
        from whitted.core.transforms import translation

        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        from whitted.core.transforms import scaling

        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Matrix:
        from whitted.core.transforms import rotation_x

        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        from whitted.core.transforms import rotation_y

        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        from whitted.core.transforms import rotation_z

        return rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        from whitted.core.transforms import shearing

        return shearing(xy, xz, yx, yz, zx, zy) @ self


IDENTITY = Matrix.identity()
