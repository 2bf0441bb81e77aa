"""
Vector: fixed-length sequence of float64 values with geometric operations.

The dimension is fixed at construction. Element values change only through
set() / item assignment and the explicitly in-place scale_inplace(); every
other operation returns a new Vector.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ConstructionError,
    InvalidOperationError,
    ValidationError,
)
from pymatrix.core.tolerances import ToleranceTier, DEFAULT_TOLERANCE, is_close
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_dim,
    check_finite,
    check_index,
    check_nonempty,
    check_same_dim,
    check_scalar,
    check_size,
)

if TYPE_CHECKING:
    from pymatrix.linalg.matrix import Matrix


class Vector:
    """
    Dense real vector.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector.zeros(3)
        matrix.row(i) / matrix.column(j)

    The input is copied; later changes to the source sequence do not
    affect the vector.
    """

    __slots__ = ('_elements',)

    # Make numpy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, elements: ArrayLike):
        data = check_array(elements, 'elements', error=ConstructionError)
        check_1d(data, 'elements')
        check_nonempty(data, 'elements')
        check_finite(data, 'elements', error=ConstructionError)
        self._elements = data

    @classmethod
    def zeros(cls, dim: int) -> Vector:
        """Zero vector of the given positive dimension."""
        return cls._wrap(np.zeros(check_size(dim, 'dim'), dtype=np.float64))

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        # Trusted internal path: data is already a validated, owned 1D float64 array
        vector = cls.__new__(cls)
        vector._elements = data
        return vector

    # --- Shape and element access ---

    @property
    def dim(self) -> int:
        """Number of elements."""
        return self._elements.shape[0]

    def dimension(self) -> int:
        return self.dim

    def __len__(self) -> int:
        return self.dim

    def get(self, i: int) -> float:
        """
        Element at index i.

        Raises:
            IndexBoundsError: Unless 0 <= i < dim
        """
        return float(self._elements[check_index(i, self.dim, 'element')])

    def set(self, i: int, value: float) -> None:
        """
        Overwrite the element at index i.

        Raises:
            IndexBoundsError: Unless 0 <= i < dim
            ValidationError: If value is not a real number
        """
        i = check_index(i, self.dim, 'element')
        self._elements[i] = check_scalar(value, 'value')

    def __getitem__(self, i: int) -> float:
        return self.get(i)

    def __setitem__(self, i: int, value: float) -> None:
        self.set(i, value)

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._elements)

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the elements as a 1D float64 array."""
        return self._elements.copy()

    # --- Norms and scaling ---

    def magnitude(self) -> float:
        """
        Euclidean norm, sqrt(sum(x_i^2)).

        math.hypot scales internally, so components near the float64
        limits neither overflow to inf nor underflow to 0.
        """
        return math.hypot(*self._elements)

    def scale(self, factor: float) -> Vector:
        """New vector with every element multiplied by factor."""
        return Vector._wrap(self._elements * check_scalar(factor, 'factor'))

    def scale_inplace(self, factor: float) -> Vector:
        """
        Multiply every element by factor, mutating this vector.

        Returns self so calls can be chained. Use scale() for a copy.
        """
        self._elements *= check_scalar(factor, 'factor')
        return self

    def unit_vector(self) -> Vector:
        """
        Vector of magnitude 1 in the same direction.

        Raises:
            InvalidOperationError: If this is the zero vector
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise InvalidOperationError(
                "unit_vector: cannot normalize a zero-length vector",
                operation='unit_vector'
            )
        return Vector._wrap(self._elements / mag)

    # --- Products ---

    def dot(self, other: Vector) -> float:
        return dot(self, other)

    def cross(self, other: Vector) -> Vector:
        return cross(self, other)

    def angle_between(self, other: Vector) -> float:
        return angle_between(self, other)

    # --- Matrix views ---

    def to_column_matrix(self) -> Matrix:
        """dim x 1 matrix holding the elements; the operand form for transform_vector."""
        from pymatrix.linalg.matrix import Matrix
        return Matrix._wrap(self._elements.reshape(-1, 1).copy())

    def to_row_matrix(self) -> Matrix:
        """1 x dim matrix holding the elements."""
        from pymatrix.linalg.matrix import Matrix
        return Matrix._wrap(self._elements.reshape(1, -1).copy())

    # --- Arithmetic operators ---

    def __neg__(self) -> Vector:
        return Vector._wrap(-self._elements)

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_dim(self.dim, other.dim, 'add')
        return Vector._wrap(self._elements + other._elements)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_dim(self.dim, other.dim, 'subtract')
        return Vector._wrap(self._elements - other._elements)

    def __mul__(self, factor: Any) -> Vector:
        if isinstance(factor, (Vector, bool)) or not isinstance(factor, (int, float, np.number)):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self._elements, other._elements))

    __hash__ = None

    def isclose(self, other: Vector, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        Vectors of different dimension are never close.

        Raises:
            ValidationError: If other is not a Vector
        """
        if not isinstance(other, Vector):
            raise ValidationError(
                f"isclose: expected Vector, got {type(other).__name__}"
            )
        if self.dim != other.dim:
            return False
        return is_close(self._elements, other._elements, rtol=tolerance.rtol, atol=tolerance.atol)

    # --- Display ---

    def __str__(self) -> str:
        return "[" + " ".join(repr(float(x)) for x in self._elements) + "]"

    def __repr__(self) -> str:
        return f"Vector([{', '.join(repr(float(x)) for x in self._elements)}])"


def dot(a: Vector, b: Vector) -> float:
    """
    Dot product, sum(a_i * b_i).

    Raises:
        DimensionError: If a and b differ in dimension
    """
    check_same_dim(a.dim, b.dim, 'dot')
    return float(np.dot(a._elements, b._elements))


def cross(a: Vector, b: Vector) -> Vector:
    """
    Cross product of two 3-dimensional vectors.

    Raises:
        DimensionError: Unless both a and b are 3-dimensional
    """
    check_dim(a.dim, 3, 'cross', 'a')
    check_dim(b.dim, 3, 'cross', 'b')
    a0, a1, a2 = a._elements
    b0, b1, b2 = b._elements
    return Vector._wrap(np.array([
        a1 * b2 - a2 * b1,
        a2 * b0 - a0 * b2,
        a0 * b1 - a1 * b0,
    ], dtype=np.float64))


def angle_between(a: Vector, b: Vector) -> float:
    """
    Angle between a and b in radians, in [0, pi].

    Computed as acos(a.b / (|a||b|)), normalizing each operand before the
    dot product so large or tiny components do not overflow or underflow.
    The cosine is clamped to [-1, 1] so rounding cannot push parallel
    vectors outside acos's domain.

    Raises:
        DimensionError: If a and b differ in dimension
        InvalidOperationError: If either vector has zero magnitude, or the
            cosine is not finite (elements overflowed to Inf)
    """
    check_same_dim(a.dim, b.dim, 'angle_between')
    mag_a, mag_b = a.magnitude(), b.magnitude()
    if mag_a == 0.0 or mag_b == 0.0:
        raise InvalidOperationError(
            "angle_between: angle is undefined for a zero-length vector",
            operation='angle_between'
        )
    with np.errstate(invalid='ignore'):
        cos = float(np.dot(a._elements / mag_a, b._elements / mag_b))
    if not math.isfinite(cos):
        raise InvalidOperationError(
            f"angle_between: cosine is {cos}, operands contain non-finite values",
            operation='angle_between'
        )
    cos = max(-1.0, min(1.0, cos))
    return math.acos(cos)
