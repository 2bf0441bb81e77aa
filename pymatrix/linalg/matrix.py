"""
Matrix: fixed-size 2D grid of float64 values with algebraic operations.

Shape is fixed at construction and validated to be rectangular. Element
values change only through set_element() / item assignment; add,
subtract, multiply, hadamard and transpose all return new matrices.

Binary operations are available three ways, all equivalent:

    multiply(A, B)      module-level function
    A.multiply(B)       method
    A @ B               operator (+ and - for add and subtract)
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ConstructionError,
    DimensionError,
    NotSquareError,
    PerformanceWarning,
    ValidationError,
)
from pymatrix.core.tolerances import (
    DEFAULT_TOLERANCE,
    DETERMINANT_WARN_SIZE,
    ToleranceTier,
    is_close,
)
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_index,
    check_nonempty,
    check_rectangular,
    check_same_shape,
    check_scalar,
    check_size,
)
from pymatrix.linalg._cofactor import cofactor_det, minor as _minor
from pymatrix.linalg.vector import Vector


class Matrix:
    """
    Dense real matrix.

    Construction:
        Matrix([[1.0, 2.0], [3.0, 4.0]])     from a rectangular grid
        Matrix.from_row([1.0, 2.0, 3.0])     1 x n row matrix
        Matrix.zeros(2, 3)                   zero-filled
        Matrix.from_vectors(v1, v2, v3)      one row per Vector

    Construction either yields a complete, valid matrix or raises
    ConstructionError (ragged rows, empty input, unequal vector stack).
    Non-finite elements (NaN, Inf) are rejected. Input data is copied.
    """

    __slots__ = ('_data',)

    # Make numpy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, grid: ArrayLike):
        check_rectangular(grid, 'grid')
        data = check_array(grid, 'grid', error=ConstructionError)
        check_nonempty(data, 'grid')
        check_2d(data, 'grid')
        check_finite(data, 'grid', error=ConstructionError)
        self._data = data

    @classmethod
    def from_row(cls, values: ArrayLike) -> Matrix:
        """1 x n matrix whose single row is values."""
        data = check_array(values, 'values', error=ConstructionError)
        check_1d(data, 'values')
        check_nonempty(data, 'values')
        check_finite(data, 'values', error=ConstructionError)
        return cls._wrap(data.reshape(1, -1))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Zero-filled rows x cols matrix."""
        shape = (check_size(rows, 'rows'), check_size(cols, 'cols'))
        return cls._wrap(np.zeros(shape, dtype=np.float64))

    @classmethod
    def from_vectors(cls, *vectors: Vector) -> Matrix:
        """
        Stack vectors as rows.

        Raises:
            ConstructionError: If no vectors are given or their dimensions differ
            ValidationError: If any argument is not a Vector
        """
        if not vectors:
            raise ConstructionError("from_vectors: need at least one vector")
        for k, v in enumerate(vectors):
            if not isinstance(v, Vector):
                raise ValidationError(
                    f"from_vectors: argument {k} is {type(v).__name__}, expected Vector"
                )
        dims = tuple(v.dim for v in vectors)
        if len(set(dims)) > 1:
            raise ConstructionError(
                f"from_vectors: vectors have unequal dimensions {list(dims)}",
                row_lengths=dims
            )
        return cls._wrap(np.vstack([v.to_array() for v in vectors]))

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        # Trusted internal path: data is already a validated, owned 2D float64 array
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def row_count(self) -> int:
        return self.rows

    def col_count(self) -> int:
        return self.cols

    # --- Element access ---

    def row(self, i: int) -> Vector:
        """
        Row i as a new Vector.

        Raises:
            IndexBoundsError: Unless 0 <= i < rows
        """
        i = check_index(i, self.rows, 'row')
        return Vector._wrap(self._data[i, :].copy())

    def column(self, j: int) -> Vector:
        """
        Column j as a new Vector.

        Raises:
            IndexBoundsError: Unless 0 <= j < cols
        """
        j = check_index(j, self.cols, 'column')
        return Vector._wrap(self._data[:, j].copy())

    def element(self, i: int, j: int) -> float:
        """
        Element at row i, column j.

        Raises:
            IndexBoundsError: If either index is out of range
        """
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'column')
        return float(self._data[i, j])

    def set_element(self, value: float, i: int, j: int) -> None:
        """
        Overwrite the element at row i, column j.

        Raises:
            IndexBoundsError: If either index is out of range
            ValidationError: If value is not a real number
        """
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'column')
        self._data[i, j] = check_scalar(value, 'value')

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = _unpack_index(index)
        return self.element(i, j)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = _unpack_index(index)
        self.set_element(value, i, j)

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the grid as a 2D float64 array."""
        return self._data.copy()

    # --- Algebra ---

    def multiply(self, other: Matrix) -> Matrix:
        return multiply(self, other)

    def add(self, other: Matrix) -> Matrix:
        return add(self, other)

    def subtract(self, other: Matrix) -> Matrix:
        return subtract(self, other)

    def hadamard(self, other: Matrix) -> Matrix:
        return hadamard(self, other)

    def scale(self, factor: float) -> Matrix:
        """New matrix with every element multiplied by factor."""
        return Matrix._wrap(self._data * check_scalar(factor, 'factor'))

    def transpose(self) -> Matrix:
        """New cols x rows matrix with result[j, i] = self[i, j]."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def minor(self, i: int, j: int) -> Matrix:
        """
        Submatrix with row i and column j removed.

        Raises:
            IndexBoundsError: If either index is out of range
            DimensionError: If the matrix has a single row or column
        """
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'column')
        if self.rows < 2 or self.cols < 2:
            raise DimensionError(
                f"minor: a {self.rows}x{self.cols} matrix has no minors",
                operation='minor',
                actual=self.shape
            )
        return Matrix._wrap(_minor(self._data, i, j))

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Cost grows as n!, which is fine for the 2x2 to 4x4 matrices of
        geometric transforms. A PerformanceWarning is issued above
        DETERMINANT_WARN_SIZE; the computation still runs.

        Raises:
            NotSquareError: If rows != cols
        """
        if not self.is_square:
            raise NotSquareError(
                f"determinant: matrix must be square, got {self.rows}x{self.cols}",
                rows=self.rows,
                cols=self.cols
            )
        if self.rows > DETERMINANT_WARN_SIZE:
            warnings.warn(
                f"determinant: cofactor expansion of a {self.rows}x{self.rows} matrix "
                f"evaluates {self.rows}! terms and may take a very long time",
                PerformanceWarning,
                stacklevel=2
            )
        return cofactor_det(self._data)

    def transform_vector(self, v: Vector) -> Vector:
        """
        Apply this matrix to v, treated as a column.

        Returns the single column of self @ v.to_column_matrix() as a
        new Vector of dimension rows.

        Raises:
            DimensionError: If v.dim != cols
        """
        if not isinstance(v, Vector):
            raise ValidationError(
                f"transform_vector: expected Vector, got {type(v).__name__}"
            )
        if v.dim != self.cols:
            raise DimensionError(
                f"transform_vector: vector dimension {v.dim} does not match "
                f"matrix column count {self.cols}",
                operation='transform_vector',
                expected=self.cols,
                actual=v.dim
            )
        return multiply(self, v.to_column_matrix()).column(0)

    # --- Operators ---

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Vector):
            return self.transform_vector(other)
        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply(self, other)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, factor: Any) -> Matrix:
        # Matrix * Matrix is deliberately unsupported: use @ or hadamard()
        if isinstance(factor, bool) or not isinstance(factor, (int, float, np.number)):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def isclose(self, other: Matrix, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        Matrices of different shape are never close.

        Raises:
            ValidationError: If other is not a Matrix
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"isclose: expected Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return is_close(self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol)

    # --- Display ---

    def __str__(self) -> str:
        return "".join(
            "[" + " ".join(repr(float(x)) for x in row) + "]\n"
            for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"


def _unpack_index(index: Any) -> tuple[Any, Any]:
    if not isinstance(index, tuple) or len(index) != 2:
        raise ValidationError(
            f"matrix index: expected a (row, column) pair, got {index!r}"
        )
    return index


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a @ b.

    Element (i, j) of the result is the dot product of row i of a and
    column j of b.

    Returns:
        New a.rows x b.cols matrix

    Raises:
        DimensionError: If a.cols != b.rows
    """
    if a.cols != b.rows:
        raise DimensionError(
            f"multiply: inner dimensions differ, {a.rows}x{a.cols} times {b.rows}x{b.cols}",
            operation='multiply',
            expected=a.cols,
            actual=b.rows
        )
    return Matrix._wrap(a._data @ b._data)


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum a + b.

    Raises:
        DimensionError: If shapes differ
    """
    check_same_shape(a.shape, b.shape, 'add')
    return Matrix._wrap(a._data + b._data)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference a - b.

    Raises:
        DimensionError: If shapes differ
    """
    check_same_shape(a.shape, b.shape, 'subtract')
    return Matrix._wrap(a._data - b._data)


def hadamard(a: Matrix, b: Matrix) -> Matrix:
    """
    Hadamard (elementwise) product.

    Raises:
        DimensionError: If shapes differ
    """
    check_same_shape(a.shape, b.shape, 'hadamard')
    return Matrix._wrap(a._data * b._data)
