"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ConstructionError,
    DimensionError,
    IndexBoundsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
    error: type[ValidationError] = ValidationError,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a new float64 array. Rejects
    inputs that result in object dtype (indicating mixed types or ragged
    data), non-numeric dtypes and complex numbers.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        error: Exception class to raise; constructors pass ConstructionError

    Returns:
        numpy.ndarray with float64 dtype, never a view of the input

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise error(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise error(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise error(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise error(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_finite(
    array: NDArray[np.float64],
    name: str,
    error: type[ValidationError] = ValidationError,
) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages
        error: Exception class to raise; constructors pass ConstructionError

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise error(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a finite real scalar and return it as a float.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real number, or is NaN or Inf
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value


def check_size(size: Any, name: str) -> int:
    """
    Validate a requested vector dimension or matrix row/column count.

    Args:
        size: Requested size
        name: Parameter name for error messages

    Returns:
        The size as a plain int

    Raises:
        ValidationError: If size is not an integer
        ConstructionError: If size is not positive
    """
    if isinstance(size, (bool, np.bool_)) or not isinstance(size, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(size).__name__}"
        )
    if size < 1:
        raise ConstructionError(f"{name}: must be positive, got {size}")
    return int(size)


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify constructor input has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        ConstructionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ConstructionError(
            f"{name}: expected {ndim}D data, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.float64], name: str) -> None:
    """Verify vector input is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """Verify matrix input is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.float64], name: str) -> None:
    """
    Verify every axis of the array has positive length.

    Vectors need dim >= 1 and matrices need rows >= 1 and cols >= 1.

    Raises:
        ConstructionError: If any axis is empty
    """
    if array.size == 0:
        raise ConstructionError(
            f"{name}: every dimension must be positive, got shape {array.shape}"
        )


def check_rectangular(grid: Any, name: str) -> None:
    """
    Verify nested row data has equal-length rows.

    NumPy arrays are rectangular by construction and pass. Nested
    sequences are checked row by row before any conversion so that ragged
    input is reported as such instead of as a dtype problem.

    Args:
        grid: Sequence of rows
        name: Parameter name for error messages

    Raises:
        ConstructionError: If rows have differing lengths
    """
    if isinstance(grid, np.ndarray) or not isinstance(grid, Sequence):
        return

    lengths = []
    for row in grid:
        if isinstance(row, np.ndarray):
            lengths.append(row.shape[0] if row.ndim else -1)
        elif isinstance(row, Sequence) and not isinstance(row, str):
            lengths.append(len(row))
        else:
            lengths.append(-1)

    if -1 in lengths:
        raise ConstructionError(
            f"{name}: every row must be a sequence of numbers"
        )

    if len(set(lengths)) > 1:
        raise ConstructionError(
            f"{name}: ragged rows with lengths {lengths}, expected all rows of length {lengths[0]}",
            row_lengths=tuple(lengths)
        )


def check_index(index: Any, size: int, axis: str) -> int:
    """
    Verify an index lies in [0, size).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        size: Length of the indexed axis
        axis: Axis name for error messages ('element', 'row', 'column')

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexBoundsError: If index is outside [0, size)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{axis} index: expected an integer, got {type(index).__name__}"
        )
    index = int(index)
    if not 0 <= index < size:
        raise IndexBoundsError(
            f"{axis} index {index} out of range, expected 0 <= index < {size}",
            index=index,
            size=size,
            axis=axis
        )
    return index


def check_same_dim(a: int, b: int, operation: str) -> None:
    """
    Verify two vector dimensions are equal.

    Raises:
        DimensionError: If a != b
    """
    if a != b:
        raise DimensionError(
            f"{operation}: dimension mismatch, {a} vs {b}",
            operation=operation,
            expected=a,
            actual=b
        )


def check_dim(actual: int, expected: int, operation: str, name: str) -> None:
    """
    Verify a vector has exactly the required dimension.

    Raises:
        DimensionError: If actual != expected
    """
    if actual != expected:
        raise DimensionError(
            f"{operation}: {name} must be {expected}-dimensional, got dimension {actual}",
            operation=operation,
            expected=expected,
            actual=actual
        )


def check_same_shape(
    a: tuple[int, int],
    b: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrix shapes are identical.

    Raises:
        DimensionError: If shapes differ in rows or in columns
    """
    if a != b:
        raise DimensionError(
            f"{operation}: shapes must match, got {a[0]}x{a[1]} and {b[0]}x{b[1]}",
            operation=operation,
            expected=a,
            actual=b
        )
