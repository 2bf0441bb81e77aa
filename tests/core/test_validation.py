"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 coercion, copy, rejections
    - check_finite: NaN and Inf detection
    - check_scalar / check_size: scalar and size arguments
    - check_ndim / check_1d / check_2d / check_nonempty: constructor shape
    - check_rectangular: ragged row detection
    - check_index: strict bounds
    - check_same_dim / check_dim / check_same_shape: operand compatibility
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    ConstructionError,
    DimensionError,
    IndexBoundsError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dim,
    check_finite,
    check_index,
    check_nonempty,
    check_rectangular,
    check_same_dim,
    check_same_shape,
    check_scalar,
    check_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_of_ints_becomes_float64(self):
        result = check_array([1, 2, 3], 'x')
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_is_widened(self):
        result = check_array(np.array([1.5], dtype=np.float32), 'x')
        assert result.dtype == np.float64

    def test_returns_copy(self):
        source = np.array([1.0, 2.0])
        result = check_array(source, 'x')
        result[0] = 99.0
        assert source[0] == 1.0

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(['a', 'b'], 'x')

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError):
            check_array([True, False], 'x')

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], 'x')

    def test_rejects_mixed_objects(self):
        with pytest.raises(ValidationError):
            check_array([1.0, None, {}], 'x')

    def test_error_class_is_configurable(self):
        with pytest.raises(ConstructionError, match="x: non-numeric"):
            check_array(['a'], 'x', error=ConstructionError)


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([0.0, -1.5, 1e308]), 'x')

    def test_counts_nan_and_inf(self):
        arr = np.array([np.nan, np.inf, -np.inf, 1.0, np.nan])
        with pytest.raises(ValidationError, match=r"x: contains non-finite values \(2 NaN, 2 Inf\)"):
            check_finite(arr, 'x')

    def test_2d_input(self):
        with pytest.raises(ValidationError):
            check_finite(np.array([[1.0, 2.0], [np.nan, 4.0]]), 'grid')

    def test_error_class_is_configurable(self):
        with pytest.raises(ConstructionError):
            check_finite(np.array([np.inf]), 'x', error=ConstructionError)


# ═══════════════════════════════════════════════════════════════════════
# Scalars and sizes
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    @pytest.mark.parametrize("value", [2, 2.5, np.float64(1.25), np.int64(3)])
    def test_accepts_real_numbers(self, value):
        assert check_scalar(value, 'factor') == float(value)
        assert isinstance(check_scalar(value, 'factor'), float)

    @pytest.mark.parametrize("value", ["2", None, True, 1 + 1j, [1.0]])
    def test_rejects_non_real(self, value):
        with pytest.raises(ValidationError, match="factor"):
            check_scalar(value, 'factor')

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -np.inf, np.float64("nan")])
    def test_rejects_non_finite(self, value):
        with pytest.raises(ValidationError, match="factor: must be finite"):
            check_scalar(value, 'factor')


class TestCheckSize:

    def test_positive_int(self):
        assert check_size(4, 'dim') == 4

    def test_numpy_int(self):
        assert check_size(np.int32(2), 'rows') == 2

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_non_positive(self, size):
        with pytest.raises(ConstructionError, match="must be positive"):
            check_size(size, 'dim')

    @pytest.mark.parametrize("size", [2.0, "3", True])
    def test_rejects_non_integer(self, size):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_size(size, 'dim')


# ═══════════════════════════════════════════════════════════════════════
# Constructor shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.zeros(3), 'v')

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), 'm')

    def test_1d_rejects_2d(self):
        with pytest.raises(ConstructionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), 'v')

    def test_2d_rejects_scalar(self):
        with pytest.raises(ConstructionError, match="expected 2D"):
            check_2d(np.float64(1.0), 'm')


class TestCheckNonempty:

    def test_rejects_empty_vector(self):
        with pytest.raises(ConstructionError):
            check_nonempty(np.zeros(0), 'v')

    def test_rejects_empty_rows(self):
        with pytest.raises(ConstructionError):
            check_nonempty(np.zeros((1, 0)), 'm')

    def test_accepts_single_element(self):
        check_nonempty(np.zeros((1, 1)), 'm')


class TestCheckRectangular:

    def test_rectangular_lists_pass(self):
        check_rectangular([[1, 2], [3, 4]], 'grid')

    def test_numpy_array_passes(self):
        check_rectangular(np.zeros((3, 2)), 'grid')

    def test_ragged_rows(self):
        with pytest.raises(ConstructionError, match="ragged") as exc_info:
            check_rectangular([[1, 2], [3]], 'grid')
        assert exc_info.value.row_lengths == (2, 1)

    def test_mixed_list_and_array_rows(self):
        with pytest.raises(ConstructionError):
            check_rectangular([np.zeros(3), [1.0, 2.0]], 'grid')

    def test_scalar_row_rejected(self):
        with pytest.raises(ConstructionError, match="sequence"):
            check_rectangular([[1.0, 2.0], 3.0], 'grid')

    def test_string_row_rejected(self):
        with pytest.raises(ConstructionError):
            check_rectangular([[1.0, 2.0], "ab"], 'grid')


# ═══════════════════════════════════════════════════════════════════════
# Indices
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_valid_range(self):
        assert check_index(0, 3, 'row') == 0
        assert check_index(2, 3, 'row') == 2

    def test_upper_bound_is_exclusive(self):
        with pytest.raises(IndexBoundsError) as exc_info:
            check_index(3, 3, 'row')
        assert exc_info.value.index == 3
        assert exc_info.value.size == 3
        assert exc_info.value.axis == 'row'

    def test_negative_rejected(self):
        with pytest.raises(IndexBoundsError):
            check_index(-1, 3, 'column')

    def test_numpy_integer_accepted(self):
        assert check_index(np.int64(1), 3, 'element') == 1

    @pytest.mark.parametrize("index", [1.0, "1", True, None])
    def test_non_integer_rejected(self, index):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_index(index, 3, 'element')


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestOperandChecks:

    def test_same_dim_passes(self):
        check_same_dim(3, 3, 'dot')

    def test_same_dim_mismatch(self):
        with pytest.raises(DimensionError, match="dot: dimension mismatch, 3 vs 2") as exc_info:
            check_same_dim(3, 2, 'dot')
        assert exc_info.value.operation == 'dot'

    def test_dim_mismatch(self):
        with pytest.raises(DimensionError, match="must be 3-dimensional") as exc_info:
            check_dim(2, 3, 'cross', 'a')
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), 'add')

    @pytest.mark.parametrize("other", [(3, 2), (2, 2), (3, 3)])
    def test_same_shape_mismatch(self, other):
        with pytest.raises(DimensionError, match="add: shapes must match"):
            check_same_shape((2, 3), other, 'add')
