"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Operations never signal failure through None or
NaN; every failure is one of the exceptions below.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes or dimensions are incompatible.

    Raised when a vector or matrix operation receives operands whose
    dimensions do not fit together (dot product of unequal vectors,
    multiplication with mismatched inner dimensions, and so on).

    Attributes:
        operation: Name of the operation that rejected its operands
        expected: Expected dimension or shape, if known
        actual: Dimension or shape actually received, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    Matrix is not square.

    Raised when an operation that is only defined for square matrices
    (determinant) is requested on a rectangular one.

    Attributes:
        rows: Number of rows of the offending matrix
        cols: Number of columns of the offending matrix
    """

    def __init__(self, message: str, rows: int, cols: int):
        super().__init__(
            message,
            operation='determinant',
            expected=(rows, rows),
            actual=(rows, cols)
        )
        self.rows = rows
        self.cols = cols


class ConstructionError(ValidationError):
    """
    Input does not describe a valid vector or rectangular matrix.

    Raised by constructors for ragged row data, empty input, or a stack of
    vectors with inconsistent dimensions. No partially-built object is
    ever returned.

    Attributes:
        row_lengths: Lengths of the input rows, when the failure is raggedness
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] | None = None):
        super().__init__(message)
        self.row_lengths = row_lengths


class IndexBoundsError(PyMatrixError, IndexError):
    """
    Index outside the valid range.

    Bounds are strict: a valid index i satisfies 0 <= i < size.
    Also an IndexError so that iteration protocols and generic callers
    behave as with built-in sequences.

    Attributes:
        index: The rejected index
        size: Length of the indexed axis
        axis: Which axis was indexed ('element', 'row', 'column')
    """

    def __init__(self, message: str, index: int, size: int, axis: str):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from mathematically undefined results.
    """
    pass


class InvalidOperationError(NumericalError, ArithmeticError):
    """
    Result is mathematically undefined.

    Raised for operations such as normalizing a zero-length vector or
    measuring the angle to a zero-length vector.

    Attributes:
        operation: Name of the operation
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class PerformanceWarning(UserWarning):
    """Operation will complete but is expected to be very slow."""
    pass
