"""
Core infrastructure for PyMatrix.

This module provides the shared error taxonomy, input validators and
tolerance configuration used by the linalg value types.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers and numeric configuration constants
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    ConstructionError,
    IndexBoundsError,
    NumericalError,
    InvalidOperationError,
    PerformanceWarning,
)
from pymatrix.core.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ACCUMULATED,
    DEFAULT_TOLERANCE,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "ConstructionError",
    "IndexBoundsError",
    "NumericalError",
    "InvalidOperationError",
    "PerformanceWarning",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ACCUMULATED",
    "DEFAULT_TOLERANCE",
]
