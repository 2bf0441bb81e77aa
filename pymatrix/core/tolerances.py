"""
Tolerance tiers and numeric configuration.

Defines precision expectations for floating-point comparison:
- CPU FP64: single operations (products, sums, transposes)
- CPU FP64 accumulated: chains of operations where rounding compounds
  (determinant of a product, rotate-then-unrotate)

Used by Vector.isclose / Matrix.isclose and by the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Single operation on float64 data
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, single operation',
)

# Several chained operations on float64 data
CPU_FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='cpu_fp64_accumulated',
    description='CPU double precision, chained operations',
)

DEFAULT_TOLERANCE = CPU_FP64

# Cofactor expansion visits n! terms. Above this size determinant()
# emits a PerformanceWarning before computing.
DETERMINANT_WARN_SIZE = 9


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DEFAULT_TOLERANCE.rtol,
    atol: float = DEFAULT_TOLERANCE.atol
) -> bool:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|, applied elementwise
    and reduced with all().

    Args:
        a: First value(s)
        b: Second value(s), the reference
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        True if every element of a is close to the matching element of b
    """
    return bool(np.all(np.abs(np.subtract(a, b)) <= atol + rtol * np.abs(b)))
