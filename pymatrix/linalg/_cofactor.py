"""
Determinant by recursive cofactor (Laplace) expansion.

Expands along the first row:

    det(A) = sum_j (-1)^j * A[0, j] * det(minor(A, 0, j))

with the closed forms det([a]) = a and det([[a, b], [c, d]]) = ad - bc
as base cases. The recursion visits O(n!) terms, so this is meant for the
small matrices (rotations, 3D transforms) this library targets. An
LU-based determinant would round differently on singular and
ill-conditioned inputs and is deliberately not used.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def minor(A: NDArray[np.floating[Any]], i: int, j: int) -> NDArray[np.floating[Any]]:
    """Copy of A with row i and column j removed."""
    return np.delete(np.delete(A, i, axis=0), j, axis=1)


def cofactor_det(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant of a square 2D array by cofactor expansion.

    Args:
        A: Square matrix (n x n), n >= 1. Not validated here.

    Returns:
        det(A) as a Python float
    """
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    det = 0.0
    for j in range(n):
        sign = -1.0 if j % 2 else 1.0
        det += sign * float(A[0, j]) * cofactor_det(minor(A, 0, j))
    return det
