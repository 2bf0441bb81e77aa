"""
PyMatrix: small dense linear algebra for Python.

Vector and Matrix value types over float64 with the standard operations:
products, sums, Hadamard product, transpose, determinant by cofactor
expansion, dot/cross products, angles and 2D/3D rotation helpers.

Submodules:
    linalg: Vector, Matrix and rotation helpers
    core: Exceptions, validation, tolerance tiers
"""

__version__ = "0.1.0"

from pymatrix.linalg import (
    Vector,
    Matrix,
    dot,
    cross,
    angle_between,
    multiply,
    add,
    subtract,
    hadamard,
    rotation_matrix_2d,
    rotate_2d_vector,
    yaw,
    pitch,
    roll,
)
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

__all__ = [
    "__version__",
    # Value types
    "Vector",
    "Matrix",
    # Operations
    "dot",
    "cross",
    "angle_between",
    "multiply",
    "add",
    "subtract",
    "hadamard",
    "rotation_matrix_2d",
    "rotate_2d_vector",
    "yaw",
    "pitch",
    "roll",
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
]
