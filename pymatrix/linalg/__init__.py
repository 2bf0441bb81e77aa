"""
Dense vector and matrix value types.

Public API:
    Vector, Matrix                  - value types
    dot, cross, angle_between       - vector products
    multiply, add, subtract,
    hadamard                        - matrix binary operations
    rotation_matrix_2d,
    rotate_2d_vector,
    yaw, pitch, roll                - rotation helpers
"""

from pymatrix.linalg.vector import Vector, dot, cross, angle_between
from pymatrix.linalg.matrix import Matrix, multiply, add, subtract, hadamard
from pymatrix.linalg.rotation import (
    rotation_matrix_2d,
    rotate_2d_vector,
    yaw_matrix,
    pitch_matrix,
    roll_matrix,
    yaw,
    pitch,
    roll,
)

__all__ = [
    "Vector",
    "Matrix",
    "dot",
    "cross",
    "angle_between",
    "multiply",
    "add",
    "subtract",
    "hadamard",
    "rotation_matrix_2d",
    "rotate_2d_vector",
    "yaw_matrix",
    "pitch_matrix",
    "roll_matrix",
    "yaw",
    "pitch",
    "roll",
]
