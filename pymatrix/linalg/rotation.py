"""
Rotation helpers for 2D and 3D vectors.

All angles are in radians. The 3D helpers use axis-aligned rotation
matrices built by stacking Vectors as rows:

    yaw    about the Y axis   [[c, 0, -s], [0, 1, 0], [s, 0, c]]
    pitch  about the X axis   [[1, 0, 0], [0, c, -s], [0, s, c]]
    roll   about the Z axis   [[c, -s, 0], [s, c, 0], [0, 0, 1]]

The yaw layout places -sin in the top-right, so a positive yaw turns +X
towards +Z: yaw(angle) equals the right-handed R_y(-angle).
"""

import math

from pymatrix.core.validation import check_dim, check_scalar
from pymatrix.linalg.matrix import Matrix
from pymatrix.linalg.vector import Vector


def rotation_matrix_2d(theta: float) -> Matrix:
    """Counter-clockwise 2D rotation by theta: [[cos, -sin], [sin, cos]]."""
    theta = check_scalar(theta, 'theta')
    c, s = math.cos(theta), math.sin(theta)
    return Matrix([[c, -s], [s, c]])


def rotate_2d_vector(v: Vector, theta: float) -> Vector:
    """
    Rotate a 2D vector counter-clockwise by theta.

    Raises:
        DimensionError: If v is not 2-dimensional
    """
    check_dim(v.dim, 2, 'rotate_2d_vector', 'v')
    return rotation_matrix_2d(theta).transform_vector(v)


def yaw_matrix(angle: float) -> Matrix:
    angle = check_scalar(angle, 'angle')
    c, s = math.cos(angle), math.sin(angle)
    return Matrix.from_vectors(
        Vector([c, 0.0, -s]),
        Vector([0.0, 1.0, 0.0]),
        Vector([s, 0.0, c]),
    )


def pitch_matrix(angle: float) -> Matrix:
    angle = check_scalar(angle, 'angle')
    c, s = math.cos(angle), math.sin(angle)
    return Matrix.from_vectors(
        Vector([1.0, 0.0, 0.0]),
        Vector([0.0, c, -s]),
        Vector([0.0, s, c]),
    )


def roll_matrix(angle: float) -> Matrix:
    angle = check_scalar(angle, 'angle')
    c, s = math.cos(angle), math.sin(angle)
    return Matrix.from_vectors(
        Vector([c, -s, 0.0]),
        Vector([s, c, 0.0]),
        Vector([0.0, 0.0, 1.0]),
    )


def yaw(v: Vector, angle: float) -> Vector:
    """
    Rotate a 3D vector about the Y axis.

    Raises:
        DimensionError: If v is not 3-dimensional
    """
    check_dim(v.dim, 3, 'yaw', 'v')
    return yaw_matrix(angle).transform_vector(v)


def pitch(v: Vector, angle: float) -> Vector:
    """
    Rotate a 3D vector about the X axis.

    Raises:
        DimensionError: If v is not 3-dimensional
    """
    check_dim(v.dim, 3, 'pitch', 'v')
    return pitch_matrix(angle).transform_vector(v)


def roll(v: Vector, angle: float) -> Vector:
    """
    Rotate a 3D vector about the Z axis.

    Raises:
        DimensionError: If v is not 3-dimensional
    """
    check_dim(v.dim, 3, 'roll', 'v')
    return roll_matrix(angle).transform_vector(v)
