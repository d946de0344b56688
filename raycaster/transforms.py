"""Rotation matrices."""

from __future__ import annotations

import math

from .vec3 import Vec3

Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]


def rotation_matrix_from_axis_angle(axis: Vec3, angle_rad: float) -> Matrix4:
    """Row-major 4x4 matrix rotating by ``angle_rad`` radians around ``axis``."""
    x, y, z = axis.normalize()
    cos_theta = math.cos(angle_rad)
    sin_theta = math.sin(angle_rad)
    one_minus_cos = 1.0 - cos_theta

    m00 = cos_theta + x * x * one_minus_cos
    m01 = x * y * one_minus_cos - z * sin_theta
    m02 = x * z * one_minus_cos + y * sin_theta

    m10 = y * x * one_minus_cos + z * sin_theta
    m11 = cos_theta + y * y * one_minus_cos
    m12 = y * z * one_minus_cos - x * sin_theta

    m20 = z * x * one_minus_cos - y * sin_theta
    m21 = z * y * one_minus_cos + x * sin_theta
    m22 = cos_theta + z * z * one_minus_cos

    return (
        (m00, m01, m02, 0.0),
        (m10, m11, m12, 0.0),
        (m20, m21, m22, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def transform_direction(matrix: Matrix4, v: Vec3) -> Vec3:
    """Apply ``matrix`` to ``v`` as a direction (homogeneous w = 0)."""
    return Vec3(*(row[0] * v.x + row[1] * v.y + row[2] * v.z for row in matrix[:3]))