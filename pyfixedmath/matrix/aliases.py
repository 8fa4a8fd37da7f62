"""
Named specializations used by the viewer's geometry and material code.

Suffixes follow pyfixedmath.core.dtypes:
    i -> int32, f -> float32, d -> float64
"""

from pyfixedmath.core.dtypes import DOUBLE, FLOAT, INT
from pyfixedmath.matrix.base import Matrix
from pyfixedmath.matrix.vector import Vector

Matrix2i = Matrix[INT, 2, 2]
Matrix3i = Matrix[INT, 3, 3]
Matrix4i = Matrix[INT, 4, 4]

Matrix2f = Matrix[FLOAT, 2, 2]
Matrix3f = Matrix[FLOAT, 3, 3]
Matrix4f = Matrix[FLOAT, 4, 4]

Matrix2d = Matrix[DOUBLE, 2, 2]
Matrix3d = Matrix[DOUBLE, 3, 3]
Matrix4d = Matrix[DOUBLE, 4, 4]

Vector2i = Vector[INT, 2]
Vector3i = Vector[INT, 3]
Vector4i = Vector[INT, 4]

Vector2f = Vector[FLOAT, 2]
Vector3f = Vector[FLOAT, 3]
Vector4f = Vector[FLOAT, 4]

Vector2d = Vector[DOUBLE, 2]
Vector3d = Vector[DOUBLE, 3]
Vector4d = Vector[DOUBLE, 4]

__all__ = [
    "Matrix2i", "Matrix3i", "Matrix4i",
    "Matrix2f", "Matrix3f", "Matrix4f",
    "Matrix2d", "Matrix3d", "Matrix4d",
    "Vector2i", "Vector3i", "Vector4i",
    "Vector2f", "Vector3f", "Vector4f",
    "Vector2d", "Vector3d", "Vector4d",
]
