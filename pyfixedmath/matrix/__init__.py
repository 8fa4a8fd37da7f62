"""
Fixed-shape matrix and vector containers.

Public API:
    Matrix[dtype, rows, cols]   - specialized matrix class
    Vector[dtype, size]         - specialized column vector class
    SquareMatrix                - capability base of N x N classes (identity)
    SequentialInitializer       - staged positional fill, commit on build()
    builder(target, *first)     - start a SequentialInitializer
    zero / identity / from_rows / vector_of - free factories
    format_matrix(m)            - textual rendering
    Matrix2i .. Matrix4d, Vector2i .. Vector4d - named specializations
"""

from pyfixedmath.matrix.base import Matrix, matrix_class
from pyfixedmath.matrix.square import SquareMatrix
from pyfixedmath.matrix.vector import Vector, vector_class
from pyfixedmath.matrix.initializer import SequentialInitializer, builder
from pyfixedmath.matrix.factories import zero, identity, from_rows, vector_of
from pyfixedmath.matrix.printing import format_matrix
from pyfixedmath.matrix.aliases import (
    Matrix2i, Matrix3i, Matrix4i,
    Matrix2f, Matrix3f, Matrix4f,
    Matrix2d, Matrix3d, Matrix4d,
    Vector2i, Vector3i, Vector4i,
    Vector2f, Vector3f, Vector4f,
    Vector2d, Vector3d, Vector4d,
)

__all__ = [
    "Matrix",
    "Vector",
    "SquareMatrix",
    "matrix_class",
    "vector_class",
    "SequentialInitializer",
    "builder",
    "zero",
    "identity",
    "from_rows",
    "vector_of",
    "format_matrix",
    "Matrix2i", "Matrix3i", "Matrix4i",
    "Matrix2f", "Matrix3f", "Matrix4f",
    "Matrix2d", "Matrix3d", "Matrix4d",
    "Vector2i", "Vector3i", "Vector4i",
    "Vector2f", "Vector3f", "Vector4f",
    "Vector2d", "Vector3d", "Vector4d",
]
