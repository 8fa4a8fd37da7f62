"""
Free factory functions.

Shape-agnostic counterparts of the class-level factories, for callers
that know the element type and dimensions as runtime values:

    zero(np.float32, 4, 4)
    identity(np.float64, 3)
    from_rows(np.int32, [[1, 2], [3, 4]])
    vector_of(np.float32, 3, 4, 0)
"""

from __future__ import annotations

from typing import Any, Sequence

from pyfixedmath.core.exceptions import DimensionError, InvalidShapeError
from pyfixedmath.core.validation import check_dimension
from pyfixedmath.matrix.base import Matrix, matrix_class
from pyfixedmath.matrix.vector import Vector, vector_class


def zero(dtype, rows: int, cols: int) -> Matrix:
    """rows x cols container with every element 0."""
    return matrix_class(dtype, rows, cols).zero()


def identity(dtype, rows: int, cols: int | None = None) -> Matrix:
    """
    Identity matrix, checked at runtime.

    Args:
        dtype: Element type
        rows: Row count
        cols: Column count; defaults to rows

    Raises:
        InvalidShapeError: If rows != cols
    """
    rows = check_dimension(rows, 'rows')
    cols = rows if cols is None else check_dimension(cols, 'cols')
    if rows != cols:
        raise InvalidShapeError(
            f"identity: requires a square shape, got {rows}x{cols}",
            expected_shape=(rows, rows),
            actual_shape=(rows, cols),
            operation='identity',
        )
    return matrix_class(dtype, rows, cols).identity()


def from_rows(dtype, rows: Sequence[Sequence[Any]]) -> Matrix:
    """
    Build a matrix whose shape is taken from nested row sequences.

    Raises:
        DimensionError: If rows have different lengths
    """
    rows = [tuple(row) for row in rows]
    n_cols = len(rows[0]) if rows else 0
    lengths = [len(row) for row in rows]
    if any(length != n_cols for length in lengths):
        raise DimensionError(
            f"from_rows: ragged rows with lengths {lengths}",
            operation='from_rows',
        )
    cls = matrix_class(dtype, len(rows), n_cols)
    return cls.from_iterable(value for row in rows for value in row)


def vector_of(dtype, *values: Any) -> Vector:
    """Vector whose length is the number of values given."""
    return vector_class(dtype, len(values)).from_iterable(values)
