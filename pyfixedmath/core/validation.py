"""
Input validation utilities for PyFixedMath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - Conversion to the element type is explicit and happens once
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyfixedmath.core.dtypes import ARITHMETIC_KINDS
from pyfixedmath.core.exceptions import (
    DimensionError,
    ElementCountError,
    ElementTypeError,
    ValidationError,
)
from pyfixedmath.core.precision import cast


def check_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Validate and normalize an element type.

    Accepts anything numpy.dtype accepts (int, float, np.float32, 'f4', ...)
    and rejects types that are not integer or floating.

    Args:
        dtype: Element type to validate
        name: Parameter name for error messages

    Returns:
        Normalized numpy dtype

    Raises:
        ElementTypeError: If dtype is not an arithmetic type
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ElementTypeError(f"{name}: not a dtype: {dtype!r}", dtype=dtype) from e

    if result.kind not in ARITHMETIC_KINDS:
        raise ElementTypeError(
            f"{name}: element type must be an integer or floating type, got {result}",
            dtype=dtype,
        )
    return result


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension is a non-negative integer.

    Raises:
        ValidationError: If value is not an int or is negative
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer dimension, got bool")
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer dimension, got {type(value).__name__}"
        ) from e

    if result < 0:
        raise ValidationError(f"{name}: must be non-negative, got {result}")
    return result


def is_real_scalar(value: Any) -> bool:
    """True for Python and numpy real numbers (int, float, np.float32, ...)."""
    return isinstance(value, numbers.Real)


def check_scalar(value: Any, name: str) -> Any:
    """
    Verify value is a single real number.

    Raises:
        ValidationError: If value is not a real scalar
    """
    if not is_real_scalar(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return value


def check_values(
    values: Sequence[Any],
    dtype: np.dtype,
    expected: int,
    name: str,
) -> NDArray[Any]:
    """
    Validate an ordered value list and convert it to element storage.

    Args:
        values: Flat sequence of numbers, in row-major order
        dtype: Element type of the storage
        expected: Exact number of values required
        name: Container name for error messages

    Returns:
        Freshly allocated 1D array of dtype with `expected` elements

    Raises:
        ElementCountError: If len(values) != expected
        ValidationError: If values are not flat real numbers
    """
    if len(values) != expected:
        raise ElementCountError(
            f"{name}: expected {expected} values, got {len(values)}",
            expected=expected,
            actual=len(values),
        )

    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert values to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if result.ndim != 1:
        raise ValidationError(
            f"{name}: values must be scalars, got nested data with shape {result.shape}"
        )
    if result.dtype.kind not in ('b', 'i', 'u', 'f'):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    return cast(result, dtype)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify index lies in [0, bound).

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is negative or >= bound
    """
    try:
        result = operator.index(index)
    except TypeError as e:
        raise TypeError(
            f"{name} must be an integer, got {type(index).__name__}"
        ) from e

    if not 0 <= result < bound:
        raise IndexError(f"{name} {result} out of range [0, {bound})")
    return result


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two container shapes are identical.

    Raises:
        DimensionError: If shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch, expected {left[0]}x{left[1]}, "
            f"got {right[0]}x{right[1]}",
            expected_shape=left,
            actual_shape=right,
            operation=operation,
        )
