"""
Element-type arithmetic helpers.

Every container operation keeps its result in a fixed element type, the
way a statically typed compound assignment (``t += a * b``) would. The
helpers here implement that contract on top of numpy: explicit unsafe
casts, C-style truncating integer division, and ordered accumulation.

None of these helpers guard against division by zero or overflow; they
silence numpy's floating-point warnings and return whatever the element
type's own arithmetic produces.
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray


def is_integral(dtype: np.dtype | type) -> bool:
    """True for signed and unsigned integer element types."""
    return np.dtype(dtype).kind in ('i', 'u')


def cast(values: ArrayLike, dtype: np.dtype | type) -> NDArray[Any]:
    """
    Convert values to dtype with C conversion semantics.

    float -> int truncates toward zero; out-of-range values wrap or
    become unspecified, without emitting numpy RuntimeWarnings. Always
    returns freshly allocated storage.
    """
    with np.errstate(invalid='ignore', over='ignore'):
        return np.asarray(values).astype(dtype, casting='unsafe')


def to_scalar(value: Any, dtype: np.dtype | type) -> np.generic:
    """Convert a single number to a numpy scalar of dtype."""
    return cast(value, dtype)[()]


def divide(
    numerator: ArrayLike,
    denominator: ArrayLike,
    dtype: np.dtype | type,
) -> NDArray[Any]:
    """
    Element-wise division in the element type's own semantics.

    Integral types truncate toward zero (C semantics, not Python floor
    division); floating types use IEEE true division. Division by zero is
    not guarded: floats give inf/nan, integers give 0.

    Args:
        numerator: Dividend values
        denominator: Divisor values, broadcast against numerator
        dtype: Element type of the result

    Returns:
        Quotient array of dtype
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if is_integral(dtype):
            quotient = np.floor_divide(numerator, denominator)
            # floor and trunc differ only for inexact negative quotients
            remainder = np.remainder(numerator, denominator)
            negative = np.less(numerator, 0) != np.less(denominator, 0)
            quotient = quotient + ((remainder != 0) & negative)
        else:
            quotient = np.true_divide(numerator, denominator)
    return cast(quotient, dtype)


def accumulate(
    terms: Iterable[Any],
    dtype: np.dtype | type,
    shape: tuple[int, ...] = (),
) -> Any:
    """
    Sum terms in order, casting the running total back to dtype each step.

    This mirrors ``total = T(); for t in terms: total += t`` in a
    statically typed language: each term may be computed in a wider type,
    but the accumulator never widens. Integer overflow wraps.

    Args:
        terms: Scalars or arrays broadcastable to shape
        dtype: Accumulator element type
        shape: Accumulator shape; () accumulates a scalar

    Returns:
        numpy scalar of dtype when shape is (), else an array of dtype
    """
    dtype = np.dtype(dtype)
    total = np.zeros(shape, dtype=dtype)
    with np.errstate(over='ignore', invalid='ignore'):
        for term in terms:
            total = np.asarray(total + term).astype(dtype, casting='unsafe')
    return total[()] if total.ndim == 0 else total
