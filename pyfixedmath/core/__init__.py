"""
Core infrastructure for PyFixedMath.

This module provides shared abstractions and utilities used by the
container modules in pyfixedmath.matrix.

Key components:
    exceptions: Exception and warning hierarchy
    validation: Input validators
    dtypes: Supported element types
    precision: Element-type casting, division and accumulation
    tolerances: Tolerance tiers for approximate comparison
"""

from pyfixedmath.core.exceptions import (
    PyFixedMathError,
    ValidationError,
    ElementTypeError,
    DimensionError,
    InvalidShapeError,
    ElementCountError,
    CountExceededError,
    CountIncompleteError,
    InitializerStateError,
    NormTruncationWarning,
)
from pyfixedmath.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "PyFixedMathError",
    "ValidationError",
    "ElementTypeError",
    "DimensionError",
    "InvalidShapeError",
    "ElementCountError",
    "CountExceededError",
    "CountIncompleteError",
    "InitializerStateError",
    # Warnings
    "NormTruncationWarning",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
