"""
Exception hierarchy for PyFixedMath.

All exceptions inherit from PyFixedMathError to allow catching any
library-specific error. Container modules raise the most specific class
available here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyFixedMathError(Exception):
    """Base exception for all PyFixedMath errors."""
    pass


class ValidationError(PyFixedMathError):
    """
    Input validation failed.

    Raised when user-provided values, element types or dimensions fail
    validation checks.
    """
    pass


class ElementTypeError(ValidationError):
    """
    Element type is not an arithmetic type.

    Raised when a container is specialized on a dtype that is not a numpy
    integer or floating type (bool, complex, object, strings, ...).

    Attributes:
        dtype: The rejected type, as given by the caller
    """

    def __init__(self, message: str, dtype: object = None):
        super().__init__(message)
        self.dtype = dtype


class DimensionError(ValidationError):
    """
    Container shapes are incompatible.

    Raised when a binary operator receives an operand whose shape does not
    fit the receiver's shape.

    Attributes:
        expected_shape: Shape the operation required
        actual_shape: Shape that was supplied
        operation: Name of the operation that rejected the operand
    """

    def __init__(
        self,
        message: str,
        expected_shape: tuple[int, int] | None = None,
        actual_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape
        self.operation = operation


class InvalidShapeError(DimensionError):
    """
    A square-only operation was requested for a rectangular shape.

    Raised by the runtime-checked identity factory.
    """
    pass


class ElementCountError(ValidationError):
    """
    Wrong number of element values.

    Raised when a container is built from a value list whose length does
    not equal rows * cols.

    Attributes:
        expected: Number of values the container holds
        actual: Number of values supplied
    """

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CountExceededError(ElementCountError):
    """A sequential initializer received more values than the target holds."""
    pass


class CountIncompleteError(ElementCountError):
    """A sequential initializer was committed before receiving every value."""
    pass


class InitializerStateError(PyFixedMathError):
    """
    A sequential initializer was used after it committed.

    An initializer commits exactly once; it cannot be refilled.
    """
    pass


class NormTruncationWarning(UserWarning):
    """
    An integral vector norm discarded a fractional part.

    The norm of an integer vector is returned in the vector's element
    type, so sqrt(2) becomes 1.
    """
    pass
