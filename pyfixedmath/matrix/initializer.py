"""
Sequential initializer: positional fill-then-commit for a container.

Values are pushed one at a time into a staged copy of the target's
storage. Only build() touches the target, and only after the value count
has been validated, by swapping the staged buffer in. The target is
therefore either untouched or completely populated, never partially
written.

Usage:
    m = Matrix3f()
    builder(m).push(1).push(0).push(0) ... .build()

    with m.fill(1, 0, 0) as f:
        f.push(0).push(1).push(0)
        f.extend([0, 0, 1])
    # committed on clean exit; discarded if the block raises

Count violations are recoverable exceptions:
    push past size  -> CountExceededError (staged values unchanged)
    build too early -> CountIncompleteError (target unchanged)

Not thread-safe: one writer drives an initializer to completion.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pyfixedmath.core.exceptions import (
    CountExceededError,
    CountIncompleteError,
    InitializerStateError,
)
from pyfixedmath.core.precision import to_scalar
from pyfixedmath.core.validation import check_scalar
from pyfixedmath.matrix.base import Matrix

logger = logging.getLogger(__name__)


class SequentialInitializer:
    """
    Builder bound to exactly one target container.

    Args:
        target: Specialized Matrix or Vector to populate
        *first: Values to push immediately, in order
    """

    def __init__(self, target: Matrix, *first: Any):
        if not isinstance(target, Matrix):
            raise TypeError(
                f"SequentialInitializer: expected a Matrix or Vector, got "
                f"{type(target).__name__}"
            )
        self._target = target
        self._staged = target._data.copy()
        self._count = 0
        self._committed = False
        self._closed = False
        self.extend(first)

    @property
    def target(self) -> Matrix:
        return self._target

    @property
    def count(self) -> int:
        """Values pushed so far."""
        return self._count

    @property
    def expected(self) -> int:
        """Values required before build() succeeds."""
        return self._target.size

    @property
    def remaining(self) -> int:
        return self.expected - self._count

    @property
    def is_complete(self) -> bool:
        return self._count == self.expected

    @property
    def committed(self) -> bool:
        return self._committed

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise InitializerStateError(
                f"{operation}: initializer for {type(self._target).__name__} "
                f"is closed (committed={self._committed})"
            )

    def push(self, value: Any) -> SequentialInitializer:
        """
        Stage the next value (converted to the target's element type).

        Raises:
            CountExceededError: If every slot is already filled
            ValidationError: If value is not a real number
            InitializerStateError: If already committed or discarded
        """
        self._check_open('push')
        if self._count >= self.expected:
            raise CountExceededError(
                f"push: {type(self._target).__name__} holds {self.expected} values, "
                f"got value number {self._count + 1}",
                expected=self.expected,
                actual=self._count + 1,
            )
        check_scalar(value, 'value')
        self._staged[self._count] = to_scalar(value, self._target.dtype)
        self._count += 1
        return self

    def extend(self, values: Iterable[Any]) -> SequentialInitializer:
        """Push each value in order."""
        for value in values:
            self.push(value)
        return self

    def build(self) -> Matrix:
        """
        Validate the count and swap the staged storage into the target.

        Returns:
            The populated target

        Raises:
            CountIncompleteError: If fewer than size values were pushed
            InitializerStateError: If already committed or discarded
        """
        self._check_open('build')
        if self._count != self.expected:
            raise CountIncompleteError(
                f"build: {type(self._target).__name__} needs {self.expected} values, "
                f"got {self._count}",
                expected=self.expected,
                actual=self._count,
            )
        self._target._data, self._staged = self._staged, self._target._data
        self._staged = None
        self._committed = True
        self._closed = True
        logger.debug(f"Committed {self._count} values into {type(self._target).__name__}")
        return self._target

    def __enter__(self) -> SequentialInitializer:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            if not self._closed:
                logger.debug(
                    f"Discarded {self._count} staged values for "
                    f"{type(self._target).__name__}: {exc_type.__name__}"
                )
                self._staged = None
                self._closed = True
            return False
        if not self._closed:
            self.build()
        return False

    def __repr__(self) -> str:
        if self._closed:
            state = "committed" if self._committed else "discarded"
        else:
            state = f"{self._count}/{self.expected}"
        return f"SequentialInitializer({type(self._target).__name__}, {state})"


def builder(target: Matrix, *first: Any) -> SequentialInitializer:
    """Start a SequentialInitializer for target, pushing any given values."""
    return SequentialInitializer(target, *first)
