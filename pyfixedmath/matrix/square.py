"""
Square specialization.

SquareMatrix is mixed into a specialized Matrix class only when its row
count equals its column count, so shape-restricted operations simply do
not exist on rectangular classes:

    Matrix[np.float32, 3, 3].identity()   # ok
    Matrix[np.float32, 2, 3].identity()   # AttributeError

The runtime-checked counterpart is pyfixedmath.matrix.factories.identity.
"""

from __future__ import annotations

import numpy as np


class SquareMatrix:
    """Capabilities of N x N containers."""

    __slots__ = ()

    @classmethod
    def identity(cls):
        """N x N matrix with ones on the diagonal and zeros elsewhere."""
        return cls._wrap(np.eye(cls.rows, dtype=cls.dtype).reshape(-1))
