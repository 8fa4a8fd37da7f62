"""
Vector: single-column Matrix with norm operations.

Vector[T, N] derives from both the generic Vector class and
Matrix[T, N, 1], so every Matrix operation applies and
isinstance(v, Matrix[T, N, 1]) holds.

Integral element types:
    norm() is returned in the element type, so the square root is
    truncated toward zero (norm of (1, 1) is 1). A NormTruncationWarning
    is emitted whenever that discards a fractional part. normalize() on
    an integer vector therefore divides by the truncated norm with
    truncating division.
"""

from __future__ import annotations

import warnings
from functools import lru_cache
from typing import Any

import numpy as np

from pyfixedmath.core.exceptions import DimensionError, NormTruncationWarning
from pyfixedmath.core.precision import accumulate, divide, is_integral, to_scalar
from pyfixedmath.core.validation import check_dimension, check_dtype, check_scalar
from pyfixedmath.matrix.base import Matrix, matrix_class


class Vector(Matrix):
    """
    Fixed-length column vector.

        V = Vector[np.float32, 3]
        v = V(3, 4, 0)
        v.norm()        # 5.0
        v.x, v.y, v.z   # components
    """

    __slots__ = ()

    _family = 'vector'

    def __class_getitem__(cls, params):
        if cls.dtype is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("Vector[...] expects (dtype, size)")
        dtype, size = params
        return vector_class(dtype, size)

    @classmethod
    def _with_dtype(cls, dtype):
        return vector_class(dtype, cls.rows)

    @classmethod
    def _product_class(cls, dtype, rows, cols):
        if cols == 1:
            return vector_class(dtype, rows)
        return matrix_class(dtype, rows, cols)

    def square_norm(self):
        """Sum of squared elements, accumulated in the element type."""
        with np.errstate(over='ignore'):
            squares = self._data * self._data
        return accumulate(squares, self.dtype)

    def norm(self):
        """
        Euclidean length, in the element type.

        For integral element types the root is truncated toward zero.
        """
        with np.errstate(invalid='ignore'):
            root = np.sqrt(self.square_norm())
        result = to_scalar(root, self.dtype)
        if is_integral(self.dtype) and root != result:
            warnings.warn(
                f"{type(self).__name__}.norm(): {float(root):g} truncated to {int(result)}",
                NormTruncationWarning,
                stacklevel=2,
            )
        return result

    def normalize(self) -> None:
        """
        Divide every element by norm(), in place.

        A zero-length vector is not guarded: floating elements become nan,
        integral elements become 0.
        """
        self._data[...] = divide(self._data, self.norm(), self.dtype)

    def normalized(self):
        """Normalized copy; the receiver is unchanged."""
        result = self.copy()
        result.normalize()
        return result

    def dot(self, other) -> Any:
        """
        Sum of element-wise products, accumulated in this vector's element type.

        Raises:
            DimensionError: If other is not a column of the same length
        """
        if not isinstance(other, Matrix):
            raise TypeError(
                f"dot: expected a Vector, got {type(other).__name__}"
            )
        if other.shape != self.shape:
            raise DimensionError(
                f"dot: length mismatch, expected {self.rows}, "
                f"got {other.rows}x{other.cols}",
                expected_shape=self.shape,
                actual_shape=other.shape,
                operation='dot',
            )
        with np.errstate(over='ignore'):
            products = self._data * other._data
        return accumulate(products, self.dtype)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def _component(self, index: int, name: str):
        if index >= self.size:
            raise IndexError(
                f"{type(self).__name__} has no {name} component (size {self.size})"
            )
        return index

    def _set_component(self, index: int, name: str, value) -> None:
        check_scalar(value, name)
        self._data[self._component(index, name)] = to_scalar(value, self.dtype)

    @property
    def x(self):
        return self._data[self._component(0, 'x')]

    @x.setter
    def x(self, value) -> None:
        self._set_component(0, 'x', value)

    @property
    def y(self):
        return self._data[self._component(1, 'y')]

    @y.setter
    def y(self, value) -> None:
        self._set_component(1, 'y', value)

    @property
    def z(self):
        return self._data[self._component(2, 'z')]

    @z.setter
    def z(self, value) -> None:
        self._set_component(2, 'z', value)

    @property
    def w(self):
        return self._data[self._component(3, 'w')]

    @w.setter
    def w(self, value) -> None:
        self._set_component(3, 'w', value)


def vector_class(dtype, size: int) -> type[Vector]:
    """
    Return the Vector class specialized on (dtype, size).

    Repeated calls with equivalent arguments return the same class object.
    """
    return _vector_class(check_dtype(dtype, 'dtype'), check_dimension(size, 'size'))


@lru_cache(maxsize=None)
def _vector_class(dtype: np.dtype, size: int) -> type[Vector]:
    name = f"Vector[{dtype.name}, {size}]"
    namespace = {
        '__slots__': (),
        '__module__': Vector.__module__,
        '__qualname__': name,
    }
    return type(name, (Vector, matrix_class(dtype, size, 1)), namespace)
