"""
Matrix: fixed-shape numeric container with value semantics.

A Matrix class is specialized on (element type, rows, cols) by indexing
the generic class; the specialized class is created once and cached:

    Matrix3f = Matrix[np.float32, 3, 3]
    m = Matrix3f.zero()

Storage is a private, contiguous, row-major numpy buffer of exactly
rows * cols elements that is never resized or shared. Every operator
returns a new container; only element assignment, Vector.normalize and
the sequential initializer mutate an existing one.

Element types:
    Results always keep the left operand's element type. Scalars are
    converted to that type before use; a right-hand container is combined
    in numpy's promoted type and the result cast back. Integer division
    truncates toward zero and integer overflow wraps.

Shape checking:
    Shape is part of the class, so mismatched operands are rejected with
    DimensionError before any arithmetic happens.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfixedmath.core.exceptions import DimensionError
from pyfixedmath.core.precision import accumulate, cast, divide, to_scalar
from pyfixedmath.core.tolerances import select_tolerance
from pyfixedmath.core.validation import (
    check_dimension,
    check_dtype,
    check_index,
    check_same_shape,
    check_scalar,
    check_values,
    is_real_scalar,
)
from pyfixedmath.matrix.printing import format_element, format_matrix
from pyfixedmath.matrix.square import SquareMatrix

logger = logging.getLogger(__name__)


class Matrix:
    """
    Fixed-shape matrix of arithmetic elements.

    Index the generic class to obtain a concrete shape, then construct:

        M = Matrix[np.int32, 2, 2]
        M()              # indeterminate contents
        M(1, 2, 3, 4)    # exactly rows * cols values, row-major
        M.zero()

    Class attributes (available on instances too):
        dtype: numpy element type
        rows, cols: dimensions
        size: rows * cols
        shape: (rows, cols)
    """

    __slots__ = ('_data',)
    __array_ufunc__ = None

    dtype: ClassVar[np.dtype | None] = None
    rows: ClassVar[int | None] = None
    cols: ClassVar[int | None] = None
    size: ClassVar[int | None] = None
    shape: ClassVar[tuple[int, int] | None] = None

    _family: ClassVar[str] = 'matrix'

    def __class_getitem__(cls, params):
        if cls.dtype is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 3:
            raise TypeError("Matrix[...] expects (dtype, rows, cols)")
        dtype, rows, cols = params
        return matrix_class(dtype, rows, cols)

    def __init__(self, *values: Any):
        cls = type(self)
        _require_specialized(cls)
        if values:
            self._data = check_values(values, cls.dtype, cls.size, cls.__name__)
        else:
            self._data = np.empty(cls.size, dtype=cls.dtype)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, data: NDArray[Any]):
        """Adopt an already-validated flat buffer without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def zero(cls):
        """Container with every element set to 0."""
        _require_specialized(cls)
        return cls._wrap(np.zeros(cls.size, dtype=cls.dtype))

    @classmethod
    def from_iterable(cls, values):
        """Build from an iterable of exactly size numbers, row-major."""
        _require_specialized(cls)
        return cls._wrap(check_values(tuple(values), cls.dtype, cls.size, cls.__name__))

    @classmethod
    def from_numpy(cls, array: ArrayLike):
        """
        Build from any array with exactly size elements.

        The array is read in C (row-major) order regardless of its shape,
        so a (rows, cols) array, a flat array and a (size, 1) column all
        work.
        """
        _require_specialized(cls)
        flat = np.asarray(array).reshape(-1)
        return cls._wrap(check_values(flat, cls.dtype, cls.size, cls.__name__))

    @classmethod
    def _with_dtype(cls, dtype):
        return matrix_class(dtype, cls.rows, cls.cols)

    @classmethod
    def _product_class(cls, dtype, rows, cols):
        """Class of a product whose right operand is of this class."""
        return matrix_class(dtype, rows, cols)

    def copy(self):
        """Independent deep copy."""
        return type(self)._wrap(self._data.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __reduce__(self):
        return (
            _rebuild,
            (self._family, self.dtype, self.rows, self.cols, self._data.copy()),
        )

    def astype(self, dtype):
        """Copy converted to another element type, same shape and family."""
        cls = type(self)._with_dtype(dtype)
        return cls._wrap(cast(self._data, cls.dtype))

    def fill(self, *first: Any):
        """Start a SequentialInitializer targeting this container."""
        from pyfixedmath.matrix.initializer import SequentialInitializer
        return SequentialInitializer(self, *first)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _offset(self, key, checked: bool) -> int:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected (row, col), got {len(key)} indices")
            row, col = key
            if checked:
                row = check_index(row, self.rows, 'row')
                col = check_index(col, self.cols, 'col')
            return row * self.cols + col
        if checked:
            return check_index(key, self.size, 'index')
        return key

    def __getitem__(self, key):
        return self._data[self._offset(key, __debug__)]

    def __setitem__(self, key, value) -> None:
        check_scalar(value, 'value')
        self._data[self._offset(key, __debug__)] = to_scalar(value, self.dtype)

    def at(self, *key):
        """
        Bounds-checked element read, by flat index or (row, col).

        Unlike subscripting, the check is never skipped under python -O.
        """
        return self._data[self._offset(key[0] if len(key) == 1 else key, True)]

    def set_at(self, key, value) -> None:
        """Bounds-checked element write; key is an index or a (row, col) tuple."""
        check_scalar(value, 'value')
        self._data[self._offset(key, True)] = to_scalar(value, self.dtype)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return self.size

    def to_numpy(self) -> NDArray[Any]:
        """Independent (rows, cols) array copy of the elements."""
        return self._data.reshape(self.rows, self.cols).copy()

    def __array__(self, dtype=None, copy=None):
        result = self.to_numpy()
        if dtype is not None:
            result = result.astype(dtype)
        return result

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def allclose(self, other, rtol: float | None = None, atol: float | None = None) -> bool:
        """
        Element-wise approximate equality.

        Tolerances default to the tier of this container's element type
        (exact for integers).
        """
        _check_operand(other, 'allclose')
        check_same_shape(self.shape, other.shape, 'allclose')
        tier = select_tolerance(self.dtype)
        return bool(np.allclose(
            self._data,
            other._data,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _elementwise(self, other, ufunc, operation: str):
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, operation)
            with np.errstate(over='ignore', invalid='ignore'):
                result = ufunc(self._data, other._data)
        elif is_real_scalar(other):
            scalar = to_scalar(other, self.dtype)
            with np.errstate(over='ignore', invalid='ignore'):
                result = ufunc(self._data, scalar)
        else:
            return NotImplemented
        return type(self)._wrap(cast(result, self.dtype))

    def __add__(self, other):
        return self._elementwise(other, np.add, 'add')

    def __radd__(self, other):
        if not is_real_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.add, 'add')

    def __sub__(self, other):
        return self._elementwise(other, np.subtract, 'subtract')

    def __mul__(self, other):
        # container * container is deliberately undefined: use @ or cwise_product
        if not is_real_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.multiply, 'multiply')

    def __rmul__(self, other):
        if not is_real_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.multiply, 'multiply')

    def __truediv__(self, other):
        if not is_real_scalar(other):
            return NotImplemented
        divisor = to_scalar(other, self.dtype)
        return type(self)._wrap(divide(self._data, divisor, self.dtype))

    def __neg__(self):
        with np.errstate(over='ignore'):
            return type(self)._wrap(cast(np.negative(self._data), self.dtype))

    def __pos__(self):
        return self.copy()

    def cwise_product(self, other):
        """Element-wise product with a container of identical shape."""
        _check_operand(other, 'cwise_product')
        return self._elementwise(other, np.multiply, 'cwise_product')

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise DimensionError(
                f"matmul: inner dimensions differ, {self.rows}x{self.cols} @ "
                f"{other.rows}x{other.cols}",
                expected_shape=(self.cols, other.cols),
                actual_shape=other.shape,
                operation='matmul',
            )
        left = self._data.reshape(self.rows, self.cols)
        right = other._data.reshape(other.rows, other.cols)
        # k-ascending, accumulator held in the left element type
        terms = (np.multiply.outer(left[:, k], right[k, :]) for k in range(self.cols))
        total = accumulate(terms, self.dtype, shape=(self.rows, other.cols))
        result_cls = type(other)._product_class(self.dtype, self.rows, other.cols)
        return result_cls._wrap(total.reshape(-1))

    def matmul(self, other):
        """Matrix product, same as ``self @ other``."""
        _check_operand(other, 'matmul')
        return self @ other

    def transpose(self):
        """(rows x cols) -> (cols x rows) copy."""
        result_cls = matrix_class(self.dtype, self.cols, self.rows)
        return result_cls._wrap(self._data.reshape(self.rows, self.cols).T.flatten())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        values = ", ".join(format_element(v) for v in self._data)
        return f"{type(self).__name__}({values})"


def _require_specialized(cls) -> None:
    if cls.dtype is None:
        raise TypeError(
            f"{cls.__name__} is generic; specialize it first, "
            f"e.g. Matrix[np.float32, 3, 3] or Vector[np.float32, 3]"
        )


def _check_operand(other, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise TypeError(
            f"{operation}: expected a Matrix or Vector, got {type(other).__name__}"
        )


def matrix_class(dtype, rows: int, cols: int) -> type[Matrix]:
    """
    Return the Matrix class specialized on (dtype, rows, cols).

    Square shapes also derive from SquareMatrix. Repeated calls with
    equivalent arguments return the same class object.
    """
    return _matrix_class(
        check_dtype(dtype, 'dtype'),
        check_dimension(rows, 'rows'),
        check_dimension(cols, 'cols'),
    )


@lru_cache(maxsize=None)
def _matrix_class(dtype: np.dtype, rows: int, cols: int) -> type[Matrix]:
    bases = (Matrix, SquareMatrix) if rows == cols else (Matrix,)
    name = f"Matrix[{dtype.name}, {rows}, {cols}]"
    namespace = {
        '__slots__': (),
        '__module__': Matrix.__module__,
        '__qualname__': name,
        'dtype': dtype,
        'rows': rows,
        'cols': cols,
        'size': rows * cols,
        'shape': (rows, cols),
    }
    logger.debug(f"Specialized {name} (square={rows == cols})")
    return type(name, bases, namespace)


def _rebuild(family: str, dtype, rows: int, cols: int, data: NDArray[Any]):
    """Unpickle helper: specialized classes are rebuilt from their key."""
    if family == 'vector':
        from pyfixedmath.matrix.vector import vector_class
        cls = vector_class(dtype, rows)
    else:
        cls = matrix_class(dtype, rows, cols)
    return cls._wrap(cast(data, cls.dtype))
