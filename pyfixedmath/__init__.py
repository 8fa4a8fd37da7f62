"""
PyFixedMath: fixed-shape linear algebra primitives for Python.

Shape-specialized matrices and vectors with value semantics, the numeric
foundation of a small 3D model viewer.

Submodules:
    core: Exceptions, validation, element-type arithmetic, tolerances
    matrix: Matrix, Vector, square specialization, sequential initializer
"""

__version__ = "0.1.0"

from pyfixedmath import core
from pyfixedmath import matrix
from pyfixedmath.matrix import (
    Matrix,
    Vector,
    SequentialInitializer,
    builder,
    zero,
    identity,
)

__all__ = [
    "__version__",
    "core",
    "matrix",
    "Matrix",
    "Vector",
    "SequentialInitializer",
    "builder",
    "zero",
    "identity",
]
