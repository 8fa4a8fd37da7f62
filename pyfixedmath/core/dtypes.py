"""
Element type constants for PyFixedMath.

This module is the SINGLE SOURCE OF TRUTH for which numpy dtypes a
container may hold and for the element types behind the alias suffixes
(Matrix3f, Vector4i, ...). Import from here, never spell dtypes inline.

Usage:
    from pyfixedmath.core.dtypes import FLOAT

    Vector3f = Vector[FLOAT, 3]
"""

import numpy as np

# C int, alias suffix 'i'
INT = np.dtype(np.int32)

# C float, alias suffix 'f'
FLOAT = np.dtype(np.float32)

# C double, alias suffix 'd'
DOUBLE = np.dtype(np.float64)

# numpy kind codes accepted as arithmetic element types:
# signed int, unsigned int, floating
ARITHMETIC_KINDS = frozenset({'i', 'u', 'f'})

__all__ = [
    'INT',
    'FLOAT',
    'DOUBLE',
    'ARITHMETIC_KINDS',
]
