"""
Tolerance tiers for approximate container comparison.

Defines precision expectations per element type:
- Integral: exact equality, integer arithmetic never rounds
- FP64: double precision, a handful of ulps
- FP32: single precision, the common rendering element type
- FP16: half precision

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integral element types, bit-exact equality',
)

FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, a few ulps of rounding',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision, accumulated rounding over 4x4 products',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for an element type."""
    dtype = np.dtype(dtype)
    if dtype.kind in ('i', 'u'):
        return EXACT
    if dtype.itemsize >= 8:
        return FP64
    if dtype.itemsize >= 4:
        return FP32
    return FP16
