"""
Algebraic properties checked over seeded random containers.

Integer and float64 products of small shapes are compared exactly;
normalization is compared against the element type's tolerance tier.
"""

import numpy as np
import pytest

from pyfixedmath.core.tolerances import select_tolerance
from pyfixedmath.matrix import Matrix, Vector, builder


SHAPES = [(1, 1), (2, 3), (3, 2), (4, 4), (1, 5)]


class TestConstructionRoundtrip:

    @pytest.mark.parametrize("rows, cols", SHAPES)
    def test_explicit_values_read_back(self, rng, rows, cols):
        values = rng.integers(-100, 100, size=rows * cols).tolist()
        m = Matrix[np.int32, rows, cols](*values)
        assert list(m) == values
        for r in range(rows):
            for c in range(cols):
                assert m[r, c] == values[r * cols + c]

    @pytest.mark.parametrize("rows, cols", SHAPES)
    def test_initializer_matches_direct(self, rng, rows, cols):
        values = rng.standard_normal(rows * cols).tolist()
        cls = Matrix[np.float64, rows, cols]
        target = cls()
        builder(target).extend(values).build()
        assert target == cls(*values)


class TestAdditiveIdentity:

    @pytest.mark.parametrize("dtype", [np.int32, np.float32, np.float64])
    def test_zero(self, random_matrix, dtype):
        m = random_matrix(dtype, 3, 4)
        zero = type(m).zero()
        assert zero + zero == zero
        assert m + zero == m
        assert m - m == zero


class TestTranspose:

    @pytest.mark.parametrize("rows, cols", SHAPES)
    def test_involution(self, random_matrix, rows, cols):
        m = random_matrix(np.float32, rows, cols)
        assert m.transpose().transpose() == m

    @pytest.mark.parametrize("dtype", [np.int32, np.float64])
    def test_product_reverses(self, random_matrix, dtype):
        a = random_matrix(dtype, 2, 3)
        b = random_matrix(dtype, 3, 4)
        lhs = (a @ b).transpose()
        rhs = b.transpose() @ a.transpose()
        if dtype is np.int32:
            assert lhs == rhs
        else:
            assert lhs.allclose(rhs)


class TestVectorProperties:

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_normalized_has_unit_length(self, rng, dtype):
        tier = select_tolerance(dtype)
        cls = Vector[dtype, 4]
        for _ in range(10):
            v = cls.from_numpy(rng.standard_normal(4))
            n = v.normalized()
            np.testing.assert_allclose(n.square_norm(), 1.0, rtol=tier.rtol)

    def test_dot_symmetric(self, rng):
        cls = Vector[np.float64, 5]
        for _ in range(10):
            a = cls.from_numpy(rng.standard_normal(5))
            b = cls.from_numpy(rng.standard_normal(5))
            assert a.dot(b) == b.dot(a)

    def test_dot_matches_square_norm(self, rng):
        v = Vector[np.int32, 3].from_numpy(rng.integers(-10, 10, size=3))
        assert v.dot(v) == v.square_norm()
