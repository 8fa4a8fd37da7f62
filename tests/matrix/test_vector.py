"""
Tests for the Vector specialization.

Validates:
    - Vector[T, N] is a Matrix[T, N, 1]
    - square_norm, norm (including integral truncation), normalize,
      normalized, dot
    - x / y / z / w component accessors
"""

import warnings

import numpy as np
import pytest

from pyfixedmath.core.exceptions import DimensionError, NormTruncationWarning
from pyfixedmath.matrix import (
    Matrix,
    Vector,
    Vector2f,
    Vector2i,
    Vector3d,
    Vector3f,
    Vector3i,
    Vector4f,
)


class TestVectorClass:

    def test_is_single_column_matrix(self):
        v = Vector3f(1, 2, 3)
        assert isinstance(v, Matrix[np.float32, 3, 1])
        assert v.shape == (3, 1)

    def test_cached(self):
        assert Vector[np.float32, 3] is Vector3f

    def test_equals_column_matrix(self):
        assert Vector3f(1, 2, 3) == Matrix[np.float32, 3, 1](1, 2, 3)

    def test_class_name(self):
        assert Vector3i.__name__ == "Vector[int32, 3]"

    def test_wrong_parameters(self):
        with pytest.raises(TypeError, match="dtype, size"):
            Vector[np.float32, 3, 1]

    def test_zero_is_vector(self):
        assert type(Vector3f.zero()) is Vector3f

    def test_generic_vector_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="generic"):
            Vector()


class TestNorm:

    def test_scenario_3_4_0(self):
        v = Vector3f(3, 4, 0)
        assert v.norm() == 5.0
        assert v.norm().dtype == np.float32

    def test_square_norm(self):
        assert Vector3f(3, 4, 0).square_norm() == 25.0
        assert Vector3i(1, 2, 3).square_norm() == 14

    def test_integral_exact_norm_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Vector2i(3, 4).norm() == 5

    def test_integral_norm_truncates_with_warning(self):
        with pytest.warns(NormTruncationWarning, match="truncated to 1"):
            result = Vector2i(1, 1).norm()
        assert result == 1
        assert result.dtype == np.int32


class TestNormalize:

    def test_in_place(self):
        v = Vector3d(3, 4, 0)
        assert v.normalize() is None
        assert v.allclose(Vector3d(0.6, 0.8, 0.0))

    def test_normalized_leaves_receiver(self):
        v = Vector3d(3, 4, 0)
        n = v.normalized()
        assert v == Vector3d(3, 4, 0)
        assert type(n) is Vector3d
        np.testing.assert_allclose(n.square_norm(), 1.0, rtol=1e-12)

    def test_float32_unit_length(self):
        n = Vector3f(1, 2, 3).normalized()
        np.testing.assert_allclose(n.square_norm(), 1.0, rtol=1e-5)

    def test_zero_length_is_unguarded(self):
        v = Vector3f.zero()
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            v.normalize()
        assert all(np.isnan(value) for value in v)

    def test_integral_uses_truncated_division(self):
        v = Vector2i(5, 0)
        v.normalize()
        assert v == Vector2i(1, 0)
        w = Vector2i(3, 4).normalized()
        assert w == Vector2i(0, 0)


class TestDot:

    def test_orthogonal_scenario(self):
        assert Vector2i(1, 0).dot(Vector2i(0, 1)) == 0

    def test_value(self):
        assert Vector3i(1, 2, 3).dot(Vector3i(4, 5, 6)) == 32

    def test_symmetric(self, rng):
        a = Vector3d.from_numpy(rng.standard_normal(3))
        b = Vector3d.from_numpy(rng.standard_normal(3))
        assert a.dot(b) == b.dot(a)

    def test_accumulates_in_left_element_type(self):
        assert Vector2i(1, 1).dot(Vector2f(0.6, 0.6)) == 0
        result = Vector2f(0.6, 0.6).dot(Vector2i(1, 1))
        assert result.dtype == np.float32
        np.testing.assert_allclose(result, 1.2, rtol=1e-6)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            Vector2i(1, 0).dot(Vector3i(1, 0, 0))
        assert exc_info.value.operation == "dot"

    def test_row_matrix_rejected(self):
        with pytest.raises(DimensionError):
            Vector2i(1, 0).dot(Matrix[np.int32, 1, 2](1, 0))

    def test_requires_container(self):
        with pytest.raises(TypeError):
            Vector2i(1, 0).dot((1, 0))


class TestComponents:

    def test_read(self):
        v = Vector4f(1, 2, 3, 4)
        assert (v.x, v.y, v.z, v.w) == (1, 2, 3, 4)

    def test_write_converts(self):
        v = Vector3i.zero()
        v.x = 7
        v.z = 2.9
        assert v == Vector3i(7, 0, 2)

    def test_missing_component(self):
        v = Vector2f(1, 2)
        with pytest.raises(IndexError, match="no z component"):
            v.z
        with pytest.raises(IndexError):
            v.w = 1.0

    def test_loader_style_fill(self):
        """Vertices are filled component by component after default construction."""
        vertex = Vector3f()
        vertex.x, vertex.y, vertex.z = 1.5, -2.0, 0.25
        assert vertex == Vector3f(1.5, -2.0, 0.25)
