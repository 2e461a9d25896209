"""
Tests for Matrix storage: allocation, release, resizing and constructors.
"""

import logging

import numpy as np
import pytest

from pymatrix import FP32, FP64, Matrix, ValidationError
from pymatrix.matrix import allocate, ensure_shape, release


# ═══════════════════════════════════════════════════════════════════════
# Allocation
# ═══════════════════════════════════════════════════════════════════════


class TestAllocate:
    """allocate() builds a zero-filled rows x cols buffer."""

    def test_shape_and_zero_fill(self):
        m = allocate(2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m.shape == (2, 3)
        assert m.elements.shape == (2, 3)
        np.testing.assert_array_equal(m.elements, np.zeros((2, 3)))

    def test_default_precision_is_fp64(self):
        m = allocate(2, 2)
        assert m.precision is FP64
        assert m.elements.dtype == np.float64

    def test_fp32_storage(self):
        m = allocate(2, 2, 'fp32')
        assert m.precision is FP32
        assert m.dtype == np.float32
        assert m.elements.dtype == np.float32

    def test_row_major_indexing(self):
        m = allocate(2, 3)
        m.elements[1][2] = 5.0
        assert m[1, 2] == 5.0
        assert m.elements[1, 2] == 5.0

    def test_setitem(self):
        m = allocate(2, 2)
        m[0, 1] = 3.5
        assert m.elements[0][1] == 3.5

    @pytest.mark.parametrize("rows, cols", [(0, 0), (0, 4), (4, 0)])
    def test_zero_dimension_has_no_buffer(self, rows, cols):
        m = allocate(rows, cols)
        assert m.elements is None
        assert not m.is_valid
        assert m.shape == (rows, cols)

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError, match="rows"):
            allocate(-1, 2)

    def test_non_integer_dimension_rejected(self):
        with pytest.raises(ValidationError, match="cols"):
            allocate(2, 1.5)

    def test_unknown_precision_rejected(self):
        with pytest.raises(ValidationError, match="Unknown precision"):
            allocate(2, 2, 'fp16')

    @pytest.mark.parametrize("value", ['double!', 'fp8', 3, np.int64])
    def test_precision_typos_do_not_fall_back_to_fp64(self, value):
        with pytest.raises(ValidationError, match="Unknown precision"):
            Matrix(1, 1, value)

    def test_repr(self):
        assert repr(allocate(2, 3)) == "Matrix(2x3, fp64)"
        assert repr(Matrix.invalid('fp32')) == "Matrix(0x0, fp32, invalid)"


# ═══════════════════════════════════════════════════════════════════════
# Release and invalidation
# ═══════════════════════════════════════════════════════════════════════


class TestRelease:
    """release() drops the buffer and resets dimensions."""

    def test_release_resets(self):
        m = allocate(3, 3)
        release(m)
        assert m.rows == 0
        assert m.cols == 0
        assert m.elements is None

    def test_double_release_is_harmless(self):
        m = allocate(3, 3)
        m.release()
        m.release()
        assert m.shape == (0, 0)

    def test_release_keeps_precision(self):
        m = allocate(2, 2, 'fp32')
        release(m)
        assert m.precision is FP32

    def test_invalidate_is_canonical_invalid(self):
        m = allocate(2, 5)
        m.invalidate()
        assert (m.rows, m.cols, m.elements) == (0, 0, None)

    def test_element_access_on_invalid_raises(self):
        m = Matrix.invalid()
        with pytest.raises(IndexError):
            m[0, 0]
        with pytest.raises(IndexError):
            m[0, 0] = 1.0


# ═══════════════════════════════════════════════════════════════════════
# ensure_shape
# ═══════════════════════════════════════════════════════════════════════


class TestEnsureShape:
    """ensure_shape() reallocates only when the shape changes."""

    def test_matching_shape_keeps_buffer(self):
        m = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        buffer = m.elements
        assert ensure_shape(m, 2, 2) is False
        assert m.elements is buffer
        np.testing.assert_array_equal(m.elements, [[1.0, 2.0], [3.0, 4.0]])

    def test_new_shape_reallocates(self):
        m = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        buffer = m.elements
        assert ensure_shape(m, 3, 1) is True
        assert m.shape == (3, 1)
        assert m.elements is not buffer
        assert m.elements.shape == (3, 1)

    def test_transposed_shape_reallocates(self):
        m = allocate(2, 3)
        assert m.ensure_shape(3, 2) is True
        assert m.elements.shape == (3, 2)

    def test_invalid_matrix_gains_buffer(self):
        m = Matrix.invalid('fp32')
        m.ensure_shape(2, 2)
        assert m.is_valid
        assert m.elements.dtype == np.float32

    def test_shrink_to_zero_drops_buffer(self):
        m = allocate(2, 2)
        m.ensure_shape(0, 2)
        assert m.elements is None

    def test_reallocation_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger='pymatrix.matrix.storage')
        m = allocate(2, 2)
        m.ensure_shape(2, 2)
        assert not caplog.records
        m.ensure_shape(4, 1)
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.DEBUG
        assert "2x2 -> 4x1" in caplog.records[0].getMessage()

    def test_reallocation_message_formatted_lazily(self, caplog):
        caplog.set_level(logging.DEBUG, logger='pymatrix.matrix.storage')
        m = allocate(1, 1, 'fp32')
        m.ensure_shape(3, 2)
        record = caplog.records[0]
        assert record.msg == "Reallocating %s buffer %dx%d -> %dx%d"
        assert record.args[1:] == (1, 1, 3, 2)
        assert record.getMessage() == "Reallocating fp32 buffer 1x1 -> 3x2"


# ═══════════════════════════════════════════════════════════════════════
# Constructors and conversion
# ═══════════════════════════════════════════════════════════════════════


class TestConstructors:
    """from_array / identity / zeros / copy / to_array."""

    def test_from_array_copies(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(data)
        data[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_from_nested_lists_of_ints(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.precision is FP64
        assert m[1, 2] == 6.0

    def test_from_float32_infers_fp32(self):
        m = Matrix.from_array(np.ones((2, 2), dtype=np.float32))
        assert m.precision is FP32

    def test_from_array_explicit_precision(self):
        m = Matrix.from_array([[0.1, 0.2]], 'fp32')
        assert m.dtype == np.float32
        assert m[0, 0] == np.float32(0.1)

    def test_from_array_rejects_1d(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            Matrix.from_array([1.0, 2.0])

    def test_from_array_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.from_array([[1.0, np.nan]])

    def test_from_array_rejects_fp32_overflow(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.from_array([[1e300, 1.0]], 'fp32')

    def test_from_array_fp32_overflow_allowed_on_request(self):
        m = Matrix.from_array([[1e300, 1.0]], 'fp32', allow_non_finite=True)
        assert np.isinf(m[0, 0])
        assert m[0, 1] == 1.0

    def test_large_value_fits_fp64(self):
        m = Matrix.from_array([[1e300, 1.0]])
        assert m[0, 0] == 1e300

    def test_from_array_allows_nan_on_request(self):
        m = Matrix.from_array([[1.0, np.nan]], allow_non_finite=True)
        assert np.isnan(m[0, 1])

    def test_from_empty_array_is_degenerate(self):
        m = Matrix.from_array(np.zeros((0, 3)))
        assert m.shape == (0, 3)
        assert m.elements is None

    def test_identity(self, precision):
        m = Matrix.identity(3, precision)
        np.testing.assert_array_equal(m.elements, np.eye(3))
        assert m.precision.name == precision

    def test_zeros(self):
        m = Matrix.zeros(2, 4, 'fp32')
        assert m.shape == (2, 4)
        assert not m.elements.any()

    def test_copy_is_independent(self):
        m = Matrix.from_array([[1.0, 2.0]])
        dup = m.copy()
        dup[0, 0] = 7.0
        assert m[0, 0] == 1.0
        assert dup.precision is m.precision

    def test_to_array_is_copy(self):
        m = Matrix.from_array([[1.0, 2.0]])
        arr = m.to_array()
        arr[0, 0] = 5.0
        assert m[0, 0] == 1.0

    def test_to_array_of_invalid(self):
        arr = Matrix.invalid().to_array()
        assert arr.shape == (0, 0)

    def test_numpy_interop(self):
        m = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(np.asarray(m), [[1.0, 2.0], [3.0, 4.0]])

    def test_numpy_interop_refuses_no_copy(self):
        m = Matrix.from_array([[1.0, 2.0]])
        with pytest.raises(ValueError, match="without copying"):
            np.asarray(m, copy=False)

    def test_numpy_interop_with_dtype(self):
        arr = np.asarray(Matrix.from_array([[1.5, 2.0]]), dtype=np.float32)
        assert arr.dtype == np.float32

    def test_tolist(self):
        assert Matrix.from_array([[1, 2]]).tolist() == [[1.0, 2.0]]
