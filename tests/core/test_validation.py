"""
Tests for input validators.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pysms.core.exceptions import ConfigurationError, RangeError
from pysms.core.validation import (
    check_col_index,
    check_coordinate,
    check_dimensions,
    check_row_index,
    check_weights,
)

NAMES = ('weight-a', 'weight-b', 'weight-c', 'weight-d', 'weight-e')


class TestCheckDimensions:

    def test_accepts_zero(self):
        check_dimensions(0, 0)

    def test_accepts_numpy_integers(self):
        check_dimensions(np.int64(3), np.int32(4))

    def test_rejects_negative(self):
        with pytest.raises(RangeError, match="ncols: must be non-negative"):
            check_dimensions(3, -1)

    def test_rejects_float(self):
        with pytest.raises(RangeError, match="expected integer"):
            check_dimensions(3.0, 3)

    def test_rejects_bool(self):
        with pytest.raises(RangeError):
            check_dimensions(True, 3)


class TestCheckCoordinate:

    def test_inside(self):
        check_coordinate(1, 1, 1, 1)
        check_coordinate(3, 2, 3, 2)

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (0, 0), (4, 1), (1, 3)])
    def test_outside(self, row, col):
        with pytest.raises(RangeError) as info:
            check_coordinate(row, col, 3, 2)
        assert info.value.row == row
        assert info.value.col == col
        assert (info.value.nrows, info.value.ncols) == (3, 2)

    def test_index_checks(self):
        check_row_index(2, 2, 'i')
        check_col_index(1, 5, 'j')
        with pytest.raises(RangeError, match="i: row 3 not in 1..2"):
            check_row_index(3, 2, 'i')
        with pytest.raises(RangeError, match="j: column 0"):
            check_col_index(0, 5, 'j')


class TestCheckWeights:

    def test_returns_float_array(self):
        arr = check_weights([4.5, 2, 1, 2, 0.5], NAMES)
        assert arr.dtype == np.float64
        assert_allclose(arr, [4.5, 2.0, 1.0, 2.0, 0.5])

    def test_rejects_all_zero(self):
        with pytest.raises(ConfigurationError, match="All reordering weights are zero"):
            check_weights([0, 0, 0, 0, 0], NAMES)

    def test_rejects_nan(self):
        with pytest.raises(ConfigurationError) as info:
            check_weights([1, float('nan'), 1, 1, 1], NAMES)
        assert info.value.option == 'weight-b'

    def test_rejects_non_numeric(self):
        with pytest.raises(ConfigurationError, match="weight-c: not a number"):
            check_weights([1, 1, 'x', 1, 1], NAMES)

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            check_weights([1, 2], NAMES)
