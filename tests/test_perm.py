"""Tests for causalexpr.perm module."""

import numpy as np
import pytest

from causalexpr.perm import perm, strides


class TestPerm:
    """Tests for the digit permutation grid."""

    def test_binary_pair(self):
        assert perm([1, 1]).tolist() == [[0, 0], [1, 0], [0, 1], [1, 1]]

    def test_default(self):
        assert perm().tolist() == [[0, 0], [1, 0], [0, 1], [1, 1]]

    def test_mixed_radix(self):
        assert perm([2, 1]).tolist() == [
            [0, 0], [1, 0], [2, 0],
            [0, 1], [1, 1], [2, 1],
        ]

    def test_shape(self):
        assert perm([1, 1, 1]).shape == (8, 3)
        assert perm([2, 3, 1]).shape == (24, 3)

    def test_row_formula(self):
        maxima = [2, 3, 1]
        grid = perm(maxima)
        for r in range(grid.shape[0]):
            acc = 1
            for i, m in enumerate(maxima):
                assert grid[r, i] == (r // acc) % (m + 1)
                acc *= m + 1

    def test_rows_unique(self):
        grid = perm([1, 1, 1, 1])
        assert len({tuple(row) for row in grid.tolist()}) == 16

    def test_zero_max(self):
        assert perm([0]).tolist() == [[0]]

    def test_empty(self):
        grid = perm([])
        assert grid.shape == (1, 0)

    def test_integer_dtype(self):
        assert np.issubdtype(perm([1]).dtype, np.integer)

    def test_negative_max(self):
        with pytest.raises(ValueError, match=">= 0"):
            perm([1, -1])


class TestStrides:
    def test_strides(self):
        assert strides([1, 2, 1]) == [1, 2, 6]

    def test_empty(self):
        assert strides([]) == []
