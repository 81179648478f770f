import numpy as np
import pytest

from pyparscan.baseline import sequential_max, sequential_prefix_sum, sequential_exclusive_sum
from pyparscan.errors import EmptyInputError


def test_sequential_max():
    assert sequential_max([3, 7, 2, 9, 4, 1, 8, 5]) == 9
    assert sequential_max([-5, -2, -9]) == -2
    assert sequential_max([42]) == 42


def test_sequential_max_empty():
    with pytest.raises(EmptyInputError):
        sequential_max([])


def test_sequential_prefix_sum():
    np.testing.assert_array_equal(
        sequential_prefix_sum([3, 7, 2, 9, 4, 1, 8, 5]),
        [3, 10, 12, 21, 25, 26, 34, 39],
    )
    assert sequential_prefix_sum([]).size == 0


def test_sequential_exclusive_sum():
    np.testing.assert_array_equal(sequential_exclusive_sum([5, 1, 4]), [0, 5, 6])
    np.testing.assert_array_equal(sequential_exclusive_sum([7]), [0])
    assert sequential_exclusive_sum([]).size == 0


def test_baseline_does_not_touch_input():
    values = np.array([5, 1, 4], dtype=np.int32)
    sequential_prefix_sum(values)
    sequential_exclusive_sum(values)
    np.testing.assert_array_equal(values, [5, 1, 4])
