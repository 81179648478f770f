import numpy as np
import pytest

from pyparscan.baseline import sequential_max
from pyparscan.errors import EmptyInputError
from pyparscan.reduction import atomic_max, num_levels, sections_max, traced_max, tree_max

# Lengths around powers of two, where stride bounds matter
SIZES = [1, 2, 3, 4, 5, 7, 8, 9, 15, 16, 17, 33, 100, 127, 128, 129, 1000]


class TestScenarios:

    def test_power_of_two(self):
        values = [3, 7, 2, 9, 4, 1, 8, 5]
        assert tree_max(values) == 9
        assert sections_max(values) == 9
        assert traced_max(values).value == 9
        assert atomic_max(values) == 9

    def test_not_power_of_two(self):
        values = [5, 1, 4]
        assert tree_max(values) == 5
        assert sections_max(values) == 5
        assert traced_max(values).value == 5
        assert atomic_max(values) == 5

    def test_single_element(self):
        for method in (tree_max, sections_max, atomic_max):
            assert method([-17]) == -17
        assert traced_max([-17]).value == -17

    def test_empty_input_raises(self):
        for method in (tree_max, sections_max, atomic_max, traced_max):
            with pytest.raises(EmptyInputError):
                method([])

    def test_max_in_last_cell(self):
        # Reaches cell 0 only through the widest stride
        values = list(range(10))
        assert tree_max(values) == 9
        assert traced_max(values).value == 9

    def test_all_negative(self):
        values = [-8, -3, -11, -3, -40]
        assert tree_max(values) == -3
        assert sections_max(values, workers=2) == -3
        assert atomic_max(values) == -3


@pytest.mark.parametrize("n", SIZES)
def test_methods_agree_with_baseline(n, rng):
    values = rng.integers(-1000, 1000, size=n).astype(np.int32)
    expected = sequential_max(values)

    assert tree_max(values) == expected
    assert traced_max(values).value == expected
    assert atomic_max(values) == expected
    for workers in range(1, 10):
        assert sections_max(values, workers) == expected


def test_sections_with_more_workers_than_elements():
    # Empty partitions start at the dtype minimum and must not win the fold
    assert sections_max([-2147483647, -5], workers=8) == -5
    assert sections_max([7], workers=16) == 7


def test_dtype_minimum_is_a_valid_maximum():
    lowest = int(np.iinfo(np.int32).min)
    assert sections_max([lowest, lowest], workers=4) == lowest
    assert tree_max([lowest]) == lowest


def test_input_is_not_modified():
    values = np.array([1, 9, 3, 4, 2], dtype=np.int32)
    tree_max(values)
    sections_max(values, 2)
    traced_max(values)
    atomic_max(values)
    np.testing.assert_array_equal(values, [1, 9, 3, 4, 2])


def test_num_levels():
    assert [num_levels(n) for n in (0, 1, 2, 3, 4, 5, 8, 9)] == [0, 0, 1, 2, 2, 3, 3, 4]


def test_worker_budget_validation():
    with pytest.raises(ValueError):
        tree_max([1, 2, 3], workers=0)
    with pytest.raises(ValueError):
        sections_max([1, 2, 3], workers=-1)


def test_values_wider_than_the_elements_are_rejected():
    # 2**33 + 1 would truncate to 1 in int32 cells
    values = np.array([2**33 + 1, 2], dtype=np.int64)
    for method in (tree_max, sections_max, atomic_max):
        with pytest.raises(ValueError):
            method(values)
    with pytest.raises(ValueError):
        tree_max(np.array([-2**40, 2], dtype=np.int64))
    with pytest.raises(ValueError):
        tree_max([2**70, 1])


def test_float_input_is_rejected():
    with pytest.raises(ValueError):
        tree_max(np.array([1.5, 2.7]))
    with pytest.raises(ValueError):
        sections_max([0.5, 3.0])


def test_narrower_integer_dtypes_are_accepted():
    assert tree_max(np.array([5, 9], dtype=np.int64)) == 9
    assert atomic_max(np.array([200, 17], dtype=np.uint8)) == 200
    assert sections_max(np.array([-3, -7], dtype=np.int16), workers=2) == -3
