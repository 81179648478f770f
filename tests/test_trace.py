import numpy as np
import pytest

from pyparscan.reduction import count_levels, num_levels, traced_max
from pyparscan.steps import REDUCE


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 9, 16, 17, 1000])
def test_level_count_is_ceil_log2(n):
    assert count_levels(n) == num_levels(n)


def test_traced_steps_expose_buffer():
    steps = []
    result = traced_max([3, 7, 2, 9, 4, 1, 8, 5], observer=steps.append)

    assert result.value == 9
    assert result.levels == 3
    assert [s.level for s in steps] == [0, 1, 2]
    assert [s.stride for s in steps] == [1, 2, 4]
    assert all(s.phase == REDUCE for s in steps)

    np.testing.assert_array_equal(steps[0].buffer, [7, 7, 9, 9, 4, 1, 8, 5])
    np.testing.assert_array_equal(steps[1].buffer, [9, 7, 9, 9, 8, 1, 8, 5])
    np.testing.assert_array_equal(steps[2].buffer, [9, 7, 9, 9, 8, 1, 8, 5])


def test_odd_length_trace():
    steps = []
    result = traced_max([5, 1, 4], observer=steps.append)
    assert result.levels == 2
    np.testing.assert_array_equal(steps[0].buffer, [5, 1, 4])
    np.testing.assert_array_equal(steps[-1].buffer, [5, 1, 4])


def test_snapshots_are_read_only():
    def tamper(step):
        with pytest.raises(ValueError):
            step.buffer[0] = 10 ** 6

    assert traced_max([1, 2, 3, 4], observer=tamper).value == 4


def test_single_element_has_no_steps():
    steps = []
    result = traced_max([11], observer=steps.append)
    assert result.levels == 0
    assert result.value == 11
    assert steps == []
