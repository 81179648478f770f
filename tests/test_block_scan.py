import numpy as np
import pytest

from pyparscan.baseline import sequential_prefix_sum
from pyparscan.scan import block_scan, inclusive_scan

SIZES = [1, 2, 3, 4, 5, 7, 8, 9, 16, 17, 100, 129, 1000]


def test_scenarios():
    np.testing.assert_array_equal(block_scan([3, 7, 2, 9, 4, 1, 8, 5]), [3, 10, 12, 21, 25, 26, 34, 39])
    np.testing.assert_array_equal(block_scan([5, 1, 4]), [5, 6, 10])


def test_boundaries():
    np.testing.assert_array_equal(block_scan([8], workers=3), [8])
    assert block_scan([], workers=3).size == 0


@pytest.mark.parametrize("n", SIZES)
def test_matches_baseline_for_every_worker_count(n, rng):
    values = rng.integers(-50, 50, size=n).astype(np.int32)
    expected = sequential_prefix_sum(values)
    for workers in range(1, 10):
        np.testing.assert_array_equal(block_scan(values, workers), expected)


def test_agrees_with_blelloch(rng):
    values = rng.integers(1, 100, size=250).astype(np.int32)
    np.testing.assert_array_equal(block_scan(values, workers=7), inclusive_scan(values))


def test_more_workers_than_elements():
    np.testing.assert_array_equal(block_scan([1, 2, 3], workers=8), [1, 3, 6])


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        block_scan([1, 2, 3], workers=0)


def test_overflow_wraps_like_the_baseline():
    values = np.full(10, 2**30, dtype=np.int32)
    expected = sequential_prefix_sum(values)
    np.testing.assert_array_equal(block_scan(values, 3), expected)
    np.testing.assert_array_equal(block_scan(values, 3), inclusive_scan(values, validate=True))
