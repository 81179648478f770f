"""
Sequential reference implementations.

Single-pass maximum and prefix sums computed on the host with numpy. They
serve as the correctness oracle every parallel method is verified against.
Arithmetic wraps exactly like the fixed-width element type of the kernels.
"""

import numpy as np

from .errors import EmptyInputError
from .util_taichi import as_elements


def sequential_max(values) -> int:
    """
    Maximum of a non-empty array.

    Raises:
        EmptyInputError: If the array is empty
    """
    arr = as_elements(values)
    if arr.size == 0:
        raise EmptyInputError("Maximum of an empty array is undefined")
    return int(arr.max())


def sequential_prefix_sum(values) -> np.ndarray:
    """Inclusive prefix sum; result[i] = values[0] + ... + values[i]."""
    arr = as_elements(values)
    return np.cumsum(arr, dtype=arr.dtype)


def sequential_exclusive_sum(values) -> np.ndarray:
    """Exclusive prefix sum; result[0] = 0, result[i] = values[0] + ... + values[i-1]."""
    arr = as_elements(values)
    out = np.zeros_like(arr)
    if arr.size > 1:
        np.cumsum(arr[:-1], dtype=arr.dtype, out=out[1:])
    return out
