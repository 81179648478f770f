"""
Utility functions shared by the reduction and scan routines.

Provides the small copy/pad/set kernels every tree algorithm needs, plus the
Python-side helpers normalising inputs and worker budgets.

"""

import taichi as ti
import numpy as np

from . import constants as cte
from . import environment as env


#########################################
###### INPUTS AND WORKER BUDGETS ########
#########################################


def as_elements(values) -> np.ndarray:
    """
    Normalise any integer sequence into a contiguous 1D array of the configured dtype.

    The caller's object is never written to: algorithms only read from the
    returned array and copy it into their own working buffers. Values are
    never truncated: anything the configured width cannot hold is rejected.

    Raises:
        ValueError: If the input is not one-dimensional, is not made of
            integers, or holds values outside the configured integer range
    """
    env.ensure_initialised()
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1D array of integers, got shape {arr.shape}")
    if arr.size == 0:
        return np.zeros(0, dtype=cte.NP_DTYPE)
    if not np.can_cast(arr.dtype, cte.NP_DTYPE, casting="same_kind"):
        raise ValueError(f"Expected integer elements, got dtype {arr.dtype}")

    # same_kind still allows narrowing, so check the range before casting
    info = np.iinfo(cte.NP_DTYPE)
    lo, hi = int(arr.min()), int(arr.max())
    if lo < info.min or hi > info.max:
        raise ValueError(
            f"Values in [{lo}, {hi}] do not fit int{cte.INT_BITS} elements [{info.min}, {info.max}]"
        )
    return np.ascontiguousarray(arr, dtype=cte.NP_DTYPE)


def resolve_workers(workers=None) -> int:
    """
    Worker budget of one invocation.

    Args:
        workers: Requested budget, None for the configured default

    Raises:
        ValueError: If workers < 1
    """
    workers = cte.WORKERS if workers is None else int(workers)
    if workers < 1:
        raise ValueError(f"Worker count must be at least 1, got {workers}")
    return workers


def pool_threads(workers: int) -> int:
    """Threads a single parallel step may use: the budget capped by the pool size."""
    return max(1, min(workers, cte.WORKERS))


#########################################
###### COPY, PAD AND STUFF ##############
#########################################

# Sizes, strides and indices are i32 in every kernel whatever the element
# width: range-for bounds are always i32 on the Taichi side.


@ti.kernel
def copy_pad(src: ti.types.ndarray(), dst: ti.types.ndarray(), n: ti.i32, work_size: ti.i32):
    """
    Copy input data to a working buffer and pad it with the additive identity.

    Args:
        src: Input array with n valid elements
        dst: Working buffer of work_size >= n elements
        n: Number of valid elements in input
        work_size: Total size of the working buffer

    Ensures: dst[i] = src[i] for i < n, dst[i] = 0 for i >= n
    """
    for i in range(work_size):
        if i < n:
            dst[i] = src[i]
        else:
            dst[i] = 0


@ti.kernel
def set_value(data: ti.types.ndarray(), index: ti.i32, value: int):
    """
    Set a single element.

    Used to reset the root of a scan tree to the identity element.
    """
    data[index] = value


@ti.kernel
def add_arrays(a: ti.types.ndarray(), b: ti.types.ndarray(), out: ti.types.ndarray(), n: ti.i32):
    """out[i] = a[i] + b[i] for i < n"""
    for i in range(n):
        out[i] = a[i] + b[i]
