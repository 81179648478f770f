"""
Parallel Scan Implementation

This module implements the work-efficient parallel prefix sum using the
Blelloch scan approach, on the Taichi CPU backend.

Algorithm Details:
    - Based on Blelloch (1990) work-efficient scan
    - Two-phase approach: up-sweep (reduce) + down-sweep (distribute)
    - O(n) work complexity, O(log n) depth complexity
    - Input is zero-padded to m = 2^L cells, L = ceil(log2 n)
    - 2L synchronisation steps (L up-sweep + L down-sweep), one kernel launch each

Tree Indexing (level d, stride = 2^(d+1), offset = 2^d - 1, i multiple of stride):
    up-sweep:   buf[i + stride - 1] += buf[i + offset]
    down-sweep: t = buf[i + offset]
                buf[i + offset] = buf[i + stride - 1]
                buf[i + stride - 1] += t

Mathematical Operation:
    Given input array [a0, a1, a2, ..., an-1], produces output:
    [a0, a0+a1, a0+a1+a2, ..., a0+a1+...+an-1]

Reference: Blelloch, G. E. (1990). "Prefix sums and their applications"
"""
import taichi as ti
import numpy as np

from .. import util_taichi as ut
from ..baseline import sequential_exclusive_sum
from ..buffer import WorkingBuffer
from ..errors import InvariantError
from ..reduction.tree import num_levels
from ..steps import UPSWEEP, RESET, DOWNSWEEP, notify


@ti.kernel
def upsweep_step(data: ti.types.ndarray(), m: ti.i32, stride: ti.i32, offset: ti.i32, threads: ti.template()):
    """
    Execute one step of the up-sweep phase (reduce phase) of parallel scan.

    Each iteration owns the subtree starting at i = j * stride and adds the
    root of its left half into the root of its right half. Subtrees of one
    level are disjoint.

    Args:
        data: Working array (modified in-place)
        m: Size of the working array (power of 2)
        stride: Subtree width at this level, 2^(d+1)
        offset: Position of the left child root inside the subtree, 2^d - 1
        threads: Worker budget of the step

    Time Complexity: O(m/stride) work per step
    """
    ti.loop_config(parallelize=threads)
    for j in range(m // stride):
        i = j * stride
        data[i + stride - 1] += data[i + offset]


@ti.kernel
def downsweep_step(data: ti.types.ndarray(), m: ti.i32, stride: ti.i32, offset: ti.i32, threads: ti.template()):
    """
    Execute one step of the down-sweep phase (distribute phase) of parallel scan.

    The left child receives the parent's prefix; the right child receives the
    parent's prefix plus the left subtree's sum.

    Args:
        data: Working array (modified in-place)
        m: Size of the working array (power of 2)
        stride: Subtree width at this level, 2^(d+1)
        offset: Position of the left child root inside the subtree, 2^d - 1
        threads: Worker budget of the step

    Time Complexity: O(m/stride) work per step
    """
    ti.loop_config(parallelize=threads)
    for j in range(m // stride):
        i = j * stride
        t = data[i + offset]
        data[i + offset] = data[i + stride - 1]
        data[i + stride - 1] += t


def _check_total(padded: np.ndarray, root: int):
    total = int(np.sum(padded, dtype=padded.dtype))
    if root != total:
        raise InvariantError(f"Up-sweep root holds {root}, expected the buffer total {total}")


def _check_exclusive(arr: np.ndarray, work: np.ndarray):
    expected = sequential_exclusive_sum(arr)
    bad = np.flatnonzero(work[:arr.size] != expected)
    if bad.size:
        i = int(bad[0])
        raise InvariantError(
            f"Down-sweep left {int(work[i])} at index {i}, expected exclusive prefix {int(expected[i])}"
        )


def _blelloch(arr: np.ndarray, observer, threads: int, validate: bool) -> WorkingBuffer:
    """
    Run pad / up-sweep / reset / down-sweep and return the working buffer.

    The returned buffer holds the exclusive scan in its first n cells; the
    caller owns and releases it.
    """
    n = arr.size
    L = num_levels(n)
    m = 1 << L

    work = WorkingBuffer(m)
    try:
        with WorkingBuffer.from_array(arr) as src:
            ut.copy_pad(src.arr, work.arr, n, m)

        # Up-sweep phase (build sum tree)
        for d in range(L):
            stride = 1 << (d + 1)
            offset = (1 << d) - 1
            upsweep_step(work.arr, m, stride, offset, threads)
            notify(observer, UPSWEEP, d, stride, work)

        total = work.item(m - 1)
        if validate:
            padded = np.zeros(m, dtype=arr.dtype)
            padded[:n] = arr
            _check_total(padded, total)

        # Root becomes the identity: the tree now describes an exclusive scan
        ut.set_value(work.arr, m - 1, 0)
        notify(observer, RESET, 0, m, work)

        # Down-sweep phase (traverse down tree)
        for d in range(L - 1, -1, -1):
            stride = 1 << (d + 1)
            offset = (1 << d) - 1
            downsweep_step(work.arr, m, stride, offset, threads)
            notify(observer, DOWNSWEEP, d, stride, work)

        if validate:
            _check_exclusive(arr, work.to_numpy())
    except BaseException:
        work.release()
        raise

    return work


def exclusive_scan(values, observer=None, workers=None, validate=False) -> np.ndarray:
    """
    Compute the parallel exclusive scan (result[i] = sum of values[:i]).

    Args:
        values: 1D integer sequence, possibly empty (never modified)
        observer: Optional callable receiving a ``Step`` after every barrier
        workers: Worker budget, defaults to the configured pool size
        validate: Check the tree invariants and raise ``InvariantError`` if broken

    Returns:
        np.ndarray: Exclusive prefix sums, same length as the input
    """
    arr = ut.as_elements(values)
    if arr.size == 0:
        return arr.copy()
    threads = ut.pool_threads(ut.resolve_workers(workers))

    with _blelloch(arr, observer, threads, validate) as work:
        return work.to_numpy()[:arr.size]


def inclusive_scan(values, observer=None, workers=None, validate=False) -> np.ndarray:
    """
    Compute parallel inclusive scan (prefix sum) using the work-efficient algorithm.

    Implements the Blelloch scan with O(n) work and O(log n) depth:
    1. Pad: copy into a power-of-2 buffer, zero-filled past the input
    2. Up-sweep: build the binary sum tree (parallel reduce)
    3. Reset: save the total, set the root to 0
    4. Down-sweep: distribute partial sums (exclusive scan)
    5. Convert to inclusive: result[i] = buf[i] + values[i], padding dropped

    Args:
        values: 1D integer sequence, possibly empty (never modified)
        observer: Optional callable receiving a ``Step`` after every barrier
        workers: Worker budget, defaults to the configured pool size
        validate: Check the tree invariants and raise ``InvariantError`` if broken

    Returns:
        np.ndarray: Inclusive prefix sums, same length as the input

    Example:
        Input:  [3, 1, 7, 0, 4, 1, 6, 3]
        Output: [3, 4, 11, 11, 15, 16, 22, 25]

    Space Complexity: O(next_power_of_2(n)) working space
    """
    arr = ut.as_elements(values)
    n = arr.size
    if n == 0:
        return arr.copy()
    threads = ut.pool_threads(ut.resolve_workers(workers))

    with _blelloch(arr, observer, threads, validate) as work, \
            WorkingBuffer.from_array(arr) as src, WorkingBuffer(n) as out:
        ut.add_arrays(work.arr, src.arr, out.arr, n)
        return out.to_numpy()
