"""
Parallel Tree Reduction

In-place binary-tree maximum over a working copy of the input.

Algorithm Details:
    - Level d combines cells 2^(d+1) apart: buf[i] = max(buf[i], buf[i + 2^d])
      for every i multiple of 2^(d+1) with i + 2^d < n
    - Pairs of one level are disjoint, so a level is a single parallel step
    - A kernel launch per level; the launch boundary is the barrier
    - ceil(log2 n) levels, no padding required

Mathematical Operation:
    Given [a0, a1, ..., an-1], buf[0] ends up holding max(a0, ..., an-1)

"""
import taichi as ti

from .. import util_taichi as ut
from ..buffer import WorkingBuffer
from ..errors import EmptyInputError


@ti.kernel
def tree_max_step(data: ti.types.ndarray(), n: ti.i32, stride: ti.i32, threads: ti.template()):
    """
    Execute one level of the tree reduction.

    Each iteration owns the pair (i, i + stride) with i a multiple of
    2 * stride; no two iterations touch the same cell.

    Args:
        data: Working buffer (modified in-place)
        n: Number of valid cells
        stride: Distance between the two combined cells
        threads: Worker budget of the step

    Time Complexity: O(n/stride) work per step
    """
    step = 2 * stride
    ti.loop_config(parallelize=threads)
    for j in range((n + step - 1) // step):
        i = j * step
        if i + stride < n:
            data[i] = ti.max(data[i], data[i + stride])


def num_levels(n: int) -> int:
    """
    Number of tree levels over n cells, ceil(log2 n) (0 when n <= 1).
    """
    return (n - 1).bit_length() if n > 1 else 0


def tree_max(values, workers=None) -> int:
    """
    Maximum of an array by parallel binary-tree reduction.

    Args:
        values: Non-empty 1D integer sequence (never modified)
        workers: Worker budget, defaults to the configured pool size

    Returns:
        int: The maximum element

    Raises:
        EmptyInputError: If the array is empty

    Example:
        tree_max([3, 7, 2, 9, 4, 1, 8, 5])  # 9 after 3 levels
    """
    arr = ut.as_elements(values)
    n = arr.size
    if n == 0:
        raise EmptyInputError("Maximum of an empty array is undefined")
    threads = ut.pool_threads(ut.resolve_workers(workers))

    with WorkingBuffer.from_array(arr) as buf:
        stride = 1
        while stride < n:
            tree_max_step(buf.arr, n, stride, threads)
            stride *= 2
        return buf.item(0)
