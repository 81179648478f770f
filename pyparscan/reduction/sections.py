"""
Sectioned (chunked) maximum reduction.

Each worker scans one contiguous partition of the input with a private
accumulator and writes its local maximum into its own slot; a short
sequential fold combines the slots. Workers never share a mutable cell, so
the step is race-free by construction rather than by locking.
"""
import taichi as ti

from .. import constants as cte
from .. import util_taichi as ut
from ..buffer import WorkingBuffer
from ..errors import EmptyInputError
from ..partition import PartitionPlan, partition_start, partition_end


@ti.kernel
def partition_max(src: ti.types.ndarray(), partial: ti.types.ndarray(), n: ti.i32, chunk: ti.i32, workers: ti.i32):
    """
    Local maximum of every partition.

    Args:
        src: Working copy of the input
        partial: One slot per partition, pre-filled with the max identity
        n: Number of elements
        chunk: Partition size, ceil(n / workers)
        workers: Number of partitions

    Empty partitions leave their slot at the identity.
    """
    for w in range(workers):
        start = partition_start(w, n, chunk)
        end = partition_end(w, n, chunk)
        if start < end:
            acc = src[start]
            for i in range(start + 1, end):
                acc = ti.max(acc, src[i])
            partial[w] = acc


def sections_max(values, workers=None) -> int:
    """
    Maximum of an array by static partitioning over ``workers`` workers.

    Args:
        values: Non-empty 1D integer sequence (never modified)
        workers: Number of partitions, defaults to the configured pool size

    Raises:
        EmptyInputError: If the array is empty
    """
    arr = ut.as_elements(values)
    n = arr.size
    if n == 0:
        raise EmptyInputError("Maximum of an empty array is undefined")
    plan = PartitionPlan(n, ut.resolve_workers(workers))

    with WorkingBuffer.from_array(arr) as buf, WorkingBuffer(plan.workers) as partial:
        partial.fill(cte.max_identity())
        partition_max(buf.arr, partial.arr, n, plan.chunk_size, plan.workers)

        # Sequential fold, after the barrier
        result = cte.max_identity()
        for local in partial.to_numpy():
            result = max(result, int(local))
        return result
