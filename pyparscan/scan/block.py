"""
Block-based (divide and conquer) parallel prefix sum.

Three phases, each one kernel launch closed by the launch barrier:

1. Local scan: every partition computes the inclusive scan of its own range
   and records its total (0 for an empty partition).
2. Offsets: a serialised exclusive scan over the partition totals.
3. Broadcast: every partition adds its offset to the values it wrote.

Work is O(n) with only ``workers`` sequential steps in phase 2, which makes
this the practical choice when the worker count is small compared to n.
"""
import taichi as ti
import numpy as np

from .. import util_taichi as ut
from ..buffer import WorkingBuffer
from ..partition import PartitionPlan, partition_start, partition_end


@ti.kernel
def local_scan(src: ti.types.ndarray(), out: ti.types.ndarray(), totals: ti.types.ndarray(),
               n: ti.i32, chunk: ti.i32, workers: ti.i32):
    """
    Phase 1: inclusive scan inside every partition.

    Args:
        src: Input elements
        out: Result buffer, written positionally
        totals: One slot per partition, receives the partition sum
        n: Number of elements
        chunk: Partition size, ceil(n / workers)
        workers: Number of partitions
    """
    for w in range(workers):
        start = partition_start(w, n, chunk)
        end = partition_end(w, n, chunk)
        totals[w] = 0
        if start < end:
            acc = src[start]
            out[start] = acc
            for i in range(start + 1, end):
                acc += src[i]
                out[i] = acc
            totals[w] = acc


@ti.kernel
def partition_offsets(totals: ti.types.ndarray(), offsets: ti.types.ndarray(), workers: ti.i32):
    """
    Phase 2: exclusive scan of the partition totals, run by a single worker.
    """
    ti.loop_config(serialize=True)
    for w in range(workers):
        if w == 0:
            offsets[w] = 0
        else:
            offsets[w] = offsets[w - 1] + totals[w - 1]


@ti.kernel
def add_offsets(out: ti.types.ndarray(), offsets: ti.types.ndarray(), n: ti.i32, chunk: ti.i32, workers: ti.i32):
    """Phase 3: add each partition's offset to every value it wrote."""
    for w in range(workers):
        start = partition_start(w, n, chunk)
        end = partition_end(w, n, chunk)
        for i in range(start, end):
            out[i] += offsets[w]


def block_scan(values, workers=None) -> np.ndarray:
    """
    Inclusive prefix sum by per-partition scans and partition offsets.

    Args:
        values: 1D integer sequence, possibly empty (never modified)
        workers: Number of partitions, defaults to the configured pool size

    Returns:
        np.ndarray: Inclusive prefix sums, same length as the input
    """
    arr = ut.as_elements(values)
    n = arr.size
    plan = PartitionPlan(n, ut.resolve_workers(workers))
    if n == 0:
        return arr.copy()

    chunk = plan.chunk_size
    with WorkingBuffer.from_array(arr) as src, WorkingBuffer(n) as out, \
            WorkingBuffer(plan.workers) as totals, WorkingBuffer(plan.workers) as offsets:
        local_scan(src.arr, out.arr, totals.arr, n, chunk, plan.workers)
        partition_offsets(totals.arr, offsets.arr, plan.workers)
        add_offsets(out.arr, offsets.arr, n, chunk, plan.workers)
        return out.to_numpy()
