"""
Static partitioning of an index range across a fixed number of workers.

A plan splits ``[0, n)`` into ``workers`` contiguous, non-overlapping,
order-preserving ranges of ``ceil(n / workers)`` indices each; the last
non-empty range may be shorter and any trailing ranges are empty when
``workers`` exceeds what the chunking needs (e.g. ``workers > n``).

The same arithmetic is available inside kernels through ``partition_start``
and ``partition_end`` so that Python-side plans and kernel-side workers always agree.
"""

from dataclasses import dataclass
from typing import List, Tuple

import taichi as ti


@ti.func
def partition_start(w: ti.i32, n: ti.i32, chunk: ti.i32) -> ti.i32:
    """
    First index of partition ``w`` (kernel side).

    Args:
        w: Partition index in [0, workers)
        n: Number of elements
        chunk: Chunk size, ceil(n / workers)
    """
    return ti.min(w * chunk, n)


@ti.func
def partition_end(w: ti.i32, n: ti.i32, chunk: ti.i32) -> ti.i32:
    """One past the last index of partition ``w``; equals the start when empty."""
    return ti.min(ti.min(w * chunk, n) + chunk, n)


@dataclass(frozen=True)
class PartitionPlan:
    """
    Partition of ``n`` elements over ``workers`` workers.

    Attributes:
        n: Number of elements (>= 0)
        workers: Number of partitions (>= 1)
    """

    n: int
    workers: int

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")
        if self.n < 0:
            raise ValueError(f"Element count cannot be negative, got {self.n}")

    @property
    def chunk_size(self) -> int:
        return -(-self.n // self.workers)

    def bounds(self, k: int) -> Tuple[int, int]:
        """Half-open range ``[start, end)`` of partition ``k``."""
        if not 0 <= k < self.workers:
            raise IndexError(f"Partition {k} out of range for {self.workers} workers")
        start = min(k * self.chunk_size, self.n)
        end = min(start + self.chunk_size, self.n)
        return start, end

    def ranges(self) -> List[Tuple[int, int]]:
        return [self.bounds(k) for k in range(self.workers)]

    def sizes(self) -> List[int]:
        return [end - start for start, end in self.ranges()]

    def __len__(self):
        return self.workers
