"""
Tree reduction with explicit synchronisation steps.

Same reduction as ``tree_max`` but driven by an explicit level count, with the
working buffer exposed to an observer after every barrier. Meant for
diagnostics and teaching: it shows how the maximum climbs to cell 0.
"""
from dataclasses import dataclass

from .. import util_taichi as ut
from ..buffer import WorkingBuffer
from ..errors import EmptyInputError
from ..steps import REDUCE, notify
from .tree import tree_max_step


@dataclass(frozen=True)
class TracedMax:
    """Result of a traced reduction: the maximum and the number of barrier steps."""

    value: int
    levels: int


def count_levels(n: int) -> int:
    """
    Synchronisation steps needed to reduce n cells.

    Halves the number of live cells (rounding up) until one remains.
    """
    levels = 0
    remaining = n
    while remaining > 1:
        remaining = (remaining + 1) // 2
        levels += 1
    return levels


def traced_max(values, observer=None, workers=None) -> TracedMax:
    """
    Tree maximum reporting every synchronisation step.

    Args:
        values: Non-empty 1D integer sequence (never modified)
        observer: Optional callable receiving a ``Step`` after each level
        workers: Worker budget, defaults to the configured pool size

    Returns:
        TracedMax: maximum and level count

    Raises:
        EmptyInputError: If the array is empty
    """
    arr = ut.as_elements(values)
    n = arr.size
    if n == 0:
        raise EmptyInputError("Maximum of an empty array is undefined")
    threads = ut.pool_threads(ut.resolve_workers(workers))
    levels = count_levels(n)

    with WorkingBuffer.from_array(arr) as buf:
        for level in range(levels):
            stride = 1 << level
            tree_max_step(buf.arr, n, stride, threads)
            notify(observer, REDUCE, level, stride, buf)
        return TracedMax(buf.item(0), levels)
