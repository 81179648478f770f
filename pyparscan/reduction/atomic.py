"""
Maximum through an atomic reduction.

Every element is folded into one shared cell with ``ti.atomic_max``; the
runtime serialises the conflicting updates. The simplest parallel maximum,
kept as a comparison point for the tree and sectioned variants.
"""
import taichi as ti

from .. import constants as cte
from .. import util_taichi as ut
from ..buffer import WorkingBuffer, scalar_buffer
from ..errors import EmptyInputError


@ti.kernel
def atomic_max_kernel(src: ti.types.ndarray(), result: ti.types.ndarray(), n: ti.i32, threads: ti.template()):
    ti.loop_config(parallelize=threads)
    for i in range(n):
        ti.atomic_max(result[0], src[i])


def atomic_max(values, workers=None) -> int:
    """
    Maximum of a non-empty array using atomic updates of a single cell.

    Raises:
        EmptyInputError: If the array is empty
    """
    arr = ut.as_elements(values)
    n = arr.size
    if n == 0:
        raise EmptyInputError("Maximum of an empty array is undefined")
    threads = ut.pool_threads(ut.resolve_workers(workers))

    with WorkingBuffer.from_array(arr) as buf, scalar_buffer(cte.max_identity()) as result:
        atomic_max_kernel(buf.arr, result.arr, n, threads)
        return result.item()
