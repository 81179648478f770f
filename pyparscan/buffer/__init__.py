"""
Working buffer management for PyParScan.

Every reduction and scan copies (or pads) its input into private working
storage before touching it. This submodule provides that storage as a thin
wrapper over Taichi ndarrays with an explicit, per-invocation lifecycle.

Core Classes:
- WorkingBuffer: Fresh Taichi ndarray owned by exactly one algorithm invocation

Helper Functions:
- scalar_buffer: Single-cell buffer initialised to a value (atomic accumulators)

Usage Patterns:
    import numpy as np
    from pyparscan.buffer import WorkingBuffer

    values = np.array([3, 7, 2, 9], dtype=np.int32)

    # Recommended: context manager releases the storage on exit
    with WorkingBuffer.from_array(values) as buf:
        some_kernel(buf.arr, len(buf))
        snapshot = buf.view()   # read-only numpy copy

Buffers are never recycled: a later call always receives new storage, so
no method can observe another method's intermediate state.
"""

from .buffer import WorkingBuffer, scalar_buffer

__all__ = [
    "WorkingBuffer",
    "scalar_buffer",
]
