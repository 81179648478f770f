"""
Taichi Working Buffer Module

Private, per-invocation working storage for the reduction and scan routines.
Each buffer wraps a freshly allocated Taichi ndarray: it is created by one
algorithm invocation, owned by it alone, and released when that invocation
ends. Buffers are never pooled or handed to another call, so no state can
leak between methods.

Supports 0D (scalar) and 1D buffers:
- 0D buffers: a single cell, used as an atomic accumulator
- 1D buffers: linear arrays, the flat binary-tree storage of every algorithm

"""

import taichi as ti
import numpy as np
from typing import Any, Optional

from .. import constants as cte
from .. import environment as env


class WorkingBuffer:
    """
    Per-invocation working buffer backed by a Taichi ndarray.

    The ndarray is passed directly to kernels taking ``ti.types.ndarray()``
    arguments. Kernels are compiled once per dtype and dimensionality, so a
    fresh buffer per call costs an allocation, not a recompilation.

    Attributes:
        id: Unique buffer identifier
        arr: Underlying Taichi ndarray (None once released)
        dtype: Taichi element type
        shape: Buffer dimensions (empty tuple () for 0D scalars)

    """

    _next_id = 0

    def __init__(self, shape, dtype: Optional[Any] = None):
        """
        Allocate a buffer of the given shape.

        Args:
            shape: int or tuple. () for a scalar cell, n or (n,) for n cells (n >= 1)
            dtype: Taichi element type, defaults to the configured integer dtype

        Raises:
            ValueError: For empty or multi-dimensional shapes

        """
        env.ensure_initialised()

        if isinstance(shape, int):
            shape = (shape,)
        else:
            shape = tuple(shape)

        if len(shape) > 1:
            raise ValueError(f"Unsupported buffer dimensionality: {len(shape)}D. Only 0D and 1D buffers supported.")
        if len(shape) == 1 and shape[0] < 1:
            raise ValueError(f"Buffer size must be positive, got {shape[0]}. Empty inputs are handled by the caller.")

        WorkingBuffer._next_id += 1
        self.id = WorkingBuffer._next_id
        self.dtype = cte.DTYPE if dtype is None else dtype
        self.shape = shape

        # Scalars live in a single-cell array, indexed with 0
        self.arr = ti.ndarray(self.dtype, shape=shape if shape else (1,))

    @classmethod
    def from_array(cls, values: np.ndarray) -> "WorkingBuffer":
        """
        Allocate a buffer holding a copy of ``values``.

        Args:
            values: Non-empty 1D numpy array of the configured dtype

        """
        buf = cls(len(values))
        buf.load(values)
        return buf

    def __len__(self):
        return self.shape[0] if self.shape else 1

    def fill(self, value):
        self.arr.fill(value)

    def load(self, values: np.ndarray):
        self.arr.from_numpy(np.ascontiguousarray(values, dtype=cte.NP_DTYPE))

    def to_numpy(self) -> np.ndarray:
        """Copy of the buffer contents as a numpy array."""
        return self.arr.to_numpy()

    def view(self) -> np.ndarray:
        """
        Read-only snapshot of the buffer.

        Handed to step observers: writing to it raises ``ValueError`` and can
        never reach the working storage.
        """
        snapshot = self.arr.to_numpy()
        snapshot.setflags(write=False)
        return snapshot

    def item(self, index: int = 0) -> int:
        """Single cell as a Python int (index 0 for scalar buffers)."""
        return int(self.arr[index])

    def release(self):
        """
        Drop the ndarray so its memory is returned to Taichi.

        The buffer cannot be used afterwards.
        """
        self.arr = None

    @property
    def released(self) -> bool:
        return self.arr is None

    def __enter__(self):
        """Context manager entry - return the buffer for use."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - release the storage."""
        self.release()
        return False

    def __repr__(self):
        state = "released" if self.released else "live"
        return f"WorkingBuffer(id={self.id}, dtype={self.dtype}, shape={self.shape}, {state})"


def scalar_buffer(value: int) -> WorkingBuffer:
    """
    Allocate a 0D buffer initialised to ``value``.

    Args:
        value: Initial content of the cell

    Returns:
        WorkingBuffer: Ready-to-use scalar buffer (context manager)

    """
    buf = WorkingBuffer(())
    buf.fill(value)
    return buf

