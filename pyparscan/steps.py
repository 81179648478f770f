"""
Synchronisation-step records handed to observers.

Tree algorithms advance level by level; after the barrier that closes a
level, an optional observer receives a ``Step`` describing it together with a
read-only snapshot of the working buffer. Observers are plain callables and
have no way to influence the algorithm: their return value is ignored and
the snapshot cannot be written to.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

REDUCE = "reduce"
UPSWEEP = "upsweep"
RESET = "reset"
DOWNSWEEP = "downsweep"


@dataclass(frozen=True)
class Step:
    """
    One synchronisation step.

    Attributes:
        phase: "reduce", "upsweep", "reset" or "downsweep"
        level: Tree level processed by the step (0 for the root reset)
        stride: Distance between the two cells combined at this level
        buffer: Read-only snapshot of the working buffer after the barrier
    """

    phase: str
    level: int
    stride: int
    buffer: np.ndarray


Observer = Callable[[Step], None]


def notify(observer: Optional[Observer], phase: str, level: int, stride: int, buf):
    """Snapshot ``buf`` and pass the step to ``observer``, if any."""
    if observer is None:
        return
    observer(Step(phase, level, stride, buf.view()))


def format_step(step: Step, limit: int) -> str:
    """One-line rendering of a step showing the first ``limit`` cells."""
    cells = " ".join(str(v) for v in step.buffer[:limit])
    if step.phase == RESET:
        return f"Set root to 0: {cells}"
    return f"{step.phase.capitalize()} level {step.level} (stride={step.stride}): {cells}"
