"""
Result verification against a reference.

Compares a method's output to the sequential baseline element by element and
reports the first disagreement. A mismatch is reported, never raised: one
wrong method must not stop the others from being checked.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from .errors import LengthMismatchError


@dataclass(frozen=True)
class Mismatch:
    """First position where two arrays disagree."""

    index: int
    expected: int
    actual: int

    def __str__(self):
        return f"Mismatch at index {self.index}: {self.expected} != {self.actual}"


def first_mismatch(expected, actual) -> Optional[Mismatch]:
    """
    Locate the first differing element.

    Args:
        expected: Reference array
        actual: Array under test

    Returns:
        Mismatch or None when the arrays are equal

    Raises:
        LengthMismatchError: If the arrays have different lengths
    """
    a = np.asarray(expected)
    b = np.asarray(actual)
    if a.shape != b.shape:
        raise LengthMismatchError(f"Cannot compare arrays of lengths {a.size} and {b.size}")
    bad = np.flatnonzero(a != b)
    if bad.size == 0:
        return None
    i = int(bad[0])
    return Mismatch(i, int(a[i]), int(b[i]))


def verify_arrays(expected, actual, report: Optional[Callable[[str], None]] = print) -> bool:
    """
    Element-wise equality of two arrays.

    Arrays of different lengths are simply unequal (nothing is reported).
    On a mismatch, ``report`` receives a one-line description of the first
    differing index; pass None to stay silent.

    Returns:
        bool: True when both arrays hold the same values
    """
    try:
        mismatch = first_mismatch(expected, actual)
    except LengthMismatchError:
        return False
    if mismatch is None:
        return True
    if report is not None:
        report(str(mismatch))
    return False


def verify_scalars(results: Dict[str, int], expected: int) -> List[str]:
    """
    Names of the methods whose scalar result differs from ``expected``.
    """
    return [name for name, value in results.items() if value != expected]
