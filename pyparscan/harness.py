"""
Method comparison harness.

Runs every maximum (or scan) method on one input, times each of them and
verifies each result against the sequential baseline. Pure computation: the
console rendering lives in ``pyparscan.cli``.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from . import baseline
from .reduction import atomic_max, tree_max, sections_max, traced_max
from .scan import inclusive_scan, block_scan
from .util_taichi import as_elements, resolve_workers
from .verify import verify_arrays, verify_scalars


@dataclass
class MethodResult:
    """
    Outcome of one method.

    Attributes:
        name: Human readable method name
        value: Scalar maximum or scan array
        elapsed_ms: Wall-clock duration of the call
        passed: Agreement with the baseline
        mismatch: Description of the first disagreement, if any
        levels: Synchronisation steps reported by traced methods
    """

    name: str
    value: Any
    elapsed_ms: float
    passed: bool = True
    mismatch: Optional[str] = None
    levels: Optional[int] = None


@dataclass
class Report:
    """Baseline plus the verified results of every parallel method."""

    workers: int
    baseline: MethodResult
    methods: List[MethodResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(m.passed for m in self.methods)

    @property
    def failures(self) -> List[str]:
        return [m.name for m in self.methods if not m.passed]


def _timed(name: str, fn: Callable[[], Any]) -> MethodResult:
    start = time.perf_counter()
    value = fn()
    elapsed = (time.perf_counter() - start) * 1000
    return MethodResult(name, value, elapsed)


def run_max_methods(values, workers=None, observer=None) -> Report:
    """
    Compare every parallel maximum method with the sequential maximum.

    Args:
        values: Non-empty 1D integer sequence
        workers: Worker budget passed to every method
        observer: Step observer handed to the traced reduction

    Raises:
        EmptyInputError: If the array is empty
    """
    arr = as_elements(values)
    workers = resolve_workers(workers)

    methods = [
        _timed("Atomic reduction", lambda: atomic_max(arr, workers)),
        _timed("Tree reduction", lambda: tree_max(arr, workers)),
        _timed("Sectioned reduction", lambda: sections_max(arr, workers)),
    ]
    traced = _timed("Explicit barriers", lambda: traced_max(arr, observer, workers))
    traced.levels = traced.value.levels
    traced.value = traced.value.value
    methods.append(traced)

    reference = _timed("Sequential", lambda: baseline.sequential_max(arr))

    wrong = set(verify_scalars({m.name: m.value for m in methods}, reference.value))
    for m in methods:
        if m.name in wrong:
            m.passed = False
            m.mismatch = f"{m.value} != {reference.value}"
    return Report(workers, reference, methods)


def run_scan_methods(values, workers=None, observer=None) -> Report:
    """
    Compare every parallel scan method with the sequential prefix sum.

    Args:
        values: 1D integer sequence
        workers: Worker budget passed to every method
        observer: Step observer handed to the Blelloch scan
    """
    arr = as_elements(values)
    workers = resolve_workers(workers)

    reference = _timed("Sequential", lambda: baseline.sequential_prefix_sum(arr))
    methods = [
        _timed("Blelloch scan", lambda: inclusive_scan(arr, observer, workers)),
        _timed("Block scan", lambda: block_scan(arr, workers)),
    ]

    for m in methods:
        messages = []
        m.passed = verify_arrays(reference.value, m.value, report=messages.append)
        if not m.passed:
            m.mismatch = messages[0] if messages else "length mismatch"
    return Report(workers, reference, methods)
