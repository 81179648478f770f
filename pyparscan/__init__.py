"""
PyParScan - parallel maximum reduction and prefix sum patterns on Taichi.

A small package demonstrating and validating the classic data-parallel
primitives over integer arrays, executed on the Taichi CPU backend. Every
parallel step is one kernel launch; the launch boundary is the barrier that
separates tree levels and algorithm phases.

Key Features:
- Binary-tree, sectioned, traced and atomic maximum reductions
- Work-efficient Blelloch scan (up-sweep / down-sweep) with power-of-2 padding
- Block scan (local scans + partition offsets)
- Sequential baselines and element-wise verification of every method
- Optional observers receiving read-only snapshots after every barrier
- Explicit worker budget on every entry point

Core Components:
- reduction: tree_max, sections_max, traced_max, atomic_max
- scan: inclusive_scan, exclusive_scan, block_scan
- baseline: sequential references
- verify: first_mismatch, verify_arrays, verify_scalars
- partition: PartitionPlan shared by the partitioned methods
- buffer: per-invocation working buffers
- harness / cli: timed comparison of all methods and its console front end
- constants / environment: configuration and Taichi initialisation

Basic Usage:
    import pyparscan as pps

    pps.environment.initialise(workers=4)

    values = [3, 7, 2, 9, 4, 1, 8, 5]
    pps.reduction.tree_max(values)            # 9
    pps.reduction.sections_max(values, 3)     # 9
    pps.scan.inclusive_scan(values)           # [3, 10, 12, 21, 25, 26, 34, 39]
    pps.scan.block_scan(values, workers=3)    # same

    pps.verify.verify_arrays(
        pps.baseline.sequential_prefix_sum(values),
        pps.scan.inclusive_scan(values),
    )                                          # True

Command line:
    python -m pyparscan --size 100 --workers 4

Reference: Blelloch, G. E. (1990). "Prefix sums and their applications"
"""

__version__ = "0.1.0"

# Import all submodules in alphabetical order
from . import baseline
from . import buffer
from . import constants
from . import environment
from . import errors
from . import harness
from . import partition
from . import reduction
from . import scan
from . import steps
from . import verify

from .errors import (
    ParScanError,
    EmptyInputError,
    InvalidSizeError,
    LengthMismatchError,
    InvariantError,
)

# Export all submodules
__all__ = [
    "baseline",
    "buffer",
    "constants",
    "environment",
    "errors",
    "harness",
    "partition",
    "reduction",
    "scan",
    "steps",
    "verify",
    "ParScanError",
    "EmptyInputError",
    "InvalidSizeError",
    "LengthMismatchError",
    "InvariantError",
]
