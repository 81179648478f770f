"""
Parallel prefix sums (scans).

All routines accept any 1D integer sequence, including an empty one, and
return a new numpy array of the same length. The input is never modified.

Available Algorithms:
    - inclusive_scan: Work-efficient Blelloch scan (up-sweep + down-sweep)
    - exclusive_scan: The Blelloch scan before the inclusive conversion
    - block_scan: Per-partition scans joined by a scan of partition totals

Example Usage:
    ```python
    from pyparscan.scan import inclusive_scan, block_scan

    inclusive_scan([5, 1, 4])          # array([ 5,  6, 10]) padded to 4 internally
    block_scan([5, 1, 4], workers=2)   # array([ 5,  6, 10])

    # Watch the tree being built and distributed
    inclusive_scan([3, 1, 7, 0], observer=print)
    ```
"""

from .blelloch import inclusive_scan, exclusive_scan
from .block import block_scan

__all__ = [
    'inclusive_scan',
    'exclusive_scan',
    'block_scan',
]
