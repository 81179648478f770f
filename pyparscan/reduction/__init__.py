"""
Parallel maximum reductions.

All routines take a non-empty 1D integer sequence and an optional worker
budget, copy the input into a private working buffer and return the maximum
as a Python int. An empty input raises ``EmptyInputError``.

Available Algorithms:
    - tree_max: In-place binary-tree reduction, one barrier per level
    - sections_max: Static partitioning, local maxima folded sequentially
    - traced_max: Tree reduction exposing each level to an observer
    - atomic_max: Single shared cell updated with atomic max

Example Usage:
    ```python
    from pyparscan.reduction import tree_max, sections_max, traced_max

    values = [3, 7, 2, 9, 4, 1, 8, 5]
    tree_max(values)                 # 9
    sections_max(values, workers=3)  # 9
    traced_max(values, observer=print).levels  # 3
    ```
"""

from .tree import tree_max, num_levels
from .sections import sections_max
from .trace import traced_max, count_levels, TracedMax
from .atomic import atomic_max

__all__ = [
    'tree_max',
    'num_levels',
    'sections_max',
    'traced_max',
    'count_levels',
    'TracedMax',
    'atomic_max',
]
