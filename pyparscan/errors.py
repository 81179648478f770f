"""
Exception types raised by PyParScan.

Every error derives from ``ParScanError`` and from the builtin exception a
caller would naturally catch for it (``ValueError`` for bad inputs,
``RuntimeError`` for broken algorithmic invariants).
"""


class ParScanError(Exception):
    """Base class of all PyParScan errors."""


class EmptyInputError(ParScanError, ValueError):
    """A maximum was requested over an empty array (max has no identity)."""


class InvalidSizeError(ParScanError, ValueError):
    """A requested array size is not a positive integer."""


class LengthMismatchError(ParScanError, ValueError):
    """Two arrays compared element-wise have different lengths."""


class InvariantError(ParScanError, RuntimeError):
    """A scan's intermediate buffer broke the tree invariant it must hold."""
