"""
Exceptions raised by the sorting engine.

Hierarchy:
    SortError
    ├── BufferAllocationError   (also a MemoryError)
    └── KeyRangeError           (also a ValueError)

Conventions:
- Degenerate input (0 or 1 records) is never an error.
- Exceptions raised by a caller's comparator or key function propagate unchanged;
  they are not wrapped in SortError.
"""

from __future__ import annotations

__all__ = ["SortError", "BufferAllocationError", "KeyRangeError"]


class SortError(Exception):
    """Base class for failures detected by the sorting engine."""


class BufferAllocationError(SortError, MemoryError):
    """A scratch or temporary buffer could not be allocated."""

    def __init__(self, algorithm: str, size: int) -> None:
        super().__init__(f"{algorithm}: unable to allocate a buffer of {size} slots")
        self.algorithm = algorithm
        self.size = size


class KeyRangeError(SortError, ValueError):
    """A radix key function returned a value outside [0, num_keys)."""

    def __init__(self, key: int, num_keys: int, index: int) -> None:
        super().__init__(
            f"key {key!r} for record at index {index} is outside [0, {num_keys})"
        )
        self.key = key
        self.num_keys = num_keys
        self.index = index
