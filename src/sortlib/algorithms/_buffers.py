"""
Scratch-buffer allocation for merge_sort and radix_sort.

Buffers are plain lists owned by the calling frame; they are released when the
frame returns or raises. A failed allocation surfaces as BufferAllocationError
instead of leaving the caller's sequence half-written.
"""

from __future__ import annotations

from typing import Any, List

from sortlib.errors import BufferAllocationError

__all__ = ["allocate", "allocate_table"]


def allocate(algorithm: str, size: int) -> List[Any]:
    """Return a record buffer with `size` empty slots."""
    try:
        return [None] * size
    except MemoryError as e:
        raise BufferAllocationError(algorithm, size) from e


def allocate_table(algorithm: str, size: int) -> List[int]:
    """Return a zeroed integer table (counts / offsets) with `size` entries."""
    try:
        return [0] * size
    except MemoryError as e:
        raise BufferAllocationError(algorithm, size) from e
