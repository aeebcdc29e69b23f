"""
Top-down merge sort.

Stable, not in place: every merge step allocates an auxiliary buffer sized to
the range being merged, fills it, and copies it back over the range.

Conventions:
- A range of n records splits at pivot = (n - 1) // 2 into a low half
  [0, pivot] and a high half (pivot, n). The low half is never smaller.
- On ties the low-half record is taken first; the high-half record is taken
  only when it compares strictly less. This is what makes the sort stable.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from sortlib.algorithms._buffers import allocate
from sortlib.contracts import Comparator

__all__ = ["merge_sort"]


def merge_sort(seq: MutableSequence[Any], compare: Comparator) -> None:
    """
    Sort `seq` in place (from the caller's point of view), stably.

    Raises
    ------
    BufferAllocationError
        If a merge buffer cannot be allocated. Sub-ranges merged before the
        failure stay sorted; `seq` is still a permutation of its input.
    """
    _merge_sort(seq, 0, len(seq), compare)


def _merge_sort(seq: MutableSequence[Any], lo: int, hi: int, compare: Comparator) -> None:
    n = hi - lo
    if n <= 1:
        return

    # last index of the low half
    pivot = lo + (n - 1) // 2

    _merge_sort(seq, lo, pivot + 1, compare)
    _merge_sort(seq, pivot + 1, hi, compare)

    merged = allocate("merge_sort", n)
    low, high, out = lo, pivot + 1, 0

    while low <= pivot and high < hi:
        if compare(seq[high], seq[low]) < 0:
            merged[out] = seq[high]
            high += 1
        else:
            merged[out] = seq[low]
            low += 1
        out += 1

    # one of the halves ran out; copy the rest of the other one
    while low <= pivot:
        merged[out] = seq[low]
        low += 1
        out += 1
    while high < hi:
        merged[out] = seq[high]
        high += 1
        out += 1

    seq[lo:hi] = merged
