"""
Quick sort with a first-element pivot.

In place, not stable. Average O(n log n) comparisons; already-sorted or
reverse-sorted input degrades to O(n^2) comparisons because the pivot is always
the first record of the range. The pivot policy is intentionally simple.

Recursion always descends into the smaller partition and loops over the larger
one, so the call-stack depth stays O(log n) even when the partitions are as
lopsided as they get. This changes the order in which partitions are visited,
not the partitions themselves.

Public API (stable):
    quick_sort(seq, compare) -> None
    partition(seq, lo, hi, compare) -> int
"""

from __future__ import annotations

from typing import Any, MutableSequence

from sortlib.contracts import Comparator

__all__ = ["quick_sort", "partition"]


def partition(seq: MutableSequence[Any], lo: int, hi: int, compare: Comparator) -> int:
    """
    Partition seq[lo:hi] around its first record and return the pivot's final index.

    After the call:
        compare(seq[k], pivot) <= 0 for lo <= k < boundary
        compare(seq[k], pivot) >  0 for boundary < k < hi

    Requires hi - lo >= 2.
    """
    pivot = seq[lo]
    left, right = lo, hi

    while True:
        # seek something on the left that is too large (or run into `right`)
        left += 1
        while left < right and compare(seq[left], pivot) <= 0:
            left += 1

        if left == right:
            # went too far; everything up to `right` belongs left of the pivot
            right -= 1
            break

        # seek something on the right that is too small; stops at the pivot itself
        right -= 1
        while compare(seq[right], pivot) > 0:
            right -= 1

        if left >= right:
            break

        seq[left], seq[right] = seq[right], seq[left]

    seq[lo], seq[right] = seq[right], seq[lo]
    return right


def quick_sort(seq: MutableSequence[Any], compare: Comparator) -> None:
    _quick_sort(seq, 0, len(seq), compare)


def _quick_sort(seq: MutableSequence[Any], lo: int, hi: int, compare: Comparator) -> None:
    while hi - lo > 1:
        boundary = partition(seq, lo, hi, compare)

        # [lo, boundary) and (boundary, hi)
        if boundary - lo < hi - boundary - 1:
            _quick_sort(seq, lo, boundary, compare)
            lo = boundary + 1
        else:
            _quick_sort(seq, boundary + 1, hi, compare)
            hi = boundary
