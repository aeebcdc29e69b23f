"""
Heap sort over an implicit binary max-heap.

If seq[k] is a parent, its children are seq[2k + 1] and seq[2k + 2].
In place, not stable, O(n log n) comparisons in the worst case.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from sortlib.contracts import Comparator

__all__ = ["heap_sort", "sift_down"]


def sift_down(seq: MutableSequence[Any], root: int, last_child: int, compare: Comparator) -> None:
    """
    Restore the max-heap property on the path starting at `root`.

    Only indices <= `last_child` are part of the heap. The right child is
    preferred over the left only when it compares strictly greater; sifting
    stops once the larger child is not greater than its parent.
    """
    child = 2 * root + 1
    while child <= last_child:
        if child < last_child and compare(seq[child], seq[child + 1]) < 0:
            child += 1

        if compare(seq[child], seq[root]) <= 0:
            break

        seq[root], seq[child] = seq[child], seq[root]
        root = child
        child = 2 * root + 1


def heap_sort(seq: MutableSequence[Any], compare: Comparator) -> None:
    n = len(seq)
    if n <= 1:
        return

    # Bottom-up heap construction.
    for i in range(n // 2, -1, -1):
        sift_down(seq, i, n - 1, compare)

    # Pull the maximum off the top and park it just past the live heap.
    while n > 1:
        seq[0], seq[n - 1] = seq[n - 1], seq[0]
        n -= 1
        sift_down(seq, 0, n - 1, compare)
