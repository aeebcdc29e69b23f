"""
Insertion sort.

In place, stable. O(n^2) comparisons and moves in the worst case, O(n) on
already-sorted input. The only scratch storage is the held record.

Public API (stable):
    insertion_sort(seq, compare) -> None
"""

from __future__ import annotations

from typing import Any, MutableSequence

from sortlib.contracts import Comparator

__all__ = ["insertion_sort"]


def insertion_sort(seq: MutableSequence[Any], compare: Comparator) -> None:
    """
    Sort `seq` in place by inserting each record into the sorted prefix before it.

    Parameters
    ----------
    seq : MutableSequence
        Records to sort. Mutated in place.
    compare : Comparator
        compare(a, b) < 0 iff a precedes b.
    """
    for i in range(1, len(seq)):
        held = seq[i]
        j = i

        # Shift larger records right until the held record fits.
        # Strict `< 0` keeps equal records in their original order.
        while j > 0 and compare(held, seq[j - 1]) < 0:
            seq[j] = seq[j - 1]
            j -= 1

        seq[j] = held
