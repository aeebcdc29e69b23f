"""
Shell sort with the h = 3h + 1 gap sequence (..., 121, 40, 13, 4, 1).

In place, not stable. Roughly O(n^1.5) comparisons for this gap sequence.
"""

from __future__ import annotations

from typing import Any, Iterator, MutableSequence

from sortlib.contracts import Comparator

__all__ = ["shell_sort", "gap_sequence"]


def gap_sequence(n: int) -> Iterator[int]:
    """
    Yield the gaps used for a sequence of `n` records, largest first.

    The starting point is the first term of 1, 4, 13, 40, ... exceeding `n`;
    every pass divides it by 3 until it reaches 0. The last gap yielded is
    always 1 when n >= 1.
    """
    gap = 1
    while gap <= n:
        gap = gap * 3 + 1

    gap //= 3
    while gap > 0:
        yield gap
        gap //= 3


def shell_sort(seq: MutableSequence[Any], compare: Comparator) -> None:
    n = len(seq)

    for gap in gap_sequence(n):
        # insertion sort over records `gap` apart
        for i in range(gap, n):
            held = seq[i]
            j = i
            while j >= gap and compare(held, seq[j - gap]) < 0:
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = held
