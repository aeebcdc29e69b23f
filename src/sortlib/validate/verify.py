"""
Post-condition check for every sort in this package.

Public API (stable):
    verify_sort(seq, compare) -> bool
"""

from __future__ import annotations

from typing import Any, Sequence

from sortlib.contracts import Comparator

__all__ = ["verify_sort"]


def verify_sort(seq: Sequence[Any], compare: Comparator) -> bool:
    """
    Return True iff compare(seq[i], seq[i+1]) <= 0 for every adjacent pair.

    Stops at the first out-of-order pair. Never mutates `seq`. Sequences with
    fewer than two records are trivially sorted.
    """
    return all(compare(seq[i], seq[i + 1]) <= 0 for i in range(len(seq) - 1))
