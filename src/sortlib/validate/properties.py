"""
Property helpers for validating sorting results.

These functions provide lightweight checks used by the tests, the demo and the
benchmark harness.

Public API (stable):
    first_violation_index(xs, compare) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(before, after, key) -> bool

Notes
-----
- Records must be hashable for the permutation helpers (they count records
  with `collections.Counter`).
- Stability cannot be inferred from values alone when equal keys are
  indistinguishable. `is_stable` therefore takes the original sequence and a
  `key` function: records sharing a key must appear in `after` in the same
  relative order as in `before`. Tag records with a tie-breaker (e.g.
  `(key, tag)` pairs) to make the check meaningful.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Hashable, List, Sequence

from sortlib.contracts import Comparator

__all__ = [
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
]


def first_violation_index(xs: Sequence[Any], compare: Comparator) -> int | None:
    """
    Return the first index i where compare(xs[i], xs[i+1]) > 0, or None if ordered.

    Useful for precise error messages:
        i = first_violation_index(out, natural_order)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if compare(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of records.
    """
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Hashable, int]:
    """
    Return a dict of record -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Hashable, int] = {}
    for k in set(ca.keys()) | set(cb.keys()):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def is_stable(before: Sequence[Any], after: Sequence[Any], key: Callable[[Any], Hashable]) -> bool:
    """
    Return True iff every group of records sharing `key` keeps its relative order.

    `after` is assumed to be a permutation of `before`.
    """
    groups_before: Dict[Hashable, List[Any]] = defaultdict(list)
    groups_after: Dict[Hashable, List[Any]] = defaultdict(list)
    for rec in before:
        groups_before[key(rec)].append(rec)
    for rec in after:
        groups_after[key(rec)].append(rec)
    return groups_before == groups_after
