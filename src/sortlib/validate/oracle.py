"""
Oracle for sorting correctness.

We use Python's built-in `sorted()` as the ground-truth oracle:
- Correct total order for any comparator that defines one
- Deterministic and portable
- Stable, so it also pins down the expected order of equal records for the
  stable algorithms (insertion, bubble, merge, radix)

Public API (stable):
    oracle_sort(a, compare=natural_order) -> list
    equals_oracle(a, out, compare=natural_order) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Unstable algorithms are compared against the oracle on values only; for
  records whose equal keys are distinguishable use `is_permutation` plus
  `verify_sort` instead.
"""

from __future__ import annotations

import functools
from typing import Any, List, Sequence

from sortlib.contracts import Comparator, natural_order

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], compare: Comparator = natural_order) -> List[Any]:
    """
    Return the ground-truth sorted output for `a` under `compare`.

    Parameters
    ----------
    a : Sequence
        Input records. The oracle does not mutate `a`.
    compare : Comparator
        Ordering function; defaults to ascending natural order.

    Returns
    -------
    list
        A new list with the same records as `a`, stably sorted.
    """
    return sorted(a, key=functools.cmp_to_key(compare))


def equals_oracle(a: Sequence[Any], out: Sequence[Any], compare: Comparator = natural_order) -> bool:
    """True iff `out` is exactly equal to `oracle_sort(a, compare)`."""
    return list(out) == oracle_sort(a, compare)
