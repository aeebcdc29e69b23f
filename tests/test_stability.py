"""
Stability tests.

Records are (key, tag) pairs where the tag is the original position; the
comparator only looks at the key, so equal-key records are distinguishable.
"""

from __future__ import annotations

from typing import List, Tuple

import pytest
from hypothesis import given, settings, strategies as st

from sortlib.algorithms import ALGORITHMS, COMPARISON_SORTS, STABLE_SORTS
from sortlib.algorithms.radix import radix_sort
from sortlib.contracts import natural_order
from sortlib.validate import is_permutation, is_stable, oracle_sort, verify_sort

Pair = Tuple[int, int]

STABLE_COMPARISON = sorted(STABLE_SORTS & COMPARISON_SORTS)
UNSTABLE_COMPARISON = sorted(COMPARISON_SORTS - STABLE_SORTS)


def by_key(x: Pair, y: Pair) -> int:
    return natural_order(x[0], y[0])


def _tagged(keys: List[int]) -> List[Pair]:
    return [(k, i) for i, k in enumerate(keys)]


def test_registry_stability_flags() -> None:
    assert STABLE_SORTS == {"insertion", "bubble", "merge", "radix"}
    assert STABLE_SORTS <= set(ALGORITHMS)


@pytest.mark.parametrize("name", STABLE_COMPARISON)
@settings(deadline=None, max_examples=50)
@given(keys=st.lists(st.integers(min_value=0, max_value=5), min_size=0, max_size=120))
def test_stable_sorts_keep_equal_keys_in_order(name: str, keys: List[int]) -> None:
    records = _tagged(keys)
    out = list(records)
    ALGORITHMS[name](out, by_key)

    # the stable oracle pins down the exact expected output
    assert out == oracle_sort(records, by_key)
    assert is_stable(records, out, key=lambda r: r[0])


@pytest.mark.parametrize("name", UNSTABLE_COMPARISON)
@settings(deadline=None, max_examples=50)
@given(keys=st.lists(st.integers(min_value=0, max_value=5), min_size=0, max_size=120))
def test_unstable_sorts_still_order_by_key(name: str, keys: List[int]) -> None:
    records = _tagged(keys)
    out = list(records)
    ALGORITHMS[name](out, by_key)

    assert verify_sort(out, by_key)
    assert is_permutation(records, out)


@settings(deadline=None, max_examples=50)
@given(keys=st.lists(st.integers(min_value=0, max_value=15), min_size=0, max_size=200))
def test_radix_pass_is_stable(keys: List[int]) -> None:
    records = _tagged(keys)
    out = list(records)
    radix_sort(out, 16, lambda r: r[0])

    assert out == oracle_sort(records, by_key)
    assert is_stable(records, out, key=lambda r: r[0])


def test_merge_sort_tie_goes_to_low_half() -> None:
    # Equal keys split across the halves of every merge step.
    records = [(1, "a"), (0, "b"), (1, "c"), (0, "d"), (1, "e")]
    out = list(records)
    ALGORITHMS["merge"](out, by_key)
    assert out == [(0, "b"), (0, "d"), (1, "a"), (1, "c"), (1, "e")]


def test_is_stable_detects_reordering() -> None:
    before = [(1, "a"), (1, "b"), (0, "c")]
    assert is_stable(before, [(0, "c"), (1, "a"), (1, "b")], key=lambda r: r[0])
    assert not is_stable(before, [(0, "c"), (1, "b"), (1, "a")], key=lambda r: r[0])
