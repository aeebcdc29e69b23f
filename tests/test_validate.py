"""Tests for verify_sort, the oracle and the property helpers."""

from __future__ import annotations

import pytest

from sortlib.contracts import CallCounter, natural_order, reverse_order
from sortlib.validate import (
    ORACLE_NAME,
    equals_oracle,
    first_violation_index,
    is_permutation,
    oracle_sort,
    permutation_counter_diff,
    verify_sort,
)


@pytest.mark.parametrize(
    "xs,expected",
    [
        ([], True),
        ([7], True),
        ([1, 1, 1], True),
        ([1, 2, 2, 3], True),
        ([2, 1], False),
        ([1, 3, 2, 4], False),
    ],
)
def test_verify_sort(xs, expected: bool) -> None:
    before = list(xs)
    assert verify_sort(xs, natural_order) is expected
    assert xs == before


def test_verify_sort_respects_comparator() -> None:
    assert verify_sort([3, 2, 2, 1], reverse_order)
    assert not verify_sort([1, 2], reverse_order)


def test_verify_sort_stops_at_first_violation() -> None:
    counter = CallCounter()
    assert not verify_sort([2, 1, 0, -1, -2], counter.wrap(natural_order))
    assert counter.calls == 1


def test_first_violation_index() -> None:
    assert first_violation_index([1, 2, 3], natural_order) is None
    assert first_violation_index([1, 3, 2, 0], natural_order) == 1
    assert first_violation_index([], natural_order) is None


def test_oracle_does_not_mutate_and_honours_comparator() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert oracle_sort(a, reverse_order) == [3, 2, 1]
    assert a == [3, 1, 2]
    assert equals_oracle(a, [1, 2, 3])
    assert not equals_oracle(a, [3, 2, 1])
    assert ORACLE_NAME == "python_sorted_timsort"


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2, 2], [1, 2])
    assert not is_permutation([1, 2, 2], [1, 1, 2])
    assert permutation_counter_diff([1, 2, 2], [1, 1, 2]) == {1: -1, 2: 1}
    assert permutation_counter_diff(["x"], ["x"]) == {}
