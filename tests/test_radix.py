"""Tests for the single radix pass and the byte-key helpers."""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from sortlib.algorithms import radix as radix_module
from sortlib.algorithms.radix import radix_sort
from sortlib.contracts import CallCounter
from sortlib.errors import BufferAllocationError, KeyRangeError, SortError
from sortlib.keys import RADIX_BASE, byte_key, byte_keys, order_preserving, radix_sort_integers


# ------------------------- single pass ------------------------- #

def test_single_pass_orders_by_key_only() -> None:
    xs = [0x0102, 0x0201, 0x0001, 0x0302]
    radix_sort(xs, 256, byte_key(0))
    # low bytes 01, 01, 02, 02 with original order preserved inside each group
    assert xs == [0x0201, 0x0001, 0x0102, 0x0302]


def test_lsb_first_passes_compose() -> None:
    xs = [0x0102, 0x0201, 0x0001, 0x0302]
    for key in byte_keys(2):
        radix_sort(xs, 256, key)
    assert xs == [0x0001, 0x0102, 0x0201, 0x0302]


def test_single_key_domain() -> None:
    xs = [3, 1, 2]
    radix_sort(xs, 1, lambda _: 0)
    assert xs == [3, 1, 2]


@pytest.mark.parametrize("num_keys", [0, -1, 2.5])
def test_invalid_num_keys(num_keys) -> None:
    with pytest.raises(ValueError):
        radix_sort([1, 2], num_keys, lambda v: 0)


@pytest.mark.parametrize("bad_key", [256, -1])
def test_key_out_of_range_leaves_sequence_untouched(bad_key: int) -> None:
    xs = [5, 4, 3, 2, 1]
    with pytest.raises(KeyRangeError) as info:
        radix_sort(xs, 256, lambda v: bad_key if v == 3 else v)
    assert xs == [5, 4, 3, 2, 1]
    assert info.value.index == 2
    assert info.value.key == bad_key
    assert isinstance(info.value, SortError)
    assert isinstance(info.value, ValueError)


def test_allocation_failure_is_reported_and_sequence_untouched(monkeypatch) -> None:
    def fail(algorithm: str, size: int):
        raise BufferAllocationError(algorithm, size)

    monkeypatch.setattr(radix_module, "allocate", fail)
    xs = [3, 1, 2]
    with pytest.raises(BufferAllocationError):
        radix_sort(xs, 256, byte_key(0))
    assert xs == [3, 1, 2]


def test_key_function_called_twice_per_record() -> None:
    counter = CallCounter()
    xs = list(range(10))
    radix_sort(xs, 256, counter.wrap(byte_key(0)))
    assert counter.calls == 20


# ------------------------- keys ------------------------- #

@pytest.mark.parametrize(
    "value,bits,expected",
    [
        (-32768, 16, 0),
        (-1, 16, 32767),
        (0, 16, 32768),
        (32767, 16, 65535),
        (-(2**31), 32, 0),
        (0, 32, 2**31),
    ],
)
def test_order_preserving(value: int, bits: int, expected: int) -> None:
    assert order_preserving(value, bits) == expected


@pytest.mark.parametrize("value,bits", [(32768, 16), (-32769, 16), (0, 0)])
def test_order_preserving_rejects_out_of_range(value: int, bits: int) -> None:
    with pytest.raises(ValueError):
        order_preserving(value, bits)


def test_byte_key_extracts_bytes() -> None:
    value = 0x1122334455667788
    assert [byte_key(i)(value) for i in range(8)] == [0x88, 0x77, 0x66, 0x55, 0x44, 0x33, 0x22, 0x11]
    assert byte_key(1, signed_bits=16)(-1) == 0x7F
    assert byte_key(3).__name__ == "byte3_key"


def test_byte_keys_validation() -> None:
    assert len(byte_keys(4, signed=True)) == 4
    with pytest.raises(ValueError):
        byte_keys(0)
    with pytest.raises(ValueError):
        byte_key(-1)


def test_radix_sort_integers_counts_key_calls() -> None:
    xs = [9, -3, 0, 12, -7]
    counter = CallCounter()
    radix_sort_integers(xs, 4, signed=True, counter=counter)
    assert xs == [-7, -3, 0, 9, 12]
    assert counter.calls == 2 * len(xs) * 4


def test_signed_32_bit_values_four_passes() -> None:
    xs = [-(2**31), 2**31 - 1, -5, 10, -1, 0, 123456, -987654]
    radix_sort_integers(xs, 4, signed=True)
    assert xs == sorted(xs)
    assert RADIX_BASE == 256


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=0, max_value=2**16 - 1), max_size=200))
def test_unsigned_two_byte_composition(xs: List[int]) -> None:
    out = list(xs)
    radix_sort_integers(out, 2, signed=False)
    assert out == sorted(xs)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=200))
def test_signed_composition(xs: List[int]) -> None:
    out = list(xs)
    radix_sort_integers(out, 4, signed=True)
    assert out == sorted(xs)
