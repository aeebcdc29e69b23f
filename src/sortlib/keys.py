"""
Key functions for radix passes over integers.

A multi-byte integer is sorted by running one radix pass per byte, least
significant byte first. Signed integers are first mapped onto an unsigned range
that keeps their order (add 2**(bits - 1)), so negative values sort before
positive ones.

Public API (stable):
    RADIX_BASE
    order_preserving(value: int, bits: int) -> int
    byte_key(index: int, *, signed_bits: int | None = None) -> KeyFunc
    byte_keys(width: int, *, signed: bool = False) -> list[KeyFunc]
    radix_sort_integers(seq, width=8, *, signed=True, counter=None) -> None
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Optional

from sortlib.algorithms.radix import radix_sort
from sortlib.contracts import CallCounter, KeyFunc

RADIX_BASE: int = 256

__all__ = [
    "RADIX_BASE",
    "order_preserving",
    "byte_key",
    "byte_keys",
    "radix_sort_integers",
]


def order_preserving(value: int, bits: int) -> int:
    """
    Map a signed `bits`-wide integer onto [0, 2**bits) without changing order.

    Example (bits=16): -32768 -> 0, -1 -> 32767, 0 -> 32768, 32767 -> 65535.

    Raises
    ------
    ValueError
        If `value` does not fit in a signed integer of `bits` bits.
    """
    if bits < 1:
        raise ValueError(f"bits must be >= 1; got {bits}")
    half = 1 << (bits - 1)
    if not -half <= value < half:
        raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
    return value + half


def byte_key(index: int, *, signed_bits: Optional[int] = None) -> KeyFunc:
    """
    Return a key function extracting byte `index` (0 = least significant).

    With `signed_bits` set, the byte is taken from the order-preserving encoding
    of the value rather than from the value itself. Without it the value is
    read as-is; negative values then sort by their two's-complement bytes.
    """
    if index < 0:
        raise ValueError(f"byte index must be nonnegative; got {index}")
    shift = 8 * index

    if signed_bits is None:
        def key(value: int) -> int:
            return (value >> shift) & 0xFF
    else:
        def key(value: int) -> int:
            return (order_preserving(value, signed_bits) >> shift) & 0xFF

    key.__name__ = f"byte{index}_key"
    return key


def byte_keys(width: int, *, signed: bool = False) -> List[KeyFunc]:
    """Key functions for every byte of a `width`-byte integer, LSB first."""
    if width < 1:
        raise ValueError(f"width must be >= 1 byte; got {width}")
    signed_bits = 8 * width if signed else None
    return [byte_key(i, signed_bits=signed_bits) for i in range(width)]


def radix_sort_integers(
    seq: MutableSequence[int],
    width: int = 8,
    *,
    signed: bool = True,
    counter: Optional[CallCounter] = None,
) -> None:
    """
    Sort integers ascending with one radix pass per byte.

    Parameters
    ----------
    seq : MutableSequence[int]
        Integers that fit in `width` bytes (signed or unsigned per `signed`).
    width : int
        Number of bytes, and therefore passes.
    signed : bool
        Whether to apply the order-preserving signed encoding.
    counter : CallCounter | None
        If given, every key extraction across all passes is counted.
    """
    keys: List[Any] = byte_keys(width, signed=signed)
    if counter is not None:
        keys = [counter.wrap(k) for k in keys]

    for key in keys:
        radix_sort(seq, RADIX_BASE, key)
