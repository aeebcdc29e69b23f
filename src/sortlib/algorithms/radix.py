"""
Single pass of an LSD radix sort (stable counting sort on one key).

Each call performs exactly one pass:
    1. count how many records carry each key value
    2. turn the counts into starting offsets (exclusive prefix sums)
    3. scatter records into a temporary buffer in their original order,
       bumping the offset of their key after each placement
    4. copy the buffer back over the sequence

Because step 3 walks the sequence in order, records with equal keys keep their
relative order. That is what lets a caller chain passes, least-significant
digit first, to sort on a composite key:

    for key in byte_keys(4, signed=True):
        radix_sort(xs, 256, key)

How many passes to run and in which digit order is the caller's business; see
`sortlib.keys.radix_sort_integers` for the common integer case.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from sortlib.algorithms._buffers import allocate, allocate_table
from sortlib.contracts import KeyFunc
from sortlib.errors import KeyRangeError

__all__ = ["radix_sort"]


def radix_sort(seq: MutableSequence[Any], num_keys: int, key_fn: KeyFunc) -> None:
    """
    Stably reorder `seq` by `key_fn`, whose values lie in [0, num_keys).

    Parameters
    ----------
    seq : MutableSequence
        Records to reorder. Mutated in place.
    num_keys : int
        Size of the key domain (e.g. 256 for one byte). Must be >= 1.
    key_fn : KeyFunc
        Pure function of a record for the duration of the call. It is called
        twice per record (once while counting, once while placing).

    Raises
    ------
    ValueError
        If `num_keys` < 1.
    KeyRangeError
        If a key falls outside [0, num_keys). Detected while counting, before
        `seq` is modified.
    BufferAllocationError
        If the tables or the record buffer cannot be allocated. `seq` is
        untouched in that case.
    """
    if not isinstance(num_keys, int) or num_keys < 1:
        raise ValueError(f"num_keys must be an integer >= 1; got {num_keys!r}")

    n = len(seq)
    if n == 0:
        return

    counts = allocate_table("radix_sort", num_keys)
    for index, item in enumerate(seq):
        key = key_fn(item)
        if not 0 <= key < num_keys:
            raise KeyRangeError(key, num_keys, index)
        counts[key] += 1

    # offsets[k] is where the next record with key k goes
    offsets = allocate_table("radix_sort", num_keys)
    for k in range(1, num_keys):
        offsets[k] = offsets[k - 1] + counts[k - 1]

    buffer = allocate("radix_sort", n)
    for item in seq:
        key = key_fn(item)
        buffer[offsets[key]] = item
        offsets[key] += 1

    seq[:] = buffer
