"""Bubble sort: in place, stable, stops after the first pass with no swaps."""

from __future__ import annotations

from typing import Any, MutableSequence

from sortlib.contracts import Comparator

__all__ = ["bubble_sort"]


def bubble_sort(seq: MutableSequence[Any], compare: Comparator) -> None:
    live = len(seq)
    done = False

    while not done:
        done = True
        live -= 1  # the largest remaining record is already at the end

        for i in range(live):
            if compare(seq[i + 1], seq[i]) < 0:
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                done = False
