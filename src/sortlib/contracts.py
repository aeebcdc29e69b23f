"""
Comparator and key contracts shared by every algorithm.

Comparator
    compare(a, b) < 0   iff a precedes b
    compare(a, b) == 0  iff a and b are ordered the same
    compare(a, b) > 0   iff b precedes a

    Must describe a consistent total preorder over the records being sorted.
    The engine does not check this; a bad comparator yields an unspecified order.

Key function
    key(a) -> int in [0, num_keys)

    Only used by radix_sort. One key function per pass.

Instrumentation
    CallCounter counts comparator / key calls without any module-level state:

        counter = CallCounter()
        compare = counter.wrap(natural_order)
        quick_sort(xs, compare)
        print(counter.calls)
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]
KeyFunc = Callable[[Any], int]

__all__ = [
    "Comparator",
    "KeyFunc",
    "natural_order",
    "reverse_order",
    "CallCounter",
]


def natural_order(a: Any, b: Any) -> int:
    """Ascending order using the records' own `<` and `>`."""
    return (a > b) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
    """Descending order; the mirror image of `natural_order`."""
    return (b > a) - (b < a)


class CallCounter:
    """
    Explicit call counter for comparators and key functions.

    Any number of functions may be wrapped by the same counter; all of their
    calls accumulate in `calls`. Used by the demo and the benchmark harness to
    report the number of comparisons (or key extractions for radix passes).
    """

    def __init__(self) -> None:
        self.calls = 0

    def wrap(self, fn: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(fn)
        def counted(*args: Any) -> T:
            self.calls += 1
            return fn(*args)

        return counted

    def reset(self) -> None:
        self.calls = 0

    def __repr__(self) -> str:
        return f"CallCounter(calls={self.calls})"
