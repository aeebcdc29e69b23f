"""
Algorithms package public API.

Every comparison sort has the signature:
    fn(seq: MutableSequence, compare: Comparator) -> None

radix_sort is a single distribution pass:
    radix_sort(seq, num_keys, key_fn) -> None

Registry:
    ALGORITHMS        name -> callable, in the order the demo runs them
    COMPARISON_SORTS  names that take a comparator
    STABLE_SORTS      names that keep equal records in their original order
    get_algorithm(name)
    sort_in_place(name, seq, compare, ...)  uniform dispatch used by the CLI
                                            and the benchmark harness
"""

from __future__ import annotations

from typing import Any, Callable, Dict, FrozenSet, MutableSequence, Optional

from sortlib.contracts import CallCounter, Comparator, natural_order

from .bubble import bubble_sort
from .heap import heap_sort
from .insertion import insertion_sort
from .merge import merge_sort
from .quick import quick_sort
from .radix import radix_sort
from .shell import shell_sort

ALGORITHMS: Dict[str, Callable[..., None]] = {
    "insertion": insertion_sort,
    "bubble": bubble_sort,
    "shell": shell_sort,
    "quick": quick_sort,
    "merge": merge_sort,
    "heap": heap_sort,
    "radix": radix_sort,
}

COMPARISON_SORTS: FrozenSet[str] = frozenset(ALGORITHMS) - {"radix"}
STABLE_SORTS: FrozenSet[str] = frozenset({"insertion", "bubble", "merge", "radix"})

__all__ = [
    "ALGORITHMS",
    "COMPARISON_SORTS",
    "STABLE_SORTS",
    "get_algorithm",
    "sort_in_place",
    "insertion_sort",
    "bubble_sort",
    "shell_sort",
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "radix_sort",
]


def get_algorithm(name: str) -> Callable[..., None]:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: {name!r}. Supported: {list(ALGORITHMS)}"
        ) from None


def sort_in_place(
    name: str,
    seq: MutableSequence[Any],
    compare: Comparator = natural_order,
    *,
    counter: Optional[CallCounter] = None,
    radix_width: int = 8,
    radix_signed: bool = True,
) -> None:
    """
    Run the algorithm called `name` over `seq`.

    Comparison sorts use `compare`. "radix" ignores `compare` and sorts
    integers ascending with one pass per byte of `radix_width`.
    When `counter` is given, comparator calls (or key extractions for radix)
    are counted on it.
    """
    fn = get_algorithm(name)

    if name == "radix":
        # imported here: sortlib.keys depends on this package
        from sortlib.keys import radix_sort_integers

        radix_sort_integers(seq, radix_width, signed=radix_signed, counter=counter)
        return

    if counter is not None:
        compare = counter.wrap(compare)
    fn(seq, compare)
