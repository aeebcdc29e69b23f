"""
sortlib: a collection of generic sorting algorithms.

Every comparison sort orders a mutable sequence in place using a caller-supplied
comparator; radix_sort performs one stable counting pass per call using a key
function. verify_sort checks the result.

    from sortlib import quick_sort, verify_sort, natural_order
    xs = [5, 3, 3, 1]
    quick_sort(xs, natural_order)
    assert verify_sort(xs, natural_order)
"""

from .algorithms import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    shell_sort,
)
from .contracts import CallCounter, natural_order, reverse_order
from .errors import BufferAllocationError, KeyRangeError, SortError
from .validate.verify import verify_sort

__version__ = "1.0.0"

__all__ = [
    "verify_sort",
    "insertion_sort",
    "bubble_sort",
    "shell_sort",
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "radix_sort",
    "natural_order",
    "reverse_order",
    "CallCounter",
    "SortError",
    "BufferAllocationError",
    "KeyRangeError",
]
