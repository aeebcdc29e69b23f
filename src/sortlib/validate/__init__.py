"""
Validation utilities public API.

Re-exports:
    - Post-condition:
        verify_sort

    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        first_violation_index
        is_permutation
        permutation_counter_diff
        is_stable
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    first_violation_index,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)
from .verify import verify_sort

__all__ = [
    "verify_sort",
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
]
