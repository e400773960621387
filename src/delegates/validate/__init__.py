"""
Validation utilities public API.

Re-exports:
    - Oracles:
        oracle_sort
        oracle_filter
        equals_oracle

    - Property checks:
        is_ordered_by
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        is_subsequence
        assert_no_mutation
"""

from .oracle import equals_oracle, oracle_filter, oracle_sort
from .properties import (
    assert_no_mutation,
    first_order_violation_index,
    is_ordered_by,
    is_permutation,
    is_subsequence,
    permutation_counter_diff,
)

__all__ = [
    "oracle_sort",
    "oracle_filter",
    "equals_oracle",
    "is_ordered_by",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_subsequence",
    "assert_no_mutation",
]
