"""
Algorithms package public API.

Re-export the sorter, the filter and their delegates so callers can write:
    from delegates.algorithms import bubble_sort, filter_list, greater_than, is_odd
"""

from .bubble import bubble_sort, bubble_sort_numbers
from .comparators import (
    COMPARATORS,
    Comparator,
    by_field,
    by_key,
    greater_than,
    less_than,
    longer_than,
    resolve_comparator,
    reversed_order,
    shorter_than,
)
from .filtering import filter_list
from .predicates import (
    PREDICATES,
    Predicate,
    all_of,
    any_of,
    divisible_by,
    is_even,
    is_odd,
    negate,
    resolve_predicate,
)

__all__ = [
    "bubble_sort",
    "bubble_sort_numbers",
    "filter_list",
    "Comparator",
    "Predicate",
    "COMPARATORS",
    "PREDICATES",
    "greater_than",
    "less_than",
    "longer_than",
    "shorter_than",
    "by_key",
    "by_field",
    "reversed_order",
    "resolve_comparator",
    "is_odd",
    "is_even",
    "divisible_by",
    "negate",
    "all_of",
    "any_of",
    "resolve_predicate",
]
