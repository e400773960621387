"""
Oracles for sort and filter correctness.

Sorting: Python's built-in `sorted()` with the injected comparator turned
into a three-way `cmp` via `functools.cmp_to_key`. `sorted` is stable, and so
is bubble sort (it only swaps when the comparator says so), so for any strict
weak order the two agree exactly, ties included.

Filtering: a list comprehension over the same predicate.

Public API (stable):
    oracle_sort(a: list, compare) -> list
    oracle_filter(a: list, predicate) -> list
    equals_oracle(a: list, out: list, compare) -> bool

Conventions:
- Oracles never mutate their input and always return a **new** list.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, List

__all__ = ["oracle_sort", "oracle_filter", "equals_oracle"]


def _three_way(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], int]:
    def _cmp(a: Any, b: Any) -> int:
        if compare(a, b):
            return 1
        if compare(b, a):
            return -1
        return 0

    return _cmp


def oracle_sort(a: List[Any], compare: Callable[[Any, Any], bool]) -> List[Any]:
    """
    Return the order bubble_sort(a, compare) must produce.

    `compare(x, y)` is True when x belongs after y.
    """
    return sorted(a, key=cmp_to_key(_three_way(compare)))


def oracle_filter(a: List[Any], predicate: Callable[[Any], bool]) -> List[Any]:
    return [x for x in a if predicate(x)]


def equals_oracle(
    a: List[Any], out: List[Any], compare: Callable[[Any, Any], bool]
) -> bool:
    """True iff `out` is exactly equal to `oracle_sort(a, compare)`."""
    return out == oracle_sort(a, compare)
