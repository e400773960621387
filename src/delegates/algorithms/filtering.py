"""
Predicate-driven linear filter.

Public API (stable):
    filter_list(seq: Iterable[T] | None, predicate: Predicate[T] | None) -> list[T]

Conventions:
- Output keeps the input order of the retained elements (stable).
- The input is never mutated; a new list is always returned.
- Absent `seq` or `predicate` yields an empty list.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from .predicates import Predicate

T = TypeVar("T")

__all__ = ["filter_list"]


def filter_list(
    seq: Optional[Iterable[T]], predicate: Optional[Predicate[T]]
) -> List[T]:
    """Return the elements of `seq` for which `predicate` is true, in order."""
    if seq is None or predicate is None:
        return []

    out: List[T] = []
    for item in seq:
        if predicate(item):
            out.append(item)
    return out
