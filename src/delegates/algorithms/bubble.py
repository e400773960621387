"""
Comparator-driven bubble sort.

The ordering decision is injected: `compare(a, b)` returns True when `a`
must move past `b`. The traversal itself knows nothing about the element
type, so lists of ints, strings or records sort the same way.

Public API (stable):
    bubble_sort(seq: MutableSequence[T] | None, compare: Comparator[T] | None) -> None
    bubble_sort_numbers(seq, *, descending=False) -> None

Conventions:
- `greater_than` gives ascending order, `less_than` gives descending order.
- Absent `seq` or `compare` is a silent no-op.
- Every call performs exactly n passes and n*(n-1)/2 comparisons; there is no
  early exit when a pass makes no swaps. This is the naive variant and is
  known to be wasteful on already-sorted input.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional, TypeVar

from .comparators import Comparator, greater_than, less_than

T = TypeVar("T")

__all__ = ["bubble_sort", "bubble_sort_numbers"]


def bubble_sort(
    seq: Optional[MutableSequence[T]], compare: Optional[Comparator[T]]
) -> None:
    """
    Sort `seq` in place, swapping adjacent items whenever `compare` says so.

    Parameters
    ----------
    seq : MutableSequence | None
        Sequence to reorder. Left untouched if None.
    compare : Callable[[T, T], bool] | None
        Swap decision for an adjacent pair. Nothing happens if None.
    """
    if seq is None or compare is None:
        return

    n = len(seq)
    for i in range(n):
        for j in range(n - i - 1):
            if compare(seq[j], seq[j + 1]):
                seq[j], seq[j + 1] = seq[j + 1], seq[j]


def bubble_sort_numbers(
    seq: Optional[MutableSequence[Any]], *, descending: bool = False
) -> None:
    """Fixed-direction variant: ascending unless `descending` is set."""
    bubble_sort(seq, less_than if descending else greater_than)
