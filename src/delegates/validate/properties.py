"""
Property helpers for validating sort and filter results.

Public API (stable):
    is_ordered_by(xs: Sequence[T], compare) -> bool
    first_order_violation_index(xs: Sequence[T], compare) -> int | None
    is_permutation(a: Sequence[T], b: Sequence[T]) -> bool
    permutation_counter_diff(a: Sequence[T], b: Sequence[T]) -> dict[T, int]
    is_subsequence(sub: Sequence[T], seq: Sequence[T]) -> bool
    assert_no_mutation(before: Sequence[T], after: Sequence[T]) -> None

Notes
-----
- "Ordered by compare" means no adjacent pair (x, y) with compare(x, y) true,
  i.e. bubble sort would find nothing left to swap.
- The permutation helpers count elements with `collections.Counter`, so the
  elements must be hashable (ints, strings, frozen dataclasses).
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Dict, Sequence


__all__ = [
    "is_ordered_by",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_subsequence",
    "assert_no_mutation",
]


def is_ordered_by(xs: Sequence[Any], compare: Callable[[Any, Any], bool]) -> bool:
    """Return True iff compare(xs[i], xs[i+1]) is False for all i."""
    return first_order_violation_index(xs, compare) is None


def first_order_violation_index(
    xs: Sequence[Any], compare: Callable[[Any, Any], bool]
) -> int | None:
    """
    Return the first index i where compare(xs[i], xs[i+1]) holds, or None.

    Useful for precise error messages:
        i = first_order_violation_index(out, greater_than)
        assert i is None, f"out of order at i={i}: {out[i]} vs {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if compare(xs[i], xs[i + 1]):
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Any, int] = {}
    for k in set(ca.keys()) | set(cb.keys()):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def is_subsequence(sub: Sequence[Any], seq: Sequence[Any]) -> bool:
    """
    Return True iff every element of `sub` appears in `seq` in the same
    relative order (not necessarily contiguous).
    """
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), used to ensure
    an operation did not mutate its input in-place.

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(
                f"Input mutated at index {i}: before={x}, after={y}"
            )
