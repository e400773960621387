"""
Correctness tests for the comparator-driven bubble sort.

What we check:
- Output matches the oracle (built-in `sorted` with the same comparator)
- Comparator polarity: greater_than -> ascending, less_than -> descending
- Permutation preservation and in-place mutation (returns None)
- Idempotence: sorting a sorted list changes nothing
- Absent list / comparator is a silent no-op
- Exactly n*(n-1)/2 comparator calls, whatever the input order
- Composite records sort by a derived field
"""

from __future__ import annotations

from typing import Any, List

import pytest
from hypothesis import given, settings, strategies as st

from delegates.algorithms import (
    bubble_sort,
    bubble_sort_numbers,
    by_field,
    by_key,
    greater_than,
    less_than,
    longer_than,
    reversed_order,
    shorter_than,
)
from delegates.bench.measure import CallCounter
from delegates.datasets import SAMPLE_EMPLOYEES, Employee
from delegates.validate import is_ordered_by, is_permutation, oracle_sort

TUTORIAL_INPUT = [7, 2, 9, 6, 1, 4, 5, 3, 10, 8]


# ------------------------- helpers ------------------------- #

def _check_one(a: List[Any], compare) -> None:
    """Common assertion bundle for one input."""
    work = list(a)
    ret = bubble_sort(work, compare)

    assert ret is None, "bubble_sort sorts in place and returns None"
    assert work == oracle_sort(a, compare), "Output must exactly match the oracle"
    assert is_ordered_by(work, compare), "No adjacent pair may still need a swap"
    assert is_permutation(a, work), "Output is not a permutation of input"

    again = list(work)
    bubble_sort(again, compare)
    assert again == work, "Sorting must be idempotent"


# ------------------------- unit tests (deterministic) ------------------------- #

def test_greater_than_sorts_ascending() -> None:
    a = list(TUTORIAL_INPUT)
    bubble_sort(a, greater_than)
    assert a == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_less_than_sorts_descending() -> None:
    a = list(TUTORIAL_INPUT)
    bubble_sort(a, less_than)
    assert a == [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]


def test_lambda_comparator() -> None:
    a = list(TUTORIAL_INPUT)
    bubble_sort(a, lambda x, y: x > y)
    assert a == sorted(TUTORIAL_INPUT)


@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
    ],
)
@pytest.mark.parametrize("compare", [greater_than, less_than])
def test_unit_cases(a: List[int], compare) -> None:
    _check_one(a, compare)


def test_none_sequence_is_noop() -> None:
    assert bubble_sort(None, greater_than) is None


def test_none_comparator_leaves_list_untouched() -> None:
    a = list(TUTORIAL_INPUT)
    assert bubble_sort(a, None) is None
    assert a == TUTORIAL_INPUT


def test_empty_list_stays_empty() -> None:
    a: List[int] = []
    bubble_sort(a, greater_than)
    assert a == []


@pytest.mark.parametrize(
    "a",
    [list(range(12)), list(range(12))[::-1], [3] * 12, TUTORIAL_INPUT],
)
def test_comparator_call_count_has_no_early_exit(a: List[int]) -> None:
    counter = CallCounter(greater_than)
    bubble_sort(list(a), counter)
    n = len(a)
    assert counter.calls == n * (n - 1) // 2


def test_fixed_direction_variant() -> None:
    a = list(TUTORIAL_INPUT)
    bubble_sort_numbers(a)
    assert a == sorted(TUTORIAL_INPUT)
    bubble_sort_numbers(a, descending=True)
    assert a == sorted(TUTORIAL_INPUT, reverse=True)
    bubble_sort_numbers(None)


def test_reversed_order_flips_polarity() -> None:
    a = list(TUTORIAL_INPUT)
    bubble_sort(a, reversed_order(greater_than))
    assert a == sorted(TUTORIAL_INPUT, reverse=True)


def test_strings_by_length() -> None:
    words = ["banana", "fig", "kiwi", "cherry", "apple", "pear"]
    work = list(words)
    bubble_sort(work, longer_than)
    # Stable: equal lengths keep their input order.
    assert work == ["fig", "kiwi", "pear", "apple", "banana", "cherry"]

    work = list(words)
    bubble_sort(work, shorter_than)
    assert work == ["banana", "cherry", "apple", "kiwi", "pear", "fig"]


def test_records_by_field_both_polarities() -> None:
    people = list(SAMPLE_EMPLOYEES)
    bubble_sort(people, by_field("age"))
    assert [p.age for p in people] == sorted(p.age for p in SAMPLE_EMPLOYEES)

    bubble_sort(people, by_field("salary", order="descending"))
    assert [p.salary for p in people] == sorted((p.salary for p in SAMPLE_EMPLOYEES), reverse=True)


def test_records_as_dicts() -> None:
    rows = [{"id": 1, "score": 30}, {"id": 2, "score": 10}, {"id": 3, "score": 20}]
    bubble_sort(rows, by_field("score"))
    assert [r["id"] for r in rows] == [2, 3, 1]


def test_by_field_rejects_unknown_order() -> None:
    with pytest.raises(ValueError):
        by_field("age", order="sideways")


class _Unorderable:
    """No __lt__/__gt__: only the injected comparator can order these."""

    def __init__(self, weight: int) -> None:
        self.weight = weight

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Unorderable) and other.weight == self.weight

    def __hash__(self) -> int:
        return hash(self.weight)


def test_type_without_builtin_ordering() -> None:
    items = [_Unorderable(w) for w in TUTORIAL_INPUT]
    bubble_sort(items, by_key(lambda u: u.weight))
    assert [u.weight for u in items] == sorted(TUTORIAL_INPUT)


def test_comparator_exception_propagates() -> None:
    def boom(a: int, b: int) -> bool:
        raise RuntimeError("comparator failed")

    with pytest.raises(RuntimeError):
        bubble_sort([2, 1], boom)


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@settings(deadline=None, max_examples=100)
@given(st.lists(small_ints, min_size=0, max_size=60))
def test_property_ascending(a: List[int]) -> None:
    _check_one(a, greater_than)
    work = list(a)
    bubble_sort(work, greater_than)
    assert work == sorted(a)


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=0, max_value=15), min_size=0, max_size=60))
def test_property_descending_many_duplicates(a: List[int]) -> None:
    _check_one(a, less_than)
    work = list(a)
    bubble_sort(work, less_than)
    assert work == sorted(a, reverse=True)


@settings(deadline=None, max_examples=60)
@given(
    st.lists(
        st.builds(
            Employee,
            name=st.text(min_size=1, max_size=8),
            age=st.integers(min_value=18, max_value=70),
            salary=st.integers(min_value=0, max_value=200_000),
        ),
        max_size=30,
    )
)
def test_property_records_by_derived_field(people: List[Employee]) -> None:
    _check_one(people, by_field("age"))
    work = list(people)
    bubble_sort(work, by_field("age"))
    # Stable ordering on the field, other fields irrelevant.
    assert work == sorted(people, key=lambda p: p.age)
