"""
Tests for the numpy-backed input generators.
"""

from __future__ import annotations

import numpy as np
import pytest

from delegates.datasets import SUPPORTED_DISTS, make_dataset, make_employees


def _rng(seed: int = 7) -> np.random.Generator:
    return np.random.default_rng(seed)


def test_range_is_the_one_to_ten_input() -> None:
    assert make_dataset(10, {"dist": "range"}, _rng()) == list(range(1, 11))
    assert make_dataset(3, {"dist": "range", "params": {"start": -1}}, _rng()) == [-1, 0, 1]


def test_reversed() -> None:
    assert make_dataset(5, {"dist": "reversed"}, _rng()) == [4, 3, 2, 1, 0]


def test_shuffled_is_permutation_of_range() -> None:
    out = make_dataset(50, {"dist": "shuffled"}, _rng())
    assert sorted(out) == list(range(1, 51))
    assert all(type(v) is int for v in out)


def test_random_respects_inclusive_range() -> None:
    out = make_dataset(500, {"dist": "random", "params": {"range": [3, 5]}}, _rng())
    assert set(out) == {3, 4, 5}


def test_nearly_sorted_is_permutation() -> None:
    out = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}, _rng())
    assert sorted(out) == list(range(100))


def test_words_lengths() -> None:
    out = make_dataset(40, {"dist": "words", "params": {"length": [2, 4]}}, _rng())
    assert all(isinstance(w, str) and 2 <= len(w) <= 4 and w.isalpha() for w in out)


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
def test_same_seed_same_data(dist: str) -> None:
    spec = {"dist": dist, "params": {"range": [0, 99]} if dist == "random" else {}}
    assert make_dataset(30, spec, _rng(1)) == make_dataset(30, spec, _rng(1))
    assert make_dataset(0, spec, _rng(1)) == []


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "range"}),
        (1.5, {"dist": "range"}),
        (5, "range"),
        (5, {"dist": "gaussian"}),
        (5, {"dist": "random"}),
        (5, {"dist": "random", "params": {"range": [9, 1]}}),
        (5, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}),
        (5, {"dist": "words", "params": {"length": [0, 3]}}),
    ],
)
def test_invalid_inputs(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, _rng())


def test_make_employees() -> None:
    people = make_employees(20, _rng())
    assert len(people) == 20
    assert all(20 <= p.age <= 65 and 30000 <= p.salary <= 150000 for p in people)
    assert make_employees(20, _rng()) == people


def test_employees_dist_matches_make_employees() -> None:
    out = make_dataset(15, {"dist": "employees"}, _rng(4))
    assert out == make_employees(15, _rng(4))
