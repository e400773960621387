"""
Composite records for sorting by a derived field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

__all__ = ["Employee", "SAMPLE_EMPLOYEES", "make_employees"]


@dataclass(frozen=True)
class Employee:
    name: str
    age: int
    salary: int


SAMPLE_EMPLOYEES: List[Employee] = [
    Employee("Maria", 41, 72000),
    Employee("Ken", 29, 58000),
    Employee("Ada", 36, 91000),
    Employee("Tomasz", 52, 66000),
    Employee("Lin", 24, 47000),
]

_NAMES = ["Ada", "Ken", "Lin", "Maria", "Noor", "Omar", "Sade", "Tomasz", "Uma", "Yuki"]


def make_employees(n: int, rng: np.random.Generator) -> List[Employee]:
    """Draw `n` employees with ages in [20, 65] and salaries in [30000, 150000]."""
    if n < 0:
        raise ValueError("n must be nonnegative")
    names = rng.choice(_NAMES, size=n)
    ages = rng.integers(20, 66, size=n)
    salaries = rng.integers(30, 151, size=n) * 1000
    return [
        Employee(str(name), int(age), int(salary))
        for name, age, salary in zip(names, ages, salaries)
    ]
