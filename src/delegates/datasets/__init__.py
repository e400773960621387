"""
Datasets package public API.

Re-export the generators so callers can write:
    from delegates.datasets import make_dataset, SUPPORTED_DISTS, Employee
"""

from .generators import make_dataset, SUPPORTED_DISTS
from .records import Employee, SAMPLE_EMPLOYEES, make_employees

__all__ = ["make_dataset", "SUPPORTED_DISTS", "Employee", "SAMPLE_EMPLOYEES", "make_employees"]
