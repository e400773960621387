"""
Ready-made predicates and a name registry for configs.

Registry spec forms accepted by `resolve_predicate`:
    "is_odd"
    {"name": "divisible_by", "params": {"k": 3}}
"""

from __future__ import annotations

from typing import Any, Callable, Dict, TypeVar

from .comparators import _split_spec

T = TypeVar("T")

Predicate = Callable[[T], bool]

__all__ = [
    "Predicate",
    "is_odd",
    "is_even",
    "divisible_by",
    "negate",
    "all_of",
    "any_of",
    "PREDICATES",
    "resolve_predicate",
]


def is_odd(x: int) -> bool:
    return x % 2 != 0


def is_even(x: int) -> bool:
    return x % 2 == 0


def divisible_by(k: int) -> Predicate[int]:
    """Predicate keeping multiples of `k` (k must be a nonzero int)."""
    if not isinstance(k, int) or k == 0:
        raise ValueError(f"divisible_by.k must be a nonzero integer; got {k!r}")

    def _pred(x: int) -> bool:
        return x % k == 0

    return _pred


def negate(pred: Predicate[T]) -> Predicate[T]:
    def _pred(x: T) -> bool:
        return not pred(x)

    return _pred


def all_of(*preds: Predicate[T]) -> Predicate[T]:
    # Short-circuits in argument order.
    def _pred(x: T) -> bool:
        return all(p(x) for p in preds)

    return _pred


def any_of(*preds: Predicate[T]) -> Predicate[T]:
    def _pred(x: T) -> bool:
        return any(p(x) for p in preds)

    return _pred


PREDICATES: Dict[str, Callable[..., Predicate[Any]]] = {
    "is_odd": lambda: is_odd,
    "is_even": lambda: is_even,
    "divisible_by": divisible_by,
}


def resolve_predicate(spec: Any) -> Predicate[Any]:
    """
    Build a predicate from a registry spec.

    A spec may also carry "negate": true to invert the result.

    Raises
    ------
    ValueError
        If the name is unknown or the params are invalid.
    """
    name, params = _split_spec(spec, kind="predicate")
    if name not in PREDICATES:
        raise ValueError(
            f"Unknown predicate: {name!r}. Supported: {sorted(PREDICATES)}"
        )
    try:
        pred = PREDICATES[name](**params)
    except TypeError as e:
        raise ValueError(f"Invalid params for predicate {name!r}: {params!r}") from e
    if isinstance(spec, dict) and spec.get("negate", False):
        pred = negate(pred)
    return pred
