"""
Ready-made comparators and a name registry for configs.

A comparator answers "should `a` be moved after `b`?". Under bubble_sort,
`greater_than` produces ascending order and `less_than` produces descending
order.

Registry spec forms accepted by `resolve_comparator`:
    "greater_than"
    {"name": "less_than"}
    {"name": "by_field", "params": {"field": "age", "order": "descending"}}
"""

from __future__ import annotations

from typing import Any, Callable, Dict, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], bool]

__all__ = [
    "Comparator",
    "greater_than",
    "less_than",
    "by_key",
    "by_field",
    "reversed_order",
    "longer_than",
    "shorter_than",
    "COMPARATORS",
    "resolve_comparator",
]


def greater_than(a: Any, b: Any) -> bool:
    return a > b


def less_than(a: Any, b: Any) -> bool:
    return a < b


def by_key(
    key: Callable[[T], K], compare: Comparator[K] = greater_than
) -> Comparator[T]:
    """Compare two items through a derived value, e.g. `by_key(len)`."""

    def _compare(a: T, b: T) -> bool:
        return compare(key(a), key(b))

    return _compare


def by_field(field: str, order: str = "ascending") -> Comparator[Any]:
    """
    Compare records on one attribute (or mapping key) named `field`.

    `order` is "ascending" or "descending".
    """
    if order not in _ORDERS:
        raise ValueError(f"order must be one of {sorted(_ORDERS)}; got {order!r}")

    def _get(item: Any) -> Any:
        if isinstance(item, dict):
            return item[field]
        return getattr(item, field)

    return by_key(_get, _ORDERS[order])


def reversed_order(compare: Comparator[T]) -> Comparator[T]:
    """Flip the polarity of `compare` by swapping its arguments."""

    def _compare(a: T, b: T) -> bool:
        return compare(b, a)

    return _compare


longer_than: Comparator[Any] = by_key(len, greater_than)
shorter_than: Comparator[Any] = by_key(len, less_than)

_ORDERS: Dict[str, Comparator[Any]] = {
    "ascending": greater_than,
    "descending": less_than,
}

# name -> factory(**params) -> comparator
COMPARATORS: Dict[str, Callable[..., Comparator[Any]]] = {
    "greater_than": lambda: greater_than,
    "less_than": lambda: less_than,
    "longer_than": lambda: longer_than,
    "shorter_than": lambda: shorter_than,
    "by_field": by_field,
}


def resolve_comparator(spec: Any) -> Comparator[Any]:
    """
    Build a comparator from a registry spec (string or {"name", "params"} dict).

    Raises
    ------
    ValueError
        If the name is unknown or the params do not fit the factory.
    """
    name, params = _split_spec(spec, kind="comparator")
    if name not in COMPARATORS:
        raise ValueError(
            f"Unknown comparator: {name!r}. Supported: {sorted(COMPARATORS)}"
        )
    try:
        return COMPARATORS[name](**params)
    except TypeError as e:
        raise ValueError(f"Invalid params for comparator {name!r}: {params!r}") from e


def _split_spec(spec: Any, *, kind: str):
    if isinstance(spec, str):
        return spec, {}
    if not isinstance(spec, dict) or "name" not in spec:
        raise ValueError(f"{kind} spec must be a name or a dict with a 'name' key")
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{kind} {spec['name']!r}: 'params' must be a dict")
    return spec["name"], params
