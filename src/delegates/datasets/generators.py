"""
Input generators for the demo and the benchmark.

Currently implemented:
- dist == "range":
    Deterministic [start, start+1, ..., start+n-1] (default start 1), the
    "1..10" input the filter examples use.

- dist == "shuffled":
    A random permutation of the "range" sequence, using the provided RNG.

- dist == "random":
    Integers drawn uniformly from an inclusive range.

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps using the provided RNG.

- dist == "reversed":
    Deterministic reversed order: [n-1, n-2, ..., 0].

- dist == "words":
    Lowercase strings with lengths drawn uniformly from an inclusive range,
    for sorting by a derived key (string length).

- dist == "employees":
    `Employee` records (see records.py), for sorting by a field such as age.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list

Conventions:
- Ranges in params are **inclusive** on both ends.
- Returns plain Python lists (algorithms stay NumPy-agnostic).
- The caller supplies the RNG, so a fixed seed reproduces the same inputs.
"""

from __future__ import annotations

import string
from typing import Any, Dict, List, Tuple

import numpy as np

from .records import make_employees

SUPPORTED_DISTS = {
    "range",
    "shuffled",
    "random",
    "nearly_sorted",
    "reversed",
    "words",
    "employees",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_LETTERS = np.array(list(string.ascii_lowercase))


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Generate a dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "range", "params": {"start": 1}}
            {"dist": "random", "params": {"range": [0, 999]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "words", "params": {"length": [1, 12]}}
            {"dist": "employees"}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).
        Unused by the deterministic "range" and "reversed" distributions.

    Returns
    -------
    list
        A list of length `n`.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if n == 0:
        return []

    if dist == "range":
        start = _parse_int(params, "start", default=1)
        return list(range(start, start + n))

    if dist == "shuffled":
        start = _parse_int(params, "start", default=1)
        return [int(v) for v in rng.permutation(np.arange(start, start + n))]

    if dist == "random":
        lo, hi = _parse_inclusive_range(params, "range", default=None)
        # Generator.integers is half-open; +1 makes the upper bound inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "employees":
        return make_employees(n, rng)

    # words
    lo, hi = _parse_inclusive_range(params, "length", default=(1, 12))
    if lo < 1:
        raise ValueError(f"words.params.length must start at 1 or more; got {lo}")
    lengths = rng.integers(lo, hi + 1, size=n)
    return ["".join(rng.choice(_LETTERS, size=int(m))) for m in lengths]


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_int(params: Dict[str, Any], key: str, default: int) -> int:
    val = params.get(key, default)
    if not _is_int_like(val):
        raise ValueError(f"params.{key} must be an integer; got {val!r}")
    return int(val)


def _parse_inclusive_range(
    params: Dict[str, Any], key: str, default: Tuple[int, int] | None
) -> Tuple[int, int]:
    """
    Parse params[key] == [min_int, max_int] (both inclusive).
    Required when `default` is None.
    """
    if key not in params:
        if default is None:
            raise ValueError(f"params.{key} must be provided as [min, max] (inclusive)")
        return default
    spec = params[key]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"params.{key} must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"params.{key} values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.{key} invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """Parse swap_frac in [0.0, 1.0]; defaults to 0.05."""
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
