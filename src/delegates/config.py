"""
Configuration for the demo and benchmark runners.

Both runners work without a config file; a YAML file overrides the defaults
key by key. Unknown keys are rejected so typos do not go unnoticed.

Demo config (all keys optional):
    values: [7, 2, 9, 6, 1, 4, 5, 3, 10, 8]
    filter_values: [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    comparators: ["greater_than", "less_than"]
    predicates: ["is_odd", "is_even", {"name": "divisible_by", "params": {"k": 3}}]
    words: ["pear", "fig", "banana", "kiwi"]
    records_sort: {"name": "by_field", "params": {"field": "age"}}

Bench config (all keys optional):
    experiment_name: quadratic_scaling
    seed: 12345
    repeats: 5
    warmup: true
    disable_gc: true
    timeout_seconds: 5.0
    dataset: {"dist": "shuffled", "params": {}}
    sizes: [100, 200, 400, 800]
    operations:
      - {"name": "bubble_asc", "op": "sort", "delegate": "greater_than"}
      - {"name": "filter_even", "op": "filter", "delegate": "is_even"}
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

from delegates.algorithms import resolve_comparator, resolve_predicate
from delegates.datasets import SAMPLE_EMPLOYEES, make_dataset

__all__ = [
    "DemoConfig",
    "BenchConfig",
    "OperationSpec",
    "load_yaml",
    "load_demo_config",
    "check_demo_config",
    "load_bench_config",
]

OPERATION_KINDS = {"sort", "filter"}


@dataclass(frozen=True)
class DemoConfig:
    values: List[Any] = field(default_factory=lambda: [7, 2, 9, 6, 1, 4, 5, 3, 10, 8])
    filter_values: List[Any] = field(default_factory=lambda: list(range(1, 11)))
    comparators: List[Any] = field(default_factory=lambda: ["greater_than", "less_than"])
    predicates: List[Any] = field(
        default_factory=lambda: [
            "is_odd",
            "is_even",
            {"name": "divisible_by", "params": {"k": 3}},
        ]
    )
    words: List[str] = field(
        default_factory=lambda: ["pear", "fig", "banana", "kiwi", "apple", "cherry"]
    )
    records_sort: Any = field(
        default_factory=lambda: {"name": "by_field", "params": {"field": "age"}}
    )


@dataclass(frozen=True)
class OperationSpec:
    name: str
    op: str
    delegate: Any


@dataclass(frozen=True)
class BenchConfig:
    experiment_name: str = "quadratic_scaling"
    seed: int = 12345
    repeats: int = 5
    warmup: bool = True
    disable_gc: bool = True
    timeout_seconds: float = 5.0
    dataset: Dict[str, Any] = field(default_factory=lambda: {"dist": "shuffled", "params": {}})
    sizes: List[int] = field(default_factory=lambda: [100, 200, 400, 800])
    operations: List[OperationSpec] = field(
        default_factory=lambda: [
            OperationSpec("bubble_ascending", "sort", "greater_than"),
            OperationSpec("bubble_descending", "sort", "less_than"),
            OperationSpec("filter_even", "filter", "is_even"),
        ]
    )


# ------------------------- loading ------------------------- #


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a YAML mapping at the top level")
    return data


def load_demo_config(path: Optional[Path] = None) -> DemoConfig:
    """Load a DemoConfig from YAML (defaults if `path` is None)."""
    raw = load_yaml(path) if path is not None else {}
    _reject_unknown(raw, DemoConfig)
    cfg = DemoConfig(**raw)
    check_demo_config(cfg)
    return cfg


def check_demo_config(cfg: DemoConfig) -> None:
    """
    Resolve every delegate and try it on the data it will run on.

    A delegate that resolves but cannot handle its input (e.g. `longer_than`
    on ints, or `by_field` naming a missing attribute) raises ValueError here
    instead of failing halfway through the demo.
    """
    for name in ("values", "filter_values", "comparators", "predicates", "words"):
        if not isinstance(getattr(cfg, name), list):
            raise ValueError(f"demo config '{name}' must be a list")

    for spec in cfg.comparators:
        _try_comparator(spec, cfg.values, "comparators")
    for spec in cfg.predicates:
        predicate = resolve_predicate(spec)
        try:
            for item in cfg.filter_values:
                predicate(item)
        except (TypeError, AttributeError, KeyError) as e:
            raise ValueError(f"predicate {spec!r} does not apply to filter_values: {e}") from e
    _try_comparator("longer_than", cfg.words, "words")
    _try_comparator(cfg.records_sort, SAMPLE_EMPLOYEES, "records_sort")


def _try_comparator(spec: Any, items: List[Any], where: str) -> None:
    compare = resolve_comparator(spec)
    try:
        for a, b in zip(items, items[1:]):
            compare(a, b)
    except (TypeError, AttributeError, KeyError) as e:
        raise ValueError(f"{where}: comparator {spec!r} does not apply to its input: {e}") from e


def load_bench_config(path: Optional[Path] = None) -> BenchConfig:
    """Load a BenchConfig from YAML (defaults if `path` is None)."""
    raw = load_yaml(path) if path is not None else {}
    _reject_unknown(raw, BenchConfig)

    if "operations" in raw:
        raw["operations"] = _parse_operations(raw["operations"])
    cfg = BenchConfig(**raw)

    sizes = list(cfg.sizes)
    if not sizes or not all(isinstance(n, int) and n >= 0 for n in sizes):
        raise ValueError("bench config 'sizes' must be a non-empty list of nonnegative integers")
    if not isinstance(cfg.repeats, int) or cfg.repeats < 1:
        raise ValueError(f"bench config 'repeats' must be an integer >= 1; got {cfg.repeats!r}")
    if not isinstance(cfg.seed, int) or isinstance(cfg.seed, bool):
        raise ValueError(f"bench config 'seed' must be an integer; got {cfg.seed!r}")
    for name in ("warmup", "disable_gc"):
        if not isinstance(getattr(cfg, name), bool):
            raise ValueError(f"bench config '{name}' must be true or false; got {getattr(cfg, name)!r}")
    if not isinstance(cfg.timeout_seconds, (int, float)) or isinstance(cfg.timeout_seconds, bool):
        raise ValueError(f"bench config 'timeout_seconds' must be a number; got {cfg.timeout_seconds!r}")
    if cfg.timeout_seconds <= 0:
        raise ValueError("bench config 'timeout_seconds' must be positive")
    if not isinstance(cfg.dataset, dict):
        raise ValueError(f"bench config 'dataset' must be a mapping; got {cfg.dataset!r}")
    # Validate the dataset spec with a zero-length draw.
    make_dataset(0, dict(cfg.dataset), np.random.default_rng(cfg.seed))
    return cfg


def _parse_operations(entries: Any) -> List[OperationSpec]:
    if not isinstance(entries, list) or not entries:
        raise ValueError("bench config 'operations' must be a non-empty list")
    ops: List[OperationSpec] = []
    seen = set()
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Each operation must be a mapping; got {entry!r}")
        missing = [k for k in ("name", "op", "delegate") if k not in entry]
        if missing:
            raise ValueError(f"Operation {entry!r} is missing keys: {missing}")
        name = entry["name"]
        if not isinstance(name, str) or not name:
            raise ValueError("Each operation must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate operation name in config: {name}")
        seen.add(name)
        op = entry["op"]
        if op not in OPERATION_KINDS:
            raise ValueError(
                f"Operation {name!r}: unsupported op {op!r}. Supported: {sorted(OPERATION_KINDS)}"
            )
        if op == "sort":
            resolve_comparator(entry["delegate"])
        else:
            resolve_predicate(entry["delegate"])
        ops.append(OperationSpec(name=name, op=op, delegate=entry["delegate"]))
    return ops


def _reject_unknown(raw: Dict[str, Any], cls: type) -> None:
    allowed = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ValueError(f"Unknown config keys for {cls.__name__}: {unknown}")
