"""
Walk through the delegate examples on the console.

Usage (from repo root):
    python -m delegates.demo
    python -m delegates.demo configs/demo.yaml
    python -m delegates.demo --values 5 3 8 1

Each step prints the sequence one element per line, before and after the
operation. Sorting happens in place on a copy of the configured values so
every comparator starts from the same input; filtering returns a new list.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, List, Optional

import yaml
from rich.markup import escape
from rich.rule import Rule

from delegates.algorithms import (
    bubble_sort,
    filter_list,
    longer_than,
    resolve_comparator,
    resolve_predicate,
)
from delegates.config import DemoConfig, check_demo_config, load_demo_config
from delegates.console import configure_logging, console
from delegates.datasets import SAMPLE_EMPLOYEES

logger = logging.getLogger(__name__)


def _spec_label(spec: Any) -> str:
    if isinstance(spec, str):
        return spec
    params = spec.get("params") or {}
    args = ", ".join(f"{k}={v!r}" for k, v in params.items())
    label = f"{spec['name']}({args})" if args else spec["name"]
    return f"not {label}" if spec.get("negate") else label


def print_items(title: str, items: Iterable[Any]) -> None:
    console.print(f"[bold]{title}[/bold]")
    for item in items:
        console.print(f"  {item}")


def sort_step(title: str, values: List[Any], spec: Any) -> List[Any]:
    """Sort a copy of `values` with the comparator `spec`, printing both sides."""
    compare = resolve_comparator(spec)
    work = list(values)
    console.print(Rule(f"{title}: bubble_sort with {_spec_label(spec)}"))
    print_items("before", work)
    bubble_sort(work, compare)
    print_items("after", work)
    logger.debug("sorted %d items with %s", len(work), _spec_label(spec))
    return work


def filter_step(values: List[Any], spec: Any) -> List[Any]:
    predicate = resolve_predicate(spec)
    console.print(Rule(f"filter_list with {_spec_label(spec)}"))
    print_items("before", values)
    kept = filter_list(values, predicate)
    print_items("after", kept)
    logger.debug("kept %d of %d items", len(kept), len(values))
    return kept


def run_demo(cfg: DemoConfig) -> None:
    for spec in cfg.comparators:
        sort_step("numbers", cfg.values, spec)

    for spec in cfg.predicates:
        filter_step(cfg.filter_values, spec)

    console.print(Rule("words: bubble_sort with longer_than"))
    words = list(cfg.words)
    print_items("before", words)
    bubble_sort(words, longer_than)
    print_items("after", words)

    sort_step("records", SAMPLE_EMPLOYEES, cfg.records_sort)


def _parse_values(raw: List[str]) -> List[Any]:
    try:
        return [int(v) for v in raw]
    except ValueError:
        return list(raw)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Demonstrate sorting and filtering with injected functions.")
    p.add_argument("config", nargs="?", type=str, help="Path to YAML demo config (defaults built in)")
    p.add_argument(
        "--values",
        nargs="+",
        metavar="V",
        help=(
            "Replace the numbers to sort and filter. If any value is not an integer, "
            "all values are treated as strings (so 10 sorts before 9) and the filters "
            "keep their configured input"
        ),
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.verbose)

    config_path = None
    if args.config:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            raise SystemExit(f"Config file not found: {config_path}")
    try:
        cfg = load_demo_config(config_path)
        if args.values:
            values = _parse_values(args.values)
            cfg = replace(cfg, values=values)
            # The number predicates only apply to ints; strings keep the default filter input.
            if all(isinstance(v, int) for v in values):
                cfg = replace(cfg, filter_values=values)
            check_demo_config(cfg)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[bold red]Bad demo config:[/bold red] {escape(str(e))}")
        raise SystemExit(2) from e

    try:
        run_demo(cfg)
    except (TypeError, AttributeError, KeyError) as e:
        # Mixed-type inputs can still trip a delegate past the first elements.
        logger.debug("demo step failed", exc_info=True)
        console.print(f"[bold red]Demo step failed:[/bold red] {escape(str(e))}")
        raise SystemExit(2) from e


if __name__ == "__main__":
    main()
