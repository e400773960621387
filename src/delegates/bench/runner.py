"""
Benchmark runner: sweeps the configured operations over growing input sizes.

Usage (from repo root):
    python -m delegates.bench.runner                     # built-in defaults
    python -m delegates.bench.runner configs/bench.yaml

Reports on the console only (nothing is written to disk):
    - environment line (python, numpy, pandas, cores, RAM)
    - per (operation, n): median time ± IQR and delegate calls per run

Design notes:
- For each size n, we generate ONE dataset and give a copy of it to every operation.
- Each operation's output is checked against the oracle; a mismatch counts as an error.
- On timeout/error for an operation at size n, we skip larger sizes for it.
- The sort always makes n*(n-1)/2 comparator calls, which the "calls" column shows.
"""

from __future__ import annotations

import argparse
import logging
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
from rich.table import Table
from tqdm import tqdm

from delegates.algorithms import bubble_sort, filter_list, resolve_comparator, resolve_predicate
from delegates.bench.measure import CallCounter, time_call
from delegates.config import BenchConfig, OperationSpec, load_bench_config
from delegates.console import configure_logging, console
from delegates.datasets import make_dataset
from delegates.validate import oracle_filter, oracle_sort

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["op", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "calls"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class PreparedOp:
    name: str
    op_fn: Callable[[List[Any]], List[Any]]
    expected_fn: Callable[[List[Any]], List[Any]]
    counter: CallCounter


def _prepare(spec: OperationSpec) -> PreparedOp:
    if spec.op == "sort":
        compare = resolve_comparator(spec.delegate)
        counter = CallCounter(compare)

        def op_fn(arg: List[Any]) -> List[Any]:
            bubble_sort(arg, counter)
            return arg

        return PreparedOp(spec.name, op_fn, lambda a: oracle_sort(a, compare), counter)

    predicate = resolve_predicate(spec.delegate)
    counter = CallCounter(predicate)
    return PreparedOp(
        spec.name,
        lambda arg: filter_list(arg, counter),
        lambda a: oracle_filter(a, predicate),
        counter,
    )


# ------------------------- helpers: meta & summary ------------------------- #

def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "cpu": platform.processor() or platform.machine(),
        "cores_logical": psutil.cpu_count(logical=True),
        "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
    }


def _iqr(s: pd.Series) -> float:
    return s.quantile(0.75) - s.quantile(0.25)


def aggregate_summary(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Median/IQR/min/max of time and median delegate calls per (op, n)."""
    df = pd.DataFrame.from_records(records, columns=["op", "n", "trial", "time_ns", "calls"])
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["op", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            calls=("calls", "median"),
        )
    )
    int_cols = ["median_ns", "iqr_ns", "min_ns", "max_ns", "calls"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["op", "n"], ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int], failures: Dict[str, str]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms, delegate calls)")
    table.add_column("Operation", style="bold")
    first, mid, last = sizes[0], sizes[len(sizes) // 2], sizes[-1]
    picks: List[Tuple[str, int]] = [(f"n={n}", n) for n in dict.fromkeys([first, mid, last])]
    for hdr, _ in picks:
        table.add_column(hdr, justify="right")
    table.add_column("Status")

    def _format_cell(median_ns: int, iqr_ns: int, calls: int) -> str:
        return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f} ({calls})"

    names = list(dict.fromkeys(list(summary["op"].unique()) + list(failures)))
    for name in names:
        row = [name]
        for _, npick in picks:
            s = summary[(summary["op"] == name) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                row.append(
                    _format_cell(
                        int(s["median_ns"].values[0]),
                        int(s["iqr_ns"].values[0]),
                        int(s["calls"].values[0]),
                    )
                )
        row.append(f"[red]{failures[name]}[/]" if name in failures else "[green]ok[/]")
        table.add_row(*row)
    console.print()
    console.print(table)
    console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(cfg: BenchConfig, *, progress: bool = True) -> pd.DataFrame:
    """
    Run the sweep described by `cfg` and return the per-(op, n) summary.

    Operations that fail or time out at some n are reported in the console
    table and skipped for larger sizes.
    """
    ops = [_prepare(spec) for spec in cfg.operations]
    rng = np.random.default_rng(int(cfg.seed))
    records: List[Dict[str, Any]] = []
    failures: Dict[str, str] = {}

    meta = _gather_meta()
    console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    console.print(f"[bold]Operations:[/bold] {', '.join(op.name for op in ops)}")
    console.print(
        f"[dim]python {meta['python']} · numpy {meta['numpy']} · pandas {meta['pandas']} · "
        f"{meta['cpu']} ×{meta['cores_logical']} · {meta['ram_gb']} GB[/dim]"
    )

    sizes = list(cfg.sizes)
    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not progress):
        base_a = make_dataset(int(n), dict(cfg.dataset), rng)

        for op in ops:
            if op.name in failures:
                continue

            res = time_call(
                name=op.name,
                op_fn=op.op_fn,
                a=base_a,
                repeats=int(cfg.repeats),
                warmup=bool(cfg.warmup),
                disable_gc=bool(cfg.disable_gc),
                timeout_seconds=float(cfg.timeout_seconds),
                counter=op.counter,
            )

            if res["status"] != "error" and res["output"] != op.expected_fn(base_a):
                res["status"] = "error"
                res["error"] = f"output differs from oracle at n={n}"

            if res["status"] == "error":
                logger.warning("%s: %s", op.name, res["error"])
                failures[op.name] = f"error at n={n}"
                continue

            for trial, (t_ns, calls) in enumerate(zip(res["samples_ns"], res["calls"])):
                records.append(
                    {"op": op.name, "n": int(n), "trial": trial, "time_ns": int(t_ns), "calls": int(calls)}
                )

            if res["status"] == "timeout":
                logger.info("%s timed out at n=%d (repeat %s)", op.name, n, res["timed_out_on_repeat"])
                failures[op.name] = f"timeout at n={n}"

    summary = aggregate_summary(records)
    _print_rich_summary(summary, sizes, failures)
    return summary


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Time the delegate-driven sort and filter over growing inputs.")
    p.add_argument("config", nargs="?", type=str, help="Path to YAML bench config (defaults built in)")
    p.add_argument("--no-progress", action="store_true", help="Hide the tqdm progress bar")
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
        cfg = load_bench_config(config_path)
        run_experiment(cfg, progress=not args.no_progress)
    except Exception as e:
        console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
