"""
Timing harness for delegate-driven operations.

We measure exactly one call to `op_fn(arg)` per sample, using a monotonic
high-resolution clock. Copying the input, GC control and warmup all happen
outside the timed block. If a `CallCounter` wraps the injected delegate, its
count is reset before each sample and recorded alongside the elapsed time.

Public API (stable):
    CallCounter(fn)
    time_call(...) -> dict

Returned dict schema:
    {
        "name": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "calls": list[int],                 # delegate invocations per sample (empty if no counter)
        "output": list | None,              # result of the last successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["CallCounter", "time_call"]

logger = logging.getLogger(__name__)


class CallCounter:
    """Wrap a comparator or predicate and count how often it is invoked."""

    def __init__(self, fn: Callable[..., bool]) -> None:
        self.fn = fn
        self.calls = 0

    def __call__(self, *args: Any) -> bool:
        self.calls += 1
        return self.fn(*args)

    def reset(self) -> None:
        self.calls = 0


def time_call(
    *,
    name: str,
    op_fn: Callable[[List[Any]], List[Any]],
    a: List[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    counter: Optional[CallCounter] = None,
) -> Dict[str, Any]:
    """
    Time repeated calls to `op_fn(list(a))`.

    Parameters
    ----------
    name : str
        Logical name of the operation (for logs/records).
    op_fn : Callable[[list], list]
        Runs the operation on its argument and returns the result. In-place
        operations return the (mutated) argument.
    a : list
        Input data. Each sample gets a fresh copy, so `a` is never mutated.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample over it sets status="timeout" and stops sampling.
    counter : CallCounter | None
        The counting wrapper `op_fn` passes to the operation, if any.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "name": name,
        "repeats": repeats,
        "samples_ns": [],
        "calls": [],
        "output": None,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            op_fn(list(a))
        except Exception as e:
            logger.debug("warmup of %s failed", name, exc_info=True)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            if counter is not None:
                counter.reset()
            try:
                t0 = time.perf_counter_ns()
                out = op_fn(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.debug("%s failed at repeat %d", name, r, exc_info=True)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            if counter is not None:
                result["calls"].append(counter.calls)
            result["output"] = out

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # If GC was previously disabled, leave it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
