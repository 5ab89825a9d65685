"""
Timing harness for the in-place sorts.

Each sample times exactly one `sort(copy, ordering=..., stats=None)` call on a
fresh copy of the input, using a monotonic high-resolution clock. Copying,
GC control and warmup all happen outside the timed block.

Because the sorts are deterministic, comparison and exchange counts come from
one extra untimed sort before the timed loop. Every timed sample passes
`stats=None`, so counting never shows up in the timings.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each finished sample
        "comparisons": int | None,          # from the untimed counting run
        "exchanges": int | None,
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from sortkit.ordering import Ordering, SortStats

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: List[Any],
    ordering: Optional[Ordering],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated in-place sorts of copies of `a`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., None]
        A `sort(a, lo=None, hi=None, *, ordering=None, stats=None)` function.
    a : list
        Input sequence. Never handed to the algorithm directly.
    ordering : callable | None
        Three-way comparator passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, sort one untimed copy first. The counting run always happens
        when repeats > 0, warmup or not.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample exceeding it marks status="timeout"
        and stops further sampling.

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
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "comparisons": None,
        "exchanges": None,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a), ordering=ordering)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    if repeats > 0:
        stats = SortStats()
        try:
            algo_fn(list(a), ordering=ordering, stats=stats)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"counting run failed: {e!r}"
            return result
        result["comparisons"] = stats.comparisons
        result["exchanges"] = stats.exchanges

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, ordering=ordering, stats=None)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
