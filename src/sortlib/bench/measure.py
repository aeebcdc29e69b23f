"""
Timing harness for the in-place sorting algorithms.

We measure exactly one call of `sort_fn(seq, counter)` per sample, using a
monotonic high-resolution clock. Every sample sorts a fresh copy of the input;
copying, GC and verification happen outside the timed block.

Public API (stable):
    time_sort_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "comparisons": list[int],           # comparator / key calls per sample
        "verified": bool,                   # every completed sample was ordered
        "status": "ok" | "timeout" | "error" | "unsorted",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, MutableSequence

from sortlib.contracts import CallCounter, Comparator
from sortlib.validate.verify import verify_sort

__all__ = ["time_sort_call"]

logger = logging.getLogger(__name__)

SortFn = Callable[[MutableSequence[Any], CallCounter], None]


def time_sort_call(
    *,
    algo_name: str,
    sort_fn: SortFn,
    a: List[Any],
    compare: Comparator,
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
        Logical name of the algorithm (for logs/records).
    sort_fn : Callable[[list, CallCounter], None]
        Sorts its first argument in place, counting calls on the counter.
    a : list
        Input records. Never mutated; each sample works on a copy.
    compare : Comparator
        Ordering the result is verified against.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample exceeding it marks status="timeout" and
        stops further sampling.

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
        "comparisons": [],
        "verified": True,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            sort_fn(list(a), CallCounter())
        except Exception as e:
            logger.warning("%s: warmup failed: %r", algo_name, e)
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
            seq = list(a)
            counter = CallCounter()
            try:
                t0 = time.perf_counter_ns()
                sort_fn(seq, counter)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: run failed at repeat %d: %r", algo_name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["comparisons"].append(counter.calls)

            if not verify_sort(seq, compare):
                logger.error("%s: output not ordered at repeat %d", algo_name, r)
                result["verified"] = False
                result["status"] = "unsorted"
                break

            if elapsed > threshold_ns:
                logger.info("%s: sample %d exceeded %.3fs", algo_name, r, timeout_seconds)
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # If GC was previously disabled, leave it disabled (respect caller's global state).
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
