# vireo/bench.py
"""
Tiny benchmarking helper for combinator folds.

This is intentionally simple and does not depend on any external libs.

Usage:

    from vireo.bench import benchmark_fold
    from vireo import list_from_py

    stats = benchmark_fold(lambda: list_from_py(range(10_000)), repeats=20)
    print(stats)
"""

from __future__ import annotations
import time
from typing import Any, Callable, Dict

from .higher import length


def benchmark_fold(
    builder: Callable[[], Any],
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Run `repeats` length-folds over `builder()`.

    Building the list is not timed. Returns a small stats dict:
        {
            "repeats": N,
            "length": ...,
            "min_s": ...,
            "max_s": ...,
            "avg_s": ...,
            "total_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    times = []
    n = 0

    for _ in range(repeats):
        lst = builder()
        t0 = time.perf_counter()
        n = length(lst)
        t1 = time.perf_counter()
        times.append(t1 - t0)

    total = sum(times)
    return {
        "repeats": repeats,
        "length": n,
        "min_s": min(times),
        "max_s": max(times),
        "avg_s": total / repeats,
        "total_s": total,
    }
