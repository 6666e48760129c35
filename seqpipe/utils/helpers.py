"""Timing helper for comparing lazy pipelines against eager code."""

import time
from typing import Callable, Dict, List

from ..errors import InvalidArgument


def time_calls(func: Callable[[], object], iterations: int = 10) -> Dict[str, float]:
    """
    Run func repeatedly and summarize the timings in nanoseconds.

    Each call should build and drive its own pipeline; reusing one
    generator-backed sequence across iterations would time an empty run.
    """
    if iterations < 1:
        raise InvalidArgument(f"iterations must be >= 1, got {iterations}")

    times: List[int] = []
    for _ in range(iterations):
        started = time.perf_counter_ns()
        func()
        times.append(time.perf_counter_ns() - started)

    times.sort()
    return {
        'median_ns': times[len(times) // 2],
        'mean_ns': sum(times) / len(times),
        'min_ns': times[0],
        'iterations': iterations,
    }
