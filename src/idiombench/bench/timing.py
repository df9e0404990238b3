"""Timing capture for benchmark workloads.

Every duration in idiombench is an integer count of nanoseconds read
from ``time.perf_counter_ns``, a monotonic high-resolution clock.  Ratios
are only ever taken between values from this one source, so no unit
conversion happens before division.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from idiombench.bench.errors import InvalidArgument

log = logging.getLogger("idiombench")

Workload = Callable[[], object]


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------


def check_iterations(iterations: object) -> int:
    """Return *iterations* if it is a positive int, else raise InvalidArgument.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidArgument(
            f"Iteration count must be an integer, got {type(iterations).__name__}."
        )
    if iterations < 1:
        raise InvalidArgument(f"Iteration count must be >= 1 (got {iterations}).")
    return iterations


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


def measure(workload: Workload, iterations: int) -> int:
    """Call *workload* *iterations* times and return the elapsed nanoseconds.

    The clock is read immediately before the first call and immediately
    after the last, so loop overhead is included in the result exactly
    as it is for every other case measured this way.

    Exceptions raised by *workload* propagate unchanged and no duration
    is returned.

    Args:
        workload: Zero-argument callable.
        iterations: Number of calls, at least 1.

    Returns:
        Elapsed wall-clock time in nanoseconds (never negative).

    Raises:
        InvalidArgument: If *iterations* is not a positive integer.
    """
    check_iterations(iterations)
    loop = range(iterations)

    start = time.perf_counter_ns()
    for _ in loop:
        workload()
    elapsed = time.perf_counter_ns() - start

    return max(elapsed, 0)


def warm_up(workload: Workload, rounds: int) -> None:
    """Call *workload* *rounds* times without timing it."""
    if rounds < 0:
        raise InvalidArgument(f"Warm-up rounds cannot be negative (got {rounds}).")
    for _ in range(rounds):
        workload()
    if rounds:
        log.debug("Warm-up: %d untimed call(s)", rounds)
