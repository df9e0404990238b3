"""Benchmark result data structures and the rank/baseline/report reductions.

Hierarchy::

    BenchmarkSuite (one comparison, fixed iteration count)
      → cases: list[BenchmarkCase]   (insertion order)

    report(suite, baseline) → list[ReportRow]   (rank order)

A suite is created empty, filled by ``record``, reduced once by
``rank``/``baseline``/``report`` and then printed or exported.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any

from idiombench.bench.errors import EmptySuite, InvalidArgument
from idiombench.bench.timing import check_iterations


class BaselineMode(enum.Enum):
    """Which case duration a suite's ratios are expressed against."""

    MIN = "min"  # fastest case = 1.0, others >= 1.0
    MAX = "max"  # slowest case = 1.0, others <= 1.0

    @classmethod
    def parse(cls, value: str | BaselineMode) -> BaselineMode:
        """Accept a mode or a case-insensitive ``'min'``/``'max'`` string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgument(
                f"Baseline mode must be 'min' or 'max' (got {value!r})."
            ) from None


# ---------------------------------------------------------------------------
# Case and suite
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BenchmarkCase:
    """One measured workload."""

    name: str
    elapsed_ns: int
    iterations: int

    @property
    def per_op_ns(self) -> float:
        """Mean duration of a single call."""
        return self.elapsed_ns / self.iterations

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "elapsed_ns": self.elapsed_ns,
            "iterations": self.iterations,
        }


@dataclass
class BenchmarkSuite:
    """Ordered cases measured under one iteration count."""

    name: str
    iterations: int
    cases: list[BenchmarkCase] = field(default_factory=list)
    title: str = ""

    def __post_init__(self) -> None:
        check_iterations(self.iterations)

    def __len__(self) -> int:
        return len(self.cases)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "iterations": self.iterations,
            "cases": [c.to_dict() for c in self.cases],
        }


@dataclass(frozen=True)
class ReportRow:
    """One line of a comparison report."""

    name: str
    iterations: int
    elapsed_ns: int
    ratio: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "iterations": self.iterations,
            "elapsed_ns": self.elapsed_ns,
            "ratio": None if math.isnan(self.ratio) or math.isinf(self.ratio) else self.ratio,
        }


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def record(
    suite: BenchmarkSuite,
    name: str,
    elapsed_ns: int,
    *,
    iterations: int | None = None,
) -> BenchmarkCase:
    """Append a case to *suite* and return it.

    Names are not deduplicated.  *iterations* defaults to the suite's
    count; passing a different count is rejected because ratios between
    unequal workloads are meaningless.

    Raises:
        InvalidArgument: On a negative duration or mismatched iterations.
    """
    if elapsed_ns < 0:
        raise InvalidArgument(f"Duration for '{name}' cannot be negative (got {elapsed_ns}).")
    if iterations is not None and iterations != suite.iterations:
        raise InvalidArgument(
            f"Case '{name}' was measured over {iterations} iterations but suite "
            f"'{suite.name}' uses {suite.iterations}."
        )
    case = BenchmarkCase(name=name, elapsed_ns=elapsed_ns, iterations=suite.iterations)
    suite.cases.append(case)
    return case


def rank(suite: BenchmarkSuite) -> list[BenchmarkCase]:
    """Return cases slowest first; equal durations keep insertion order.

    Raises:
        EmptySuite: If *suite* has no cases.
    """
    if not suite.cases:
        raise EmptySuite(suite.name)
    # Stable sort: ties keep insertion order.
    return sorted(suite.cases, key=lambda c: -c.elapsed_ns)


def baseline(suite: BenchmarkSuite, mode: BaselineMode | str) -> int:
    """Return the minimum or maximum case duration of *suite*.

    Raises:
        EmptySuite: If *suite* has no cases.
        InvalidArgument: If *mode* is not a valid baseline mode.
    """
    mode = BaselineMode.parse(mode)
    if not suite.cases:
        raise EmptySuite(suite.name)
    durations = [c.elapsed_ns for c in suite.cases]
    return min(durations) if mode is BaselineMode.MIN else max(durations)


def _ratio(elapsed_ns: int, baseline_ns: int) -> float:
    if baseline_ns == 0:
        return 1.0 if elapsed_ns == 0 else math.inf
    return elapsed_ns / baseline_ns


def report(suite: BenchmarkSuite, baseline_ns: int) -> list[ReportRow]:
    """Express every case of *suite* as a multiple of *baseline_ns*.

    Rows follow ``rank`` order.  A zero baseline gives 1.0 for
    zero-duration cases and ``inf`` for the rest.

    Raises:
        EmptySuite: If *suite* has no cases.
        InvalidArgument: If *baseline_ns* is negative.
    """
    if baseline_ns < 0:
        raise InvalidArgument(f"Baseline duration cannot be negative (got {baseline_ns}).")
    return [
        ReportRow(
            name=c.name,
            iterations=c.iterations,
            elapsed_ns=c.elapsed_ns,
            ratio=_ratio(c.elapsed_ns, baseline_ns),
        )
        for c in rank(suite)
    ]


# ---------------------------------------------------------------------------
# Suite summary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SuiteReport:
    """A suite reduced against one baseline, ready to print or export."""

    suite: BenchmarkSuite
    mode: BaselineMode
    baseline_ns: int
    rows: list[ReportRow]

    def to_dict(self) -> dict[str, Any]:
        return {
            "suite": self.suite.name,
            "title": self.suite.title,
            "iterations": self.suite.iterations,
            "baseline_mode": self.mode.value,
            "baseline_ns": self.baseline_ns,
            "rows": [r.to_dict() for r in self.rows],
        }


def summarize(suite: BenchmarkSuite, mode: BaselineMode | str) -> SuiteReport:
    """Compute the baseline for *mode* and the report rows against it."""
    mode = BaselineMode.parse(mode)
    base = baseline(suite, mode)
    return SuiteReport(suite=suite, mode=mode, baseline_ns=base, rows=report(suite, base))
