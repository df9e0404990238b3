"""Benchmark execution engine.

Runs suites strictly one after another and cases strictly one after
another.  For each case:

1. Optional untimed warm-up calls.
2. ``measure`` over the suite's iteration count.
3. ``record`` into the suite.

Once every case of a suite has been recorded the suite is reduced to a
``SuiteReport`` against its baseline.  A workload that raises stops the
whole run: the failing suite and case are logged and kept on the runner,
and the original exception propagates to the caller.
"""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass
from typing import Callable

from idiombench.bench.catalog import SuiteDef, select_suites
from idiombench.bench.config import BenchConfig, raise_for_errors, validate_config
from idiombench.bench.results import (
    BenchmarkSuite,
    SuiteReport,
    record,
    summarize,
)
from idiombench.bench.system import running_under_tracer
from idiombench.bench.timing import Workload, measure, warm_up
from idiombench.formatting import format_elapsed
from idiombench.logging import get_logger

log = get_logger("runner")


# ---------------------------------------------------------------------------
# Progress callback
# ---------------------------------------------------------------------------


@dataclass
class BenchProgress:
    """Progress info passed to the callback."""

    phase: str  # "warmup", "measure", "done"
    suite: str
    case: str
    index: int  # 1-based case number within the suite
    iterations: int
    elapsed_ns: int = 0


ProgressCallback = Callable[[BenchProgress], None]


@dataclass(frozen=True)
class CaseFailure:
    """Where a run stopped because a workload raised."""

    suite: str
    case: str
    error: BaseException


# ---------------------------------------------------------------------------
# BenchmarkRunner
# ---------------------------------------------------------------------------


class BenchmarkRunner:
    """Measures registered suites according to a BenchConfig.

    Usage::

        runner = BenchmarkRunner(BenchConfig(iterations=100_000))
        reports = runner.run()
    """

    def __init__(
        self,
        config: BenchConfig | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self.config = config or BenchConfig()
        self.progress: ProgressCallback = progress_callback or self._default_progress
        self.failure: CaseFailure | None = None

    @staticmethod
    def measure(workload: Workload, iterations: int) -> int:
        """Time *iterations* calls of *workload*; see :func:`timing.measure`."""
        return measure(workload, iterations)

    def run(self, suite_defs: list[SuiteDef] | None = None) -> list[SuiteReport]:
        """Run suites in order and return one report per suite.

        Args:
            suite_defs: Suites to run.  Defaults to the config's
                selection (every registered suite if none is named).

        Raises:
            InvalidArgument: If the configuration is invalid.
            Exception: Whatever a workload raises, unchanged.
        """
        raise_for_errors(validate_config(self.config))
        if running_under_tracer():
            log.warning("A trace/profile hook is active; timings will be inflated.")

        if suite_defs is None:
            suite_defs = select_suites(self.config.suites)

        self.failure = None
        reports: list[SuiteReport] = []
        for suite_def in suite_defs:
            suite = self.run_suite(suite_def)
            mode = self.config.baseline_for(suite_def.baseline_mode)
            reports.append(summarize(suite, mode))
        log.info("Completed %d suite(s)", len(reports))
        return reports

    def run_suite(self, suite_def: SuiteDef) -> BenchmarkSuite:
        """Measure every case of one suite and return the filled suite."""
        iterations = suite_def.iterations_for(self.config.iterations)
        suite = BenchmarkSuite(
            name=suite_def.name,
            iterations=iterations,
            title=suite_def.title,
        )
        log.info("Suite '%s': %d iterations per case", suite_def.name, iterations)

        with closing(suite_def.cases()) as cases:
            for index, (label, workload) in enumerate(cases, start=1):
                self._run_case(suite, label, workload, index)

        log.debug("Suite '%s' recorded %d case(s)", suite.name, len(suite))
        return suite

    def _run_case(
        self,
        suite: BenchmarkSuite,
        label: str,
        workload: Workload,
        index: int,
    ) -> None:
        try:
            if self.config.warmup:
                self.progress(BenchProgress("warmup", suite.name, label, index, suite.iterations))
                warm_up(workload, self.config.warmup)
            self.progress(BenchProgress("measure", suite.name, label, index, suite.iterations))
            elapsed = measure(workload, suite.iterations)
        except Exception as exc:
            self.failure = CaseFailure(suite=suite.name, case=label, error=exc)
            log.error(
                "Suite '%s' aborted: case '%s' raised %s",
                suite.name,
                label,
                type(exc).__name__,
            )
            raise

        record(suite, label, elapsed)
        self.progress(
            BenchProgress("done", suite.name, label, index, suite.iterations, elapsed_ns=elapsed)
        )

    @staticmethod
    def _default_progress(progress: BenchProgress) -> None:
        """Default progress callback: one log line per finished case."""
        if progress.phase != "done":
            return
        log.info(
            "  [%d] %-40s %12s",
            progress.index,
            progress.case,
            format_elapsed(progress.elapsed_ns),
        )
