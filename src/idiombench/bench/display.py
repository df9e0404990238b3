"""Terminal display formatting for benchmark reports.

One table per suite, slowest case first, with each case's elapsed time
expressed as a multiple of the suite baseline.
"""

from __future__ import annotations

from idiombench.bench.results import BaselineMode, BenchmarkSuite, ReportRow
from idiombench.bench.system import SystemProfile, format_system_line
from idiombench.formatting import (
    format_count,
    format_elapsed,
    format_ratio,
    format_section_header,
    format_table,
)

_HEADERS = ["Case", "Iterations", "Elapsed", "Per op", "Ratio"]
_ALIGN = "lrrrr"
_MAX_LABEL = 48


def format_rows(rows: list[ReportRow], precision: int = 2) -> str:
    """Format report rows as an aligned table."""
    cells = [
        [
            row.name,
            format_count(row.iterations),
            format_elapsed(row.elapsed_ns),
            format_elapsed(row.elapsed_ns / row.iterations),
            format_ratio(row.ratio, precision),
        ]
        for row in rows
    ]
    return format_table(_HEADERS, cells, alignments=_ALIGN, max_widths={0: _MAX_LABEL})


def format_report(
    suite: BenchmarkSuite,
    rows: list[ReportRow],
    mode: BaselineMode,
    *,
    precision: int = 2,
    system: SystemProfile | None = None,
) -> str:
    """Format one suite's report for display.

    Args:
        suite: The measured suite (for its title and iteration count).
        rows: Output of ``report()`` for that suite.
        mode: Baseline mode the ratios were computed against.
        precision: Decimal places for ratios.
        system: If given, a one-line interpreter summary is included.
    """
    lines = [format_section_header(suite.title or suite.name)]
    if system is not None:
        lines.append(f"  {format_system_line(system)}")
    reference = "fastest" if mode is BaselineMode.MIN else "slowest"
    lines.append(
        f"  {format_count(suite.iterations)} iterations per case; "
        f"ratio relative to the {reference} case"
    )
    lines.append("")
    lines.append(format_rows(rows, precision))
    return "\n".join(lines)


def format_failure(suite_name: str, case_name: str, exc: BaseException) -> str:
    """One-line message for a suite aborted by a failing workload."""
    detail = str(exc)
    kind = type(exc).__name__
    return (
        f"Suite '{suite_name}' aborted: case '{case_name}' raised "
        f"{kind}{': ' + detail if detail else ''}. No ranking was produced."
    )
