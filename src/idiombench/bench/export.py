"""Export benchmark reports to CSV, Markdown and JSON.

CSV is long format (one row per suite x case) for pandas/R.  Markdown
gives one table per suite for READMEs and issues.  JSON carries the
run configuration and system profile alongside the rows.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from idiombench.bench.results import SuiteReport
from idiombench.bench.system import SystemProfile
from idiombench.formatting import format_elapsed, format_ratio


# ---------------------------------------------------------------------------
# CSV export
# ---------------------------------------------------------------------------


def export_csv(reports: list[SuiteReport], precision: int = 2) -> str:
    """Export reports as CSV.

    Columns:
        suite, case, rank, iterations, elapsed_ns, per_op_ns,
        baseline_mode, ratio
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(
        [
            "suite",
            "case",
            "rank",
            "iterations",
            "elapsed_ns",
            "per_op_ns",
            "baseline_mode",
            "ratio",
        ]
    )
    for rep in reports:
        for position, row in enumerate(rep.rows, start=1):
            writer.writerow(
                [
                    rep.suite.name,
                    row.name,
                    position,
                    row.iterations,
                    row.elapsed_ns,
                    f"{row.elapsed_ns / row.iterations:.3f}",
                    rep.mode.value,
                    f"{row.ratio:.{precision}f}",
                ]
            )
    return output.getvalue()


# ---------------------------------------------------------------------------
# Markdown export
# ---------------------------------------------------------------------------


def _md_escape(text: str) -> str:
    return text.replace("|", "\\|")


def export_markdown(reports: list[SuiteReport], precision: int = 2) -> str:
    """Export reports as Markdown, one headed table per suite."""
    lines: list[str] = []
    for rep in reports:
        if lines:
            lines.append("")
        reference = "fastest" if rep.mode.value == "min" else "slowest"
        lines.append(f"### {_md_escape(rep.suite.title or rep.suite.name)}")
        lines.append("")
        lines.append(
            f"{rep.suite.iterations:,} iterations per case; ratio relative to the "
            f"{reference} case."
        )
        lines.append("")
        lines.append("| Case | Elapsed | Per op | Ratio |")
        lines.append("|------|--------:|-------:|------:|")
        for row in rep.rows:
            lines.append(
                f"| {_md_escape(row.name)} "
                f"| {format_elapsed(row.elapsed_ns)} "
                f"| {format_elapsed(row.elapsed_ns / row.iterations)} "
                f"| {format_ratio(row.ratio, precision)} |"
            )
    return "\n".join(lines) + "\n" if lines else ""


# ---------------------------------------------------------------------------
# JSON export
# ---------------------------------------------------------------------------


def export_json(
    reports: list[SuiteReport],
    *,
    config: dict[str, Any] | None = None,
    system: SystemProfile | None = None,
) -> str:
    """Export reports plus run context as an indented JSON document."""
    doc: dict[str, Any] = {
        "config": config or {},
        "system": system.to_dict() if system else None,
        "suites": [rep.to_dict() for rep in reports],
    }
    return json.dumps(doc, indent=2) + "\n"
