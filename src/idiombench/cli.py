"""Command-line interface for idiombench.

Subcommands:
    idiombench run      Measure suites and print their reports
    idiombench list     List registered suites
    idiombench system   Print interpreter and host details
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from idiombench import __version__
from idiombench.bench.catalog import all_suites
from idiombench.bench.config import OUTPUT_FORMATS, config_from_profile, load_profile
from idiombench.bench.display import format_failure, format_report
from idiombench.bench.errors import BenchError
from idiombench.bench.export import export_csv, export_json, export_markdown
from idiombench.bench.results import SuiteReport
from idiombench.bench.runner import BenchmarkRunner
from idiombench.bench.system import (
    SystemProfile,
    capture_system_profile,
    format_system_profile,
)
from idiombench.formatting import format_table
from idiombench.logging import setup_logging

log = logging.getLogger("idiombench")


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """idiombench: compare the relative cost of small Python idioms."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


def _render(
    reports: list[SuiteReport],
    fmt: str,
    precision: int,
    system: SystemProfile,
    config: dict[str, object],
) -> str:
    if fmt == "csv":
        return export_csv(reports, precision)
    if fmt == "markdown":
        return export_markdown(reports, precision)
    if fmt == "json":
        return export_json(reports, config=config, system=system)
    blocks = [
        format_report(rep.suite, rep.rows, rep.mode, precision=precision, system=system)
        for rep in reports
    ]
    return "\n\n".join(blocks) + "\n"


@main.command()
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML profile with run settings.",
)
@click.option(
    "--suite",
    "suites",
    type=str,
    multiple=True,
    help="Suite to run (repeatable; default: all).",
)
@click.option("--iterations", type=int, default=None, help="Calls per case (default: 1,000,000).")
@click.option("--warmup", type=int, default=None, help="Untimed calls per case before measuring.")
@click.option(
    "--baseline",
    type=click.Choice(["min", "max"], case_sensitive=False),
    default=None,
    help="Ratio reference: fastest (min) or slowest (max) case. Default: per suite.",
)
@click.option("--precision", type=int, default=None, help="Decimal places for ratios (default: 2).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: text).",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the report to a file instead of stdout.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a DEBUG log to this file.",
)
def run(  # noqa: PLR0913
    profile_path: Path | None,
    suites: tuple[str, ...],
    iterations: int | None,
    warmup: int | None,
    baseline: str | None,
    precision: int | None,
    output_format: str | None,
    output: Path | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Measure suites and print a ranked report for each.

    \b
    Examples:
      idiombench run
      idiombench run --suite exceptions --suite calls --iterations 100000
      idiombench run --baseline min --format markdown --output report.md
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        profile = load_profile(profile_path) if profile_path else {}
        config = config_from_profile(
            profile,
            cli_overrides={
                "iterations": iterations,
                "warmup": warmup,
                "baseline": baseline,
                "precision": precision,
                "format": output_format,
                "output": str(output) if output else None,
                "suites": list(suites) or None,
            },
        )
    except (ValueError, FileNotFoundError) as exc:
        raise click.UsageError(str(exc)) from exc

    host = capture_system_profile()
    runner = BenchmarkRunner(config)
    try:
        reports = runner.run()
    except Exception as exc:
        if runner.failure is None:
            if isinstance(exc, BenchError):
                raise click.UsageError(str(exc)) from exc
            raise
        click.echo(format_failure(runner.failure.suite, runner.failure.case, exc), err=True)
        sys.exit(1)

    text = _render(reports, config.output_format, config.precision, host, config.to_dict())
    if config.output_path is not None:
        config.output_path.write_text(text, encoding="utf-8")
        log.info("Report written to %s", config.output_path)
    else:
        click.echo(text, nl=False)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@main.command("list")
@click.option("--cases", "show_cases", is_flag=True, help="Also list each suite's cases.")
def list_suites(show_cases: bool) -> None:
    """List registered suites."""
    rows = []
    for sd in all_suites():
        labels = sd.case_labels()
        rows.append(
            [sd.name, sd.title, str(len(labels)), sd.baseline_mode.value, f"1/{sd.scale}"]
        )
        if show_cases:
            rows.extend(["", f"  {label}", "", "", ""] for label in labels)
    click.echo(
        format_table(
            ["Suite", "Title", "Cases", "Baseline", "Scale"],
            rows,
            alignments="llrll",
            indent=0,
        )
    )


# ---------------------------------------------------------------------------
# system
# ---------------------------------------------------------------------------


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def system(as_json: bool) -> None:
    """Print interpreter and host details."""
    profile = capture_system_profile()
    if as_json:
        click.echo(profile.to_json())
    else:
        click.echo(format_system_profile(profile))
