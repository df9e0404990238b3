"""Benchmark run configuration.

Handles:
- The resolved ``BenchConfig`` for a run.
- Loading run profiles from YAML files.
- Merging CLI options over profile values.
- Validating the final configuration before anything is timed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from idiombench.bench.catalog import suite_names
from idiombench.bench.errors import InvalidArgument
from idiombench.bench.results import BaselineMode

log = logging.getLogger("idiombench")

DEFAULT_ITERATIONS = 1_000_000
OUTPUT_FORMATS = ("text", "csv", "markdown", "json")
MAX_PRECISION = 6
# Below this the clock's resolution is a visible share of each case.
LOW_ITERATION_WARNING = 1_000


# ---------------------------------------------------------------------------
# BenchConfig
# ---------------------------------------------------------------------------


@dataclass
class BenchConfig:
    """Resolved configuration for a benchmark run."""

    name: str = ""

    # Iteration control
    iterations: int = DEFAULT_ITERATIONS
    warmup: int = 0  # untimed calls per case before measuring

    # Reporting
    baseline_mode: BaselineMode | None = None  # None = each suite's default
    precision: int = 2
    output_format: str = "text"
    output_path: Path | None = None

    # Suite selection; None runs everything registered.
    suites: list[str] | None = None

    def baseline_for(self, default: BaselineMode) -> BaselineMode:
        """The baseline mode to use for a suite whose own default is *default*."""
        return self.baseline_mode or default

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "iterations": self.iterations,
            "warmup": self.warmup,
            "baseline": self.baseline_mode.value if self.baseline_mode else None,
            "precision": self.precision,
            "format": self.output_format,
            "suites": self.suites,
        }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A single configuration validation problem."""

    field: str
    message: str
    severity: str = "error"  # "error" or "warning"


def validate_config(config: BenchConfig) -> list[ValidationError]:
    """Validate a run configuration.

    Returns a list of problems; an empty list means valid.
    """
    errors: list[ValidationError] = []

    if isinstance(config.iterations, bool) or not isinstance(config.iterations, int):
        errors.append(
            ValidationError(
                field="iterations",
                message=f"Iterations must be an integer (got {config.iterations!r}).",
            )
        )
    elif config.iterations < 1:
        errors.append(
            ValidationError(
                field="iterations",
                message=f"Need at least 1 iteration (got {config.iterations}).",
            )
        )
    elif config.iterations < LOW_ITERATION_WARNING:
        errors.append(
            ValidationError(
                field="iterations",
                message=(
                    f"Only {config.iterations} iterations; timer resolution may "
                    f"dominate the measurements."
                ),
                severity="warning",
            )
        )

    if isinstance(config.warmup, bool) or not isinstance(config.warmup, int):
        errors.append(
            ValidationError(
                field="warmup",
                message=f"Warm-up calls must be an integer (got {config.warmup!r}).",
            )
        )
    elif config.warmup < 0:
        errors.append(
            ValidationError(
                field="warmup",
                message=f"Warm-up calls cannot be negative (got {config.warmup}).",
            )
        )

    if isinstance(config.precision, bool) or not isinstance(config.precision, int):
        errors.append(
            ValidationError(
                field="precision",
                message=f"Precision must be an integer (got {config.precision!r}).",
            )
        )
    elif not 0 <= config.precision <= MAX_PRECISION:
        errors.append(
            ValidationError(
                field="precision",
                message=f"Precision must be between 0 and {MAX_PRECISION} (got {config.precision}).",
            )
        )

    if config.output_format not in OUTPUT_FORMATS:
        errors.append(
            ValidationError(
                field="output_format",
                message=(
                    f"Unknown output format '{config.output_format}'. "
                    f"Choose one of: {', '.join(OUTPUT_FORMATS)}."
                ),
            )
        )

    if config.suites:
        known = set(suite_names())
        for name in config.suites:
            if name not in known:
                errors.append(
                    ValidationError(
                        field="suites",
                        message=f"Unknown suite '{name}'. Use 'idiombench list' to see suites.",
                    )
                )

    return errors


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a run profile from a YAML file.

    Profile format::

        name: "quick comparison"
        iterations: 100000
        warmup: 1000
        baseline: min
        precision: 3
        format: markdown
        suites: [exceptions, calls]

    Returns:
        The parsed YAML mapping.
    """
    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    data = yaml.safe_load(profile_path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")
    return data


def _parse_suites(value: Any) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    if isinstance(value, list):
        return [str(s) for s in value]
    raise ValueError(f"'suites' must be a list or comma-separated string, got {type(value).__name__}")


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> BenchConfig:
    """Build a BenchConfig from a parsed profile.

    Non-None CLI overrides win over profile values.  Override keys:
    name, iterations, warmup, baseline, precision, format, output,
    suites.

    Raises:
        InvalidArgument: If a baseline mode string is not min/max.
        ValueError: If ``suites`` has the wrong shape.
    """
    cli = {k: v for k, v in (cli_overrides or {}).items() if v is not None}

    def pick(key: str, default: Any) -> Any:
        if key in cli:
            return cli[key]
        return profile_data.get(key, default)

    baseline_value = pick("baseline", None)
    output_value = pick("output", None)

    suites = cli.get("suites") or _parse_suites(profile_data.get("suites"))

    config = BenchConfig(
        name=pick("name", ""),
        iterations=pick("iterations", DEFAULT_ITERATIONS),
        warmup=pick("warmup", 0),
        baseline_mode=BaselineMode.parse(baseline_value) if baseline_value else None,
        precision=pick("precision", 2),
        output_format=str(pick("format", "text")).lower(),
        output_path=Path(output_value) if output_value else None,
        suites=list(suites) if suites else None,
    )
    log.debug("Resolved config: %s", config.to_dict())
    return config


def raise_for_errors(errors: list[ValidationError]) -> None:
    """Log warnings and raise InvalidArgument if any error is fatal."""
    for w in errors:
        if w.severity == "warning":
            log.warning("Config warning: %s: %s", w.field, w.message)
    fatal = [e for e in errors if e.severity == "error"]
    if fatal:
        messages = [f"  {e.field}: {e.message}" for e in fatal]
        raise InvalidArgument("Invalid benchmark configuration:\n" + "\n".join(messages))
