"""Registry of named benchmark suites.

A suite is a generator function that yields ``(label, workload)`` pairs.
Any setup it needs (temporary files, prepared objects) lives in the
generator body, so it stays alive while the runner times each yielded
workload and is torn down when the generator is closed::

    @suite("strings", title="String building", baseline="min")
    def strings():
        parts = ["a"] * 100
        yield "join", lambda: "".join(parts)
        yield "concat", lambda: _concat(parts)

Built-in suites live in :mod:`idiombench.idioms` and are loaded on
first lookup.
"""

from __future__ import annotations

import importlib
from contextlib import closing
from dataclasses import dataclass
from typing import Callable, Iterator

from idiombench.bench.errors import InvalidArgument, UnknownSuite
from idiombench.bench.results import BaselineMode
from idiombench.bench.timing import Workload
from idiombench.logging import get_logger

log = get_logger("catalog")

CaseFactory = Callable[[], Iterator[tuple[str, Workload]]]

_BUILTIN_PACKAGE = "idiombench.idioms"


@dataclass
class SuiteDef:
    """A named, registered suite of comparable workloads."""

    name: str
    factory: CaseFactory
    title: str = ""
    description: str = ""
    baseline_mode: BaselineMode = BaselineMode.MAX
    scale: int = 1  # divides the configured iteration count

    def iterations_for(self, base_iterations: int) -> int:
        """Iteration count this suite runs at when the run asks for *base_iterations*."""
        return max(1, base_iterations // self.scale)

    def cases(self) -> Iterator[tuple[str, Workload]]:
        """Start a fresh case generator (performs the suite's setup)."""
        return self.factory()

    def case_labels(self) -> list[str]:
        """Labels in registration order.  Runs setup and teardown once."""
        with closing(self.cases()) as gen:
            return [label for label, _ in gen]


_REGISTRY: dict[str, SuiteDef] = {}
_builtins_loaded = False


def register(suite_def: SuiteDef) -> SuiteDef:
    """Add *suite_def* to the registry.

    Raises:
        InvalidArgument: If the name is empty or already registered, or
            the scale is not positive.
    """
    if not suite_def.name or not suite_def.name.strip():
        raise InvalidArgument("Suite names must be non-empty.")
    if suite_def.name in _REGISTRY:
        raise InvalidArgument(f"Suite '{suite_def.name}' is already registered.")
    if suite_def.scale < 1:
        raise InvalidArgument(
            f"Suite '{suite_def.name}' scale must be >= 1 (got {suite_def.scale})."
        )
    _REGISTRY[suite_def.name] = suite_def
    log.debug("Registered suite '%s'", suite_def.name)
    return suite_def


def unregister(name: str) -> None:
    """Remove a suite; unknown names are ignored."""
    _REGISTRY.pop(name, None)


def suite(
    name: str,
    *,
    title: str = "",
    baseline: BaselineMode | str = BaselineMode.MAX,
    scale: int = 1,
) -> Callable[[CaseFactory], CaseFactory]:
    """Decorator registering a generator function as a suite."""

    def decorator(factory: CaseFactory) -> CaseFactory:
        doc = (factory.__doc__ or "").strip()
        register(
            SuiteDef(
                name=name,
                factory=factory,
                title=title or name,
                description=doc.splitlines()[0] if doc else "",
                baseline_mode=BaselineMode.parse(baseline),
                scale=scale,
            )
        )
        return factory

    return decorator


def load_builtin_suites() -> None:
    """Import the built-in idiom suites once."""
    global _builtins_loaded
    if not _builtins_loaded:
        importlib.import_module(_BUILTIN_PACKAGE)
        _builtins_loaded = True


def get_suite(name: str) -> SuiteDef:
    """Look up a registered suite by name.

    Raises:
        UnknownSuite: If nothing is registered under *name*.
    """
    load_builtin_suites()
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownSuite(name, suite_names()) from None


def suite_names() -> list[str]:
    load_builtin_suites()
    return list(_REGISTRY)


def all_suites() -> list[SuiteDef]:
    """Every registered suite, in registration order."""
    load_builtin_suites()
    return list(_REGISTRY.values())


def select_suites(names: list[str] | None) -> list[SuiteDef]:
    """Resolve a name filter; ``None`` or empty selects every suite."""
    if not names:
        return all_suites()
    return [get_suite(n) for n in names]
