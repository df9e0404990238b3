"""Exception types raised by the benchmark API.

Errors raised by a workload are never wrapped in these; they reach the
caller unchanged.
"""

from __future__ import annotations


class BenchError(Exception):
    """Base class for idiombench errors."""


class InvalidArgument(BenchError, ValueError):
    """An argument is out of range, e.g. a non-positive iteration count."""


class EmptySuite(BenchError, ValueError):
    """A baseline or ranking was requested on a suite with no cases."""

    def __init__(self, suite_name: str) -> None:
        super().__init__(f"Suite '{suite_name}' has no recorded cases.")
        self.suite_name = suite_name


class UnknownSuite(BenchError, KeyError):
    """No suite is registered under the requested name."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        return f"Unknown suite '{self.name}'. Available: {', '.join(self.known) or '(none)'}"
