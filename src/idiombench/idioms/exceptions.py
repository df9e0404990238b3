"""Signalling a common condition by raising vs. by returning a value."""

from __future__ import annotations

from idiombench.bench.catalog import suite


class _NotFound(Exception):
    pass


def _raises() -> object:
    raise _NotFound


def _returns_none() -> object:
    return None


def _raise_and_catch() -> None:
    try:
        _raises()
    except _NotFound:
        pass


def _check_return() -> None:
    if _returns_none() is None:
        pass


def _check_return_inside_try() -> None:
    try:
        if _returns_none() is None:
            pass
    except _NotFound:
        pass


# Raising is roughly an order of magnitude slower, so this suite runs
# fewer iterations.
@suite("exceptions", title="Raising vs. returning None", baseline="max", scale=20)
def exceptions():
    """Raise-and-catch compared with a None check, with and without try."""
    yield "Raise and catch", _raise_and_catch
    yield "Return None and check", _check_return
    yield "Return None and check inside try", _check_return_inside_try
