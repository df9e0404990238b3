"""Summing a list with different iteration styles."""

from __future__ import annotations

from idiombench.bench.catalog import suite

DATA = list(range(100))


def _index_loop() -> None:
    total = 0
    for i in range(len(DATA)):
        total += DATA[i]


def _direct_loop() -> None:
    total = 0
    for value in DATA:
        total += value


def _enumerate_loop() -> None:
    total = 0
    for _, value in enumerate(DATA):
        total += value


def _while_loop() -> None:
    total = 0
    i = 0
    n = len(DATA)
    while i < n:
        total += DATA[i]
        i += 1


@suite("iteration", title="Iteration styles over a 100-item list", baseline="min")
def iteration():
    """Indexing, direct iteration, enumerate and the sum builtin."""
    yield "while with index", _while_loop
    yield "for over range(len())", _index_loop
    yield "for with enumerate", _enumerate_loop
    yield "for over items", _direct_loop
    yield "sum() builtin", lambda: sum(DATA)
