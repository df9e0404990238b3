"""Growing a list one item at a time vs. building it in bulk."""

from __future__ import annotations

from idiombench.bench.catalog import suite

SIZE = 64


def _append() -> None:
    items = []
    for i in range(SIZE):
        items.append(i)


def _preallocated() -> None:
    items = [0] * SIZE
    for i in range(SIZE):
        items[i] = i


def _extend() -> None:
    items: list[int] = []
    items.extend(range(SIZE))


def _comprehension() -> None:
    [i for i in range(SIZE)]


def _list_call() -> None:
    list(range(SIZE))


@suite("growth", title=f"Building a {SIZE}-item list", baseline="min")
def growth():
    """Incremental append compared with preallocation and bulk construction."""
    yield "append in a loop", _append
    yield "Preallocate and assign", _preallocated
    yield "extend once", _extend
    yield "List comprehension", _comprehension
    yield "list(range(n))", _list_call
