"""Allocating small two-field values in different shapes."""

from __future__ import annotations

from idiombench.bench.catalog import suite
from idiombench.idioms._samples import DataPoint, FrozenPoint, NamedPoint, PlainPoint


def _tuple() -> None:
    x, y = 3, 4
    (x, y)


@suite("allocation", title="Value vs. object allocation", baseline="min")
def allocation():
    """A bare tuple compared with namedtuple, dataclass and class instances."""
    yield "tuple", _tuple
    yield "namedtuple", lambda: NamedPoint(3, 4)
    yield "Plain class", lambda: PlainPoint(3, 4)
    yield "dataclass", lambda: DataPoint(3, 4)
    yield "Frozen dataclass", lambda: FrozenPoint(3, 4)
