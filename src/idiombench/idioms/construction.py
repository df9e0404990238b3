"""Ways of building an object and filling in its fields."""

from __future__ import annotations

from idiombench.bench.catalog import suite
from idiombench.idioms._samples import (
    SAMPLE_FLOAT,
    SAMPLE_INT,
    SAMPLE_STR,
    Record,
    SlottedRecord,
)


def _keyword_constructor() -> None:
    Record(number=SAMPLE_INT, ratio=SAMPLE_FLOAT, label=SAMPLE_STR)


def _positional_constructor() -> None:
    Record(SAMPLE_INT, SAMPLE_FLOAT, SAMPLE_STR)


def _attributes_after_construction() -> None:
    r = Record()
    r.plain_number = SAMPLE_INT
    r.plain_ratio = SAMPLE_FLOAT
    r.plain_label = SAMPLE_STR


def _properties_after_construction() -> None:
    r = Record()
    r.number = SAMPLE_INT
    r.ratio = SAMPLE_FLOAT
    r.label = SAMPLE_STR


def _setter_methods() -> None:
    r = Record()
    r.set_number(SAMPLE_INT)
    r.set_ratio(SAMPLE_FLOAT)
    r.set_label(SAMPLE_STR)


def _slotted_constructor() -> None:
    SlottedRecord(SAMPLE_INT, SAMPLE_FLOAT, SAMPLE_STR)


@suite("construction", title="Object initialization styles", baseline="min")
def construction():
    """Constructor arguments compared with assigning fields afterwards."""
    yield "Keyword arguments to constructor", _keyword_constructor
    yield "Positional arguments to constructor", _positional_constructor
    yield "Attributes after construction", _attributes_after_construction
    yield "Properties after construction", _properties_after_construction
    yield "Setter methods after construction", _setter_methods
    yield "__slots__ class constructor", _slotted_constructor
