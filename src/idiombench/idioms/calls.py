"""Several small method calls vs. one call carrying all the data."""

from __future__ import annotations

from idiombench.bench.catalog import suite
from idiombench.idioms._samples import SAMPLE_FLOAT, SAMPLE_INT, SAMPLE_STR, Record


def _chatty() -> None:
    r = Record()
    r.set_number(SAMPLE_INT)
    r.set_ratio(SAMPLE_FLOAT)
    r.set_label(SAMPLE_STR)


def _chunky() -> None:
    r = Record()
    r.set_values(SAMPLE_INT, SAMPLE_FLOAT, SAMPLE_STR)


@suite("calls", title="Chatty vs. chunky calls", baseline="max")
def calls():
    """Three setter calls compared with a single set_values call."""
    yield "Chatty calls", _chatty
    yield "Chunky call", _chunky
