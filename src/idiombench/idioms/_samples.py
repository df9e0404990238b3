"""Sample values and record types shared by the idiom suites."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass

SAMPLE_INT = 5
SAMPLE_FLOAT = 2.5
SAMPLE_STR = "Test String"


class Record:
    """Plain class exposing its fields three ways: attributes, properties, setters."""

    def __init__(self, number: int = 0, ratio: float = 0.0, label: str = "") -> None:
        self._number = number
        self._ratio = ratio
        self._label = label
        self.plain_number = number
        self.plain_ratio = ratio
        self.plain_label = label

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        self._number = value

    @property
    def ratio(self) -> float:
        return self._ratio

    @ratio.setter
    def ratio(self, value: float) -> None:
        self._ratio = value

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        self._label = value

    def set_number(self, value: int) -> None:
        self._number = value

    def set_ratio(self, value: float) -> None:
        self._ratio = value

    def set_label(self, value: str) -> None:
        self._label = value

    def set_values(self, number: int, ratio: float, label: str) -> None:
        self._number = number
        self._ratio = ratio
        self._label = label


class SlottedRecord:
    __slots__ = ("number", "ratio", "label")

    def __init__(self, number: int, ratio: float, label: str) -> None:
        self.number = number
        self.ratio = ratio
        self.label = label


class PlainPoint:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


@dataclass
class DataPoint:
    x: int
    y: int


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


NamedPoint = namedtuple("NamedPoint", ["x", "y"])
