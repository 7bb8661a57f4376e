"""Small value types with arithmetic operators, and a matrix renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class IntPair:
    """A pair of integers added and negated component-wise."""

    a: int
    b: int

    def __add__(self, other: "IntPair") -> "IntPair":
        if not isinstance(other, IntPair):
            return NotImplemented
        return IntPair(self.a + other.a, self.b + other.b)

    def __neg__(self) -> "IntPair":
        return IntPair(-self.a, -self.b)

    def __str__(self) -> str:
        return f"a={self.a}\nb={self.b}"


@dataclass(frozen=True)
class ClockTime:
    """A duration in hours, minutes and seconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def __add__(self, other: "ClockTime") -> "ClockTime":
        """Sum with seconds and minutes carried into the next unit; hours are unbounded."""
        if not isinstance(other, ClockTime):
            return NotImplemented
        seconds = self.seconds + other.seconds
        minutes = self.minutes + other.minutes + seconds // 60
        seconds %= 60
        hours = self.hours + other.hours + minutes // 60
        minutes %= 60
        return ClockTime(hours, minutes, seconds)

    def __str__(self) -> str:
        return f"Hours:{self.hours}\nMinutes:{self.minutes}\nSeconds:{self.seconds}"


@dataclass
class Person:
    """A named person with an age."""

    name: str = "XXXXX"
    age: int = 0

    def __str__(self) -> str:
        return f"Name is:{self.name}\nAge is:{self.age}"


@dataclass
class Resident:
    """A person's name and home city."""

    name: str
    city: str = "Delhi"

    def __str__(self) -> str:
        return f"Name:{self.name}\nCity:{self.city}"


def format_matrix(rows: Iterable[Iterable[Any]]) -> str:
    """One line per row, elements separated by single spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in rows)