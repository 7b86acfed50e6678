"""
Typed containers used throughout the planner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import CURRENT_YEAR, STAFF_THROUGHPUT
from .exceptions import CapacityUndefined


@dataclass(frozen=True)
class Person:
    ssn: str
    first_name: str
    last_name: str
    birth_year: int

    def age(self, current_year: int = CURRENT_YEAR) -> int:
        return current_year - self.birth_year

    def describe(self) -> str:
        return f"{self.ssn},{self.last_name},{self.first_name}"


@dataclass(frozen=True)
class Interval:
    start: int
    end: Optional[int] = None  # None = unbounded above

    def between(self, age: int) -> bool:
        if self.end is None:
            return age >= self.start
        return self.start <= age < self.end

    @property
    def label(self) -> str:
        upper = "+" if self.end is None else str(self.end)
        return f"[{self.start},{upper})"

    def __str__(self) -> str:
        return self.label


@dataclass
class Hub:
    name: str
    doctors: int = 0
    nurses: int = 0
    other: int = 0

    def hourly_capacity(self) -> int:
        if (self.doctors | self.nurses | self.other) == 0:
            raise CapacityUndefined()
        return min(
            self.doctors * STAFF_THROUGHPUT["doctors"],
            self.nurses * STAFF_THROUGHPUT["nurses"],
            self.other * STAFF_THROUGHPUT["other"],
        )

    def __str__(self) -> str:
        return self.name
