"""
Registered people and the age bands used for reporting and allocation priority.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .config import CURRENT_YEAR
from .exceptions import InvalidConfiguration
from .models import Interval, Person

logger = logging.getLogger(__name__)


class PersonRegistry:
    """People keyed by ssn, kept in registration order."""

    def __init__(self, current_year: int = CURRENT_YEAR):
        self.current_year = current_year
        self._people: Dict[str, Person] = {}

    def add(self, first_name: str, last_name: str, ssn: str, birth_year: int) -> bool:
        if ssn in self._people:
            return False
        self._people[ssn] = Person(ssn, first_name, last_name, birth_year)
        return True

    def lookup(self, ssn: str) -> Optional[Person]:
        return self._people.get(ssn)

    def all(self) -> List[Person]:
        return list(self._people.values())

    def count(self) -> int:
        return len(self._people)

    def age_of(self, ssn: str) -> Optional[int]:
        person = self._people.get(ssn)
        if person is None:
            return None
        return person.age(self.current_year)

    def describe(self, ssn: str) -> Optional[str]:
        person = self._people.get(ssn)
        return person.describe() if person else None


class AgePartition:
    """
    Contiguous half-open age bands starting at 0, the last one unbounded.

    Breaks are taken as given: they are expected to be strictly increasing but
    are not checked.
    """

    def __init__(self, current_year: int = CURRENT_YEAR):
        self.current_year = current_year
        self._intervals: List[Interval] = []

    def define_breaks(self, *breaks: int) -> None:
        if not breaks:
            raise InvalidConfiguration("At least one age break is required")
        bounds = [0, *breaks]
        intervals = [Interval(lo, hi) for lo, hi in zip(bounds, bounds[1:])]
        intervals.append(Interval(bounds[-1]))
        self._intervals = intervals
        logger.debug("Age intervals: %s", ", ".join(self.labels()))

    def intervals(self) -> List[Interval]:
        return sorted(self._intervals, key=lambda i: i.start)

    def by_priority(self) -> List[Interval]:
        # oldest band first
        return sorted(self._intervals, key=lambda i: i.start, reverse=True)

    def labels(self) -> List[str]:
        return [i.label for i in self.intervals()]

    def resolve(self, label: str) -> Optional[Interval]:
        return next((i for i in self._intervals if i.label == label), None)

    def interval_of(self, age: int) -> Optional[Interval]:
        return next((i for i in self._intervals if i.between(age)), None)

    def members_of(self, label: str, people: Iterable[Person]) -> Optional[List[str]]:
        interval = self.resolve(label)
        if interval is None:
            return None
        return [p.ssn for p in people if interval.between(p.age(self.current_year))]
