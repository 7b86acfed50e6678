"""
Hub staffing, hourly throughput and the weekly opening hours.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .config import DAYS_PER_WEEK, FIRST_SLOT_HOUR, MAX_DAILY_HOURS, SLOT_MINUTES
from .exceptions import CapacityUndefined, DuplicateEntity, InvalidConfiguration, UnknownEntity
from .models import Hub

logger = logging.getLogger(__name__)


class HubRegistry:
    def __init__(self):
        self._hubs: Dict[str, Hub] = {}

    def define(self, name: str) -> Hub:
        if name in self._hubs:
            raise DuplicateEntity(f"Duplicated hub: {name}")
        hub = Hub(name)
        self._hubs[name] = hub
        return hub

    def names(self) -> List[str]:
        return list(self._hubs)

    def lookup(self, name: str) -> Optional[Hub]:
        return self._hubs.get(name)

    def set_staff(self, name: str, doctors: int, nurses: int, other: int) -> None:
        hub = self._require(name)
        if doctors <= 0 or nurses <= 0 or other <= 0:
            raise InvalidConfiguration(
                f"Staff counts must be positive (doctors={doctors}, nurses={nurses}, other={other})"
            )
        hub.doctors = doctors
        hub.nurses = nurses
        hub.other = other
        logger.debug("Hub %s staffed: %d/%d/%d", name, doctors, nurses, other)

    def hourly_capacity(self, name: str) -> int:
        return self._require(name).hourly_capacity()

    def _require(self, name: str) -> Hub:
        hub = self._hubs.get(name)
        if hub is None:
            raise UnknownEntity(f"Hub not defined: {name}")
        return hub


class WeeklyHours:
    """Opening hours for Monday..Sunday; every hub shares the same week."""

    def __init__(self):
        self._hours: List[int] = [0] * DAYS_PER_WEEK

    def set(self, *hours: int) -> None:
        if len(hours) != DAYS_PER_WEEK:
            raise InvalidConfiguration(f"Expected {DAYS_PER_WEEK} daily hours, got {len(hours)}")
        for h in hours:
            if h < 0 or h > MAX_DAILY_HOURS:
                raise InvalidConfiguration(f"Daily hours must be within [0, {MAX_DAILY_HOURS}], got {h}")
        self._hours = list(hours)

    def hours_for(self, day: int) -> int:
        # days outside the week, including one past the end, read as closed
        if day < 0 or day >= len(self._hours):
            return 0
        return self._hours[day]

    def as_list(self) -> List[int]:
        return list(self._hours)

    def valid_day(self, day: int) -> bool:
        return 0 <= day <= len(self._hours)

    def time_slots(self) -> List[List[str]]:
        slots_per_hour = 60 // SLOT_MINUTES
        week: List[List[str]] = []
        for hours in self._hours:
            day_slots = []
            for h in range(hours):
                for q in range(slots_per_hour):
                    day_slots.append(f"{FIRST_SLOT_HOUR + h:02d}:{q * SLOT_MINUTES:02d}")
            week.append(day_slots)
        return week

    def __len__(self) -> int:
        return len(self._hours)


def daily_available(hubs: HubRegistry, hours: WeeklyHours, name: str, day: int) -> Optional[int]:
    """Hourly capacity x opening hours, or None for an unknown hub, bad day or unstaffed hub."""
    hub = hubs.lookup(name)
    if hub is None or not hours.valid_day(day):
        return None
    try:
        return hub.hourly_capacity() * hours.hours_for(day)
    except CapacityUndefined:
        logger.warning("Hub %s has no staff; no availability on day %d", name, day)
        return None
