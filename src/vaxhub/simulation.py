"""
End-to-end wiring: people -> age bands -> hubs and hours -> weekly allocation -> ratios.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, IO, List, Optional, Union

from .allocation import SlotAllocator
from .config import CURRENT_YEAR
from .data_generation import LoadListener, load_people
from .ledger import AllocationLedger
from .metrics import AllocationStatistics
from .population import AgePartition, PersonRegistry
from .scheduling import DayPlan, WeeklyScheduler
from .staffing import HubRegistry, WeeklyHours, daily_available


class VaccinationSystem:
    """
    Single entry point over the registries, the allocator and the statistics.

    All collaborators share one :class:`AllocationLedger`; pass your own to
    inspect or reset it from outside. Calls must not run concurrently.
    """

    def __init__(self, current_year: int = CURRENT_YEAR, ledger: Optional[AllocationLedger] = None):
        self.people = PersonRegistry(current_year)
        self.partition = AgePartition(current_year)
        self.hubs = HubRegistry()
        self.hours = WeeklyHours()
        self.ledger = ledger if ledger is not None else AllocationLedger()
        self.allocator = SlotAllocator(self.people, self.partition, self.hubs, self.hours, self.ledger)
        self.scheduler = WeeklyScheduler(self.allocator)
        self.stats = AllocationStatistics(self.people, self.partition, self.ledger)
        self._listener: Optional[LoadListener] = None

    # people and age bands

    def add_person(self, first_name: str, last_name: str, ssn: str, birth_year: int) -> bool:
        return self.people.add(first_name, last_name, ssn, birth_year)

    def count_people(self) -> int:
        return self.people.count()

    def get_person(self, ssn: str) -> Optional[str]:
        return self.people.describe(ssn)

    def get_age(self, ssn: str) -> Optional[int]:
        return self.people.age_of(ssn)

    def set_age_intervals(self, *breaks: int) -> None:
        self.partition.define_breaks(*breaks)

    def get_age_intervals(self) -> List[str]:
        return self.partition.labels()

    def get_in_interval(self, label: str) -> Optional[List[str]]:
        return self.partition.members_of(label, self.people.all())

    def set_load_listener(self, listener: Optional[LoadListener]) -> None:
        self._listener = listener

    def load_people(self, source: Union[IO[str], Path]) -> int:
        return load_people(source, self.people, self._listener)

    # hubs and hours

    def define_hub(self, name: str) -> None:
        self.hubs.define(name)

    def get_hubs(self) -> List[str]:
        return self.hubs.names()

    def set_staff(self, name: str, doctors: int, nurses: int, other: int) -> None:
        self.hubs.set_staff(name, doctors, nurses, other)

    def estimate_hourly_capacity(self, name: str) -> int:
        return self.hubs.hourly_capacity(name)

    def set_hours(self, *hours: int) -> None:
        self.hours.set(*hours)

    def get_hours(self) -> List[List[str]]:
        return self.hours.time_slots()

    def get_daily_available(self, name: str, day: int) -> Optional[int]:
        return daily_available(self.hubs, self.hours, name, day)

    def get_available(self) -> Dict[str, List[Optional[int]]]:
        return {
            name: [self.get_daily_available(name, day) for day in range(len(self.hours))]
            for name in self.hubs.names()
        }

    # allocation

    def allocate(self, name: str, day: int) -> Optional[List[str]]:
        return self.allocator.allocate(name, day)

    def week_allocate(self) -> List[DayPlan]:
        return self.scheduler.week_allocate()

    def clear_allocation(self) -> None:
        self.scheduler.clear_allocation()

    # statistics

    def prop_allocated(self) -> float:
        return self.stats.overall_ratio()

    def prop_allocated_age(self) -> Dict[str, float]:
        return self.stats.ratio_by_interval()

    def distribution_allocated(self) -> Dict[str, float]:
        return self.stats.distribution()
