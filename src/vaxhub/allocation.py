"""
Allocation algorithm: fill one hub's daily capacity, oldest age band first.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from .config import PRIORITY_SHARE
from .ledger import AllocationLedger
from .models import Person
from .population import AgePartition, PersonRegistry
from .staffing import HubRegistry, WeeklyHours, daily_available

logger = logging.getLogger(__name__)


@dataclass
class SlotAllocator:
    """
    Decides who is vaccinated at one hub on one day.

    Pass 1 walks the age bands oldest first and grants each band at most
    ``floor(remaining * PRIORITY_SHARE)`` places, where ``remaining`` shrinks as
    bands are served. Pass 2 hands whatever capacity is left to the
    still-unallocated people in the same order.

    Within a band, candidates are taken in registration order. Every chosen
    ssn is committed to the shared ledger as soon as it is picked; nothing is
    rolled back if a later step fails.
    """

    people: PersonRegistry
    partition: AgePartition
    hubs: HubRegistry
    hours: WeeklyHours
    ledger: AllocationLedger
    share: float = PRIORITY_SHARE

    def allocate(self, hub_name: str, day: int) -> Optional[List[str]]:
        if self.hubs.lookup(hub_name) is None or not self.hours.valid_day(day):
            logger.warning("Cannot allocate hub %r on day %d", hub_name, day)
            return None
        n = daily_available(self.hubs, self.hours, hub_name, day)
        if n is None:
            return None

        population = self.people.all()
        bands = self.partition.by_priority()
        allocated: List[str] = []

        for band in bands:
            limit = math.floor(n * self.share)
            # whole band when it holds fewer than `limit` eligible people
            picked = self._eligible(band.label, population)[:limit]
            self._commit(picked, allocated)
            n -= len(picked)

        if n != 0:
            for band in bands:
                if n <= 0:
                    break
                picked = self._eligible(band.label, population)[:n]
                self._commit(picked, allocated)
                n -= len(picked)

        logger.debug("Hub %s day %d: %d allocated, %d places unused", hub_name, day, len(allocated), n)
        return allocated

    def _eligible(self, label: str, population: List[Person]) -> List[str]:
        members = self.partition.members_of(label, population) or []
        return [ssn for ssn in members if ssn not in self.ledger]

    def _commit(self, picked: List[str], allocated: List[str]) -> None:
        self.ledger.add_all(picked)
        allocated.extend(picked)
