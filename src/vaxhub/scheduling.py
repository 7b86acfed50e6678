"""
Weekly plan: run the slot allocator for every hub on every day of the week.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .allocation import SlotAllocator
from .config import DAYS_PER_WEEK

logger = logging.getLogger(__name__)

DayPlan = Dict[str, Optional[List[str]]]


class WeeklyScheduler:
    def __init__(self, allocator: SlotAllocator):
        self.allocator = allocator

    @property
    def ledger(self):
        return self.allocator.ledger

    def week_allocate(self) -> List[DayPlan]:
        # Hubs are visited in definition order; the shared ledger makes later
        # (day, hub) pairs see only people not yet placed this epoch.
        week: List[DayPlan] = []
        for day in range(DAYS_PER_WEEK):
            plan: DayPlan = {}
            for hub in self.allocator.hubs.names():
                plan[hub] = self.allocator.allocate(hub, day)
            week.append(plan)
        logger.info("Week allocated: %d people in the ledger", len(self.ledger))
        return week

    def clear_allocation(self) -> None:
        self.ledger.clear()
