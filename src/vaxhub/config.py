"""
Centralized planner defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List


CURRENT_YEAR: int = date.today().year

CSV_HEADER = "SSN,LAST,FIRST,YEAR"
DAY_NAMES: List[str] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
DAYS_PER_WEEK = len(DAY_NAMES)
MAX_DAILY_HOURS = 12

# vaccinations per hour a single staff member of each role can sustain
STAFF_THROUGHPUT: Dict[str, int] = {"doctors": 10, "nurses": 12, "other": 20}

PRIORITY_SHARE = 0.4  # pass 1 share of the remaining daily capacity per interval

FIRST_SLOT_HOUR = 9
SLOT_MINUTES = 15


@dataclass
class PlannerConfig:
    age_breaks: List[int] = field(default_factory=lambda: [40, 50, 60, 70, 80])
    weekly_hours: List[int] = field(default_factory=lambda: [8, 8, 8, 8, 8, 4, 0])
    people: int = 5_000
    seed: int = 42
    current_year: int = CURRENT_YEAR
    mean_age: float = 48.0  # synthetic population
    age_spread: float = 20.0
