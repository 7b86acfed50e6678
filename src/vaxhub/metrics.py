"""
Post-hoc allocation ratios over the current ledger.

Both per-interval figures share a numerator (allocated members of the band) but
not a denominator: ``ratio_by_interval`` divides by the whole population,
``distribution`` by the number of allocated people. The first answers "what
share of everyone got a slot from this band", the second "how are the slots
split across bands" and sums to 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .ledger import AllocationLedger
from .population import AgePartition, PersonRegistry


@dataclass
class AllocationStatistics:
    people: PersonRegistry
    partition: AgePartition
    ledger: AllocationLedger

    def allocated_counts(self) -> Dict[str, int]:
        population = self.people.all()
        counts: Dict[str, int] = {}
        for label in self.partition.labels():
            members = self.partition.members_of(label, population) or []
            counts[label] = sum(1 for ssn in members if ssn in self.ledger)
        return counts

    def overall_ratio(self) -> float:
        # an empty population raises ZeroDivisionError
        return len(self.ledger) / self.people.count()

    def ratio_by_interval(self) -> Dict[str, float]:
        total = self.people.count()
        return {label: n / total for label, n in self.allocated_counts().items()}

    def distribution(self) -> Dict[str, float]:
        # an empty ledger raises ZeroDivisionError
        allocated = len(self.ledger)
        return {label: n / allocated for label, n in self.allocated_counts().items()}
