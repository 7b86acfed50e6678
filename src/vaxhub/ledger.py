"""
Set of people already allocated during the current epoch.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Set


class AllocationLedger:
    """
    Shared by every allocation call across all hubs and days until cleared.

    Not thread safe: an epoch assumes exclusive, sequential access.
    """

    def __init__(self):
        self._allocated: Set[str] = set()

    def contains(self, ssn: str) -> bool:
        return ssn in self._allocated

    def add_all(self, ssns: Iterable[str]) -> None:
        self._allocated.update(ssns)

    def clear(self) -> None:
        self._allocated.clear()

    def size(self) -> int:
        return len(self._allocated)

    def snapshot(self) -> frozenset:
        return frozenset(self._allocated)

    def __contains__(self, ssn: object) -> bool:
        return ssn in self._allocated

    def __len__(self) -> int:
        return len(self._allocated)

    def __iter__(self) -> Iterator[str]:
        return iter(self._allocated)
