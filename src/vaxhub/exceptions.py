"""Error kinds raised by the vaccination planner.

Queries on unknown people, hubs or interval labels answer ``None`` instead of
raising; the classes below cover configuration calls, which fail loudly.
"""

from __future__ import annotations


class VaccineError(Exception):
    """Base class for every planner error."""

    def __init__(self, message: str = "Vaccine system error"):
        super().__init__(message)


class InvalidConfiguration(VaccineError, ValueError):
    """Bad staffing counts, bad weekly hours, bad age breaks or a bad CSV header."""


class UnknownEntity(VaccineError, KeyError):
    """A configuration call referenced a hub that was never defined."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class DuplicateEntity(VaccineError):
    """A hub name was defined twice."""


class CapacityUndefined(VaccineError):
    """Hourly capacity was requested before the hub staff was set."""

    def __init__(self, message: str = "Team not defined"):
        super().__init__(message)
