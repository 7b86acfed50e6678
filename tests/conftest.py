from typing import Iterable, List

import pytest

from vaxhub.simulation import VaccinationSystem

YEAR = 2024


def add_aged(system: VaccinationSystem, prefix: str, age: int, count: int) -> List[str]:
    """Register ``count`` people of the given age; returns their ssns in registration order."""
    ssns = []
    for i in range(count):
        ssn = f"{prefix}{i:03d}"
        assert system.add_person("First", "Last", ssn, YEAR - age)
        ssns.append(ssn)
    return ssns


def staffed_hub(system: VaccinationSystem, name: str, staff: Iterable[int] = (10, 9, 5)) -> None:
    system.define_hub(name)
    system.set_staff(name, *staff)


@pytest.fixture
def system() -> VaccinationSystem:
    return VaccinationSystem(current_year=YEAR)


@pytest.fixture
def worked_example(system):
    """One hub with 100 places on Monday and 10/50/5 people in [0,40)/[40,60)/[60,+)."""
    system.set_age_intervals(40, 60)
    young = add_aged(system, "Y", 20, 10)
    middle = add_aged(system, "M", 50, 50)
    old = add_aged(system, "O", 70, 5)
    staffed_hub(system, "Central")  # min(100, 108, 100) = 100 per hour
    system.set_hours(1, 0, 0, 0, 0, 0, 0)
    return system, {"young": young, "middle": middle, "old": old}
