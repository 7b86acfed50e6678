"""Tests for hubs, hourly capacity and weekly hours."""

import pytest

from vaxhub.exceptions import CapacityUndefined, DuplicateEntity, InvalidConfiguration, UnknownEntity
from vaxhub.models import Hub
from vaxhub.staffing import HubRegistry, WeeklyHours


class TestHubs:
    def test_hourly_capacity_is_the_bottleneck_role(self, system):
        system.define_hub("Central")
        system.set_staff("Central", 5, 4, 3)
        assert system.estimate_hourly_capacity("Central") == 48

    def test_capacity_recomputed_after_restaffing(self):
        registry = HubRegistry()
        registry.define("A")
        registry.set_staff("A", 1, 1, 1)
        assert registry.hourly_capacity("A") == 10
        registry.set_staff("A", 3, 3, 3)
        assert registry.hourly_capacity("A") == 30

    def test_unstaffed_hub_has_no_capacity(self, system):
        system.define_hub("Empty")
        with pytest.raises(CapacityUndefined, match="Team not defined"):
            system.estimate_hourly_capacity("Empty")

    def test_partial_staff_model(self):
        # zero in one role still yields a (zero) bottleneck once any role is set
        assert Hub("X", doctors=2).hourly_capacity() == 0

    def test_duplicate_hub(self, system):
        system.define_hub("Central")
        with pytest.raises(DuplicateEntity):
            system.define_hub("Central")

    def test_hub_names_in_definition_order(self, system):
        for name in ["b", "a", "c"]:
            system.define_hub(name)
        assert system.get_hubs() == ["b", "a", "c"]

    @pytest.mark.parametrize("staff", [(0, 1, 1), (1, 0, 1), (1, 1, -2)])
    def test_non_positive_staff(self, system, staff):
        system.define_hub("Central")
        with pytest.raises(InvalidConfiguration):
            system.set_staff("Central", *staff)

    def test_unknown_hub(self, system):
        with pytest.raises(UnknownEntity):
            system.set_staff("Nowhere", 1, 1, 1)
        with pytest.raises(UnknownEntity):
            system.estimate_hourly_capacity("Nowhere")


class TestWeeklyHours:
    def test_default_week_is_closed(self):
        assert WeeklyHours().as_list() == [0] * 7

    @pytest.mark.parametrize("hours", [(8,) * 6, (8,) * 8, (13, 0, 0, 0, 0, 0, 0), (0, 0, 0, -1, 0, 0, 0)])
    def test_invalid_hours(self, hours):
        with pytest.raises(InvalidConfiguration):
            WeeklyHours().set(*hours)

    def test_bounds_are_inclusive(self):
        hours = WeeklyHours()
        hours.set(0, 12, 0, 12, 0, 12, 0)
        assert hours.as_list() == [0, 12, 0, 12, 0, 12, 0]

    @pytest.mark.parametrize("day", [-1, -7, 7, 8])
    def test_days_outside_the_week_are_closed(self, day):
        hours = WeeklyHours()
        hours.set(1, 2, 3, 4, 5, 6, 9)
        assert hours.hours_for(day) == 0

    def test_hours_for_each_day(self):
        hours = WeeklyHours()
        hours.set(1, 2, 3, 4, 5, 6, 9)
        assert [hours.hours_for(d) for d in range(7)] == [1, 2, 3, 4, 5, 6, 9]

    def test_time_slots(self, system):
        system.set_hours(1, 0, 0, 0, 0, 0, 2)
        slots = system.get_hours()
        assert len(slots) == 7
        assert slots[0] == ["09:00", "09:15", "09:30", "09:45"]
        assert slots[1] == []
        assert slots[6][-1] == "10:45"
        assert len(slots[6]) == 8

    def test_time_slots_past_noon(self):
        hours = WeeklyHours()
        hours.set(12, 0, 0, 0, 0, 0, 0)
        assert hours.time_slots()[0][-1] == "20:45"


class TestAvailability:
    def test_daily_available(self, system):
        system.define_hub("Central")
        system.set_staff("Central", 5, 4, 3)
        system.set_hours(8, 8, 8, 8, 8, 4, 0)
        assert system.get_daily_available("Central", 0) == 48 * 8
        assert system.get_daily_available("Central", 5) == 48 * 4
        assert system.get_daily_available("Central", 6) == 0

    def test_one_past_the_end_reads_as_closed(self, system):
        system.define_hub("Central")
        system.set_staff("Central", 5, 4, 3)
        system.set_hours(8, 8, 8, 8, 8, 8, 8)
        assert system.get_daily_available("Central", 7) == 0
        assert system.get_daily_available("Central", 8) is None
        assert system.get_daily_available("Central", -1) is None

    def test_unavailable_hubs(self, system):
        system.define_hub("Empty")
        system.set_hours(8, 8, 8, 8, 8, 8, 8)
        assert system.get_daily_available("Empty", 0) is None
        assert system.get_daily_available("Nowhere", 0) is None

    def test_available_map(self, system):
        system.define_hub("A")
        system.set_staff("A", 1, 1, 1)
        system.define_hub("B")
        system.set_hours(1, 2, 3, 4, 5, 6, 7)
        available = system.get_available()
        assert available["A"] == [10, 20, 30, 40, 50, 60, 70]
        assert available["B"] == [None] * 7
