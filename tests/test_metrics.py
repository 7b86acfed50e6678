"""Tests for allocation ratios."""

import pytest

from conftest import add_aged


class TestAllocationStatistics:
    def test_ratios_after_worked_example(self, worked_example):
        system, _ = worked_example
        system.allocate("Central", 0)

        assert system.prop_allocated() == pytest.approx(65 / 65)
        by_age = system.prop_allocated_age()
        assert by_age == pytest.approx({"[0,40)": 10 / 65, "[40,60)": 50 / 65, "[60,+)": 5 / 65})

    def test_interval_ratio_uses_whole_population(self, system):
        system.set_age_intervals(60)
        add_aged(system, "Y", 20, 150)
        add_aged(system, "O", 70, 50)
        system.define_hub("Small")
        system.set_staff("Small", 1, 1, 1)  # 10 per hour
        system.set_hours(10, 0, 0, 0, 0, 0, 0)

        allocated = system.allocate("Small", 0)
        # pass 1: 40 old, 24 young; pass 2: the last 10 old, then 26 young
        assert len(allocated) == 100
        counts = system.stats.allocated_counts()
        assert counts == {"[0,60)": 50, "[60,+)": 50}

        assert system.prop_allocated() == pytest.approx(100 / 200)
        assert system.prop_allocated_age() == pytest.approx({"[0,60)": 50 / 200, "[60,+)": 50 / 200})
        assert system.distribution_allocated() == pytest.approx({"[0,60)": 0.5, "[60,+)": 0.5})

    def test_distribution_sums_to_one(self, worked_example):
        system, _ = worked_example
        system.set_hours(1, 0, 0, 0, 0, 0, 0)
        system.allocate("Central", 0)
        assert sum(system.distribution_allocated().values()) == pytest.approx(1.0)
        assert sum(system.stats.allocated_counts().values()) == len(system.ledger)

    def test_no_allocation_yet(self, worked_example):
        system, _ = worked_example
        assert system.prop_allocated() == 0.0
        assert set(system.prop_allocated_age().values()) == {0.0}
        with pytest.raises(ZeroDivisionError):
            system.distribution_allocated()

    def test_empty_population(self, system):
        with pytest.raises(ZeroDivisionError):
            system.prop_allocated()
