import pytest
from launch_sim import mass


def test_stage_efficiency():
    assert mass.compute_stage_efficiency(1) == pytest.approx(1.0)
    assert mass.compute_stage_efficiency(3) == pytest.approx(1.44)


def test_fuel_consumption_first_stage():
    assert mass.compute_fuel_consumption(1e6, 1.0, 1) == pytest.approx(20000.0)


def test_fuel_consumption_later_stage_slower():
    assert mass.compute_fuel_consumption(1e6, 1.0, 2) == pytest.approx(20000.0 / 1.2)


def test_update_fuel_floors_at_zero():
    assert mass.update_fuel(10.0, 25.0) == 0.0
    assert mass.update_fuel(30.0, 25.0) == pytest.approx(5.0)


def test_current_mass():
    assert mass.compute_dry_mass(1e6) == pytest.approx(1e5)
    assert mass.compute_current_mass(1e6, 5e5) == pytest.approx(6e5)


def test_is_fuel_exhausted():
    assert mass.is_fuel_exhausted(0.0)
    assert not mass.is_fuel_exhausted(1e-9)


def test_get_fuel_percentage():
    assert mass.get_fuel_percentage(250.0, 1000.0) == pytest.approx(25.0)
