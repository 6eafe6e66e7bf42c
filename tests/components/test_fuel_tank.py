# tests/components/test_fuel_tank.py

import pytest
from shipgrid.components.fuel_tank import FuelTank
from shipgrid.core.resources import Resources, GameTime

TICK = GameTime(ms=1)


def test_reports_storage_as_potential_supply():
    assert FuelTank({"storage": 40.0}).get_potential_supply(TICK) == Resources(fuel=40.0)


def test_supplies_fuel_deficit():
    tank = FuelTank({"storage": 100.0})
    assert tank.supply_on_demand(Resources(fuel=-10.0), TICK) == Resources(fuel=10.0)
    assert tank.storage == pytest.approx(90.0)


def test_cannot_go_below_empty():
    tank = FuelTank({"storage": 100.0})
    assert tank.supply_on_demand(Resources(fuel=-150.0), TICK) == Resources(fuel=100.0)
    assert tank.storage == 0.0
    assert tank.fuel_percent() == 0.0


def test_ignores_surplus_and_other_quantities():
    tank = FuelTank({"storage": 100.0})
    assert tank.supply_on_demand(Resources(power=-50.0, fuel=5.0), TICK) == Resources()
    assert tank.consume_on_demand(Resources(fuel=50.0), TICK) == Resources()
    assert tank.status() == "available fuel: 100.0g"
