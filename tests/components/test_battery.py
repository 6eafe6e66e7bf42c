# tests/components/test_battery.py

import pytest
from shipgrid.components.battery import Battery, BatteryData
from shipgrid.core.resources import Resources, GameTime

TICK = GameTime(ms=1)


def test_battery_data_rates():
    data = BatteryData.create(200.0, 0.9)
    assert data.charge_rate == pytest.approx(2.0)
    assert data.discharge_rate == pytest.approx(10.0)
    assert data.charge_level == pytest.approx(180.0)
    assert not data.is_charged()


def test_full_battery_asks_for_nothing_and_takes_nothing():
    battery = Battery({"capacity": 200.0, "charge": 1.0})
    assert battery.get_potential_consumption(Resources(power=1000.0), TICK) == Resources()
    assert battery.consume_on_demand(Resources(power=1000.0), TICK) == Resources()
    assert battery.data.charge_level == 200.0


def test_potential_consumption_is_rate_limited():
    battery = Battery({"capacity": 200.0, "charge": 0.5})
    assert battery.get_potential_consumption(Resources(power=50.0), TICK) == Resources(power=-2.0)
    assert battery.get_potential_consumption(Resources(power=1.5), TICK) == Resources(power=-1.5)
    assert battery.get_potential_consumption(Resources(power=-10.0), TICK).power == 0.0


def test_discharge_is_rate_and_stock_limited():
    battery = Battery({"capacity": 200.0, "charge": 0.02})
    assert battery.get_potential_supply(TICK) == Resources(power=4.0)
    delta = battery.supply_on_demand(Resources(power=-50.0), TICK)
    assert delta.power == pytest.approx(4.0)
    assert battery.data.charge_level == 0.0


def test_charge_is_rate_limited():
    battery = Battery({"capacity": 200.0, "charge": 0.5})
    delta = battery.consume_on_demand(Resources(power=50.0), TICK)
    assert delta.power == pytest.approx(-2.0)
    assert battery.data.charge_level == pytest.approx(102.0)


def test_observer_shares_charge_model():
    data = BatteryData.create(100.0, 0.5)
    battery = Battery(data=data)
    battery.supply_on_demand(Resources(power=-3.0), TICK)
    assert data is battery.data
    assert data.charge_level == pytest.approx(47.0)
    assert str(data) == battery.status()


def test_zero_capacity_status():
    assert Battery({"capacity": 0.0}).status() == "battery at 0.0% charge"
