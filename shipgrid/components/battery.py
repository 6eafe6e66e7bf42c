# shipgrid/components/battery.py
"""
Battery with a charge model that can be shared with observers.

The ``Battery`` component holds the authoritative handle to its
``BatteryData``; a diagnostics view may keep a reference to the same
``BatteryData`` object. Readers must only look at it between ticks, there
is no locking.
"""

from dataclasses import dataclass

from shipgrid.core.base_component import Component
from shipgrid.core.resources import Resources
from shipgrid.core.constants import (
    DEFAULT_BATTERY_CAPACITY, DEFAULT_BATTERY_CHARGE,
    BATTERY_CHARGE_RATE, BATTERY_DISCHARGE_RATE,
)


@dataclass
class BatteryData:
    capacity: float
    charge_rate: float
    discharge_rate: float
    charge_level: float

    @classmethod
    def create(cls, capacity, charge=0.0):
        """Build a charge model from a capacity and a charge fraction in [0, 1]."""
        capacity = max(0.0, float(capacity))
        charge = min(1.0, max(0.0, float(charge)))
        return cls(
            capacity=capacity,
            charge_rate=BATTERY_CHARGE_RATE * capacity,
            discharge_rate=BATTERY_DISCHARGE_RATE * capacity,
            charge_level=charge * capacity,
        )

    def is_charged(self):
        return self.charge_level >= self.capacity

    def charge_percent(self):
        if self.capacity <= 0:
            return 0.0
        return 100.0 * self.charge_level / self.capacity

    def __str__(self):
        return f"battery at {self.charge_percent()}% charge"


class Battery(Component):
    """Rate limited power store.

    Like the capacitor, a battery that discharged during a tick does not
    recharge in that same tick.
    """

    type_name = "battery"

    def __init__(self, config=None, data=None):
        super().__init__(config)
        config = config or {}
        if data is None:
            data = BatteryData.create(
                config.get("capacity", DEFAULT_BATTERY_CAPACITY),
                config.get("charge", DEFAULT_BATTERY_CHARGE),
            )
        self.data = data
        self.discharged = False

    def get_fixed_processing(self, time):
        self.discharged = False
        return Resources()

    def get_potential_supply(self, time):
        return Resources.electric(min(self.data.charge_level, self.data.discharge_rate))

    def get_potential_consumption(self, resources, time):
        data = self.data
        if data.is_charged():
            return Resources()
        offered = max(0.0, resources.power)
        return Resources.electric(-min(offered, data.charge_rate, data.capacity - data.charge_level))

    def supply_on_demand(self, resources, time):
        data = self.data
        output = Resources()
        if resources.power < 0.0:
            amount = min(data.discharge_rate, -resources.power, data.charge_level)
            if amount > 0.0:
                output.power += amount
                data.charge_level = max(0.0, data.charge_level - amount)
                self.discharged = True
        return output

    def consume_on_demand(self, resources, time):
        data = self.data
        output = Resources()
        if resources.power > 0.0 and not self.discharged:
            amount = min(data.charge_rate, resources.power, data.capacity - data.charge_level)
            if amount > 0.0:
                output.power -= amount
                data.charge_level = min(data.capacity, data.charge_level + amount)
        return output

    def status(self):
        return str(self.data)

    def get_state(self):
        state = super().get_state()
        state.update({
            "capacity": self.data.capacity,
            "charge_level": self.data.charge_level,
            "charged": self.data.is_charged(),
        })
        return state
