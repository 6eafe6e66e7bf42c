# shipgrid/components/capacitor.py

from shipgrid.core.base_component import Component
from shipgrid.core.resources import Resources
from shipgrid.core.constants import DEFAULT_CAPACITOR_CAPACITY


class Capacitor(Component):
    """Fast power store: releases or absorbs its whole headroom in one tick.

    A capacitor that discharged during a tick does not recharge in that same
    tick, so it never hands power out and takes it straight back.
    """

    type_name = "capacitor"

    def __init__(self, config=None):
        super().__init__(config)
        config = config or {}
        self.capacity = max(0.0, float(config.get("capacity", DEFAULT_CAPACITOR_CAPACITY)))
        charge = float(config.get("charge", 0.0))
        self.charge_level = min(self.capacity, max(0.0, charge))
        self.discharged = False

    def headroom(self):
        return self.capacity - self.charge_level

    def charge_percent(self):
        if self.capacity <= 0:
            return 0.0
        return 100.0 * self.charge_level / self.capacity

    def get_fixed_processing(self, time):
        self.discharged = False
        return Resources()

    def get_potential_supply(self, time):
        return Resources.electric(self.charge_level)

    def get_potential_consumption(self, resources, time):
        return Resources.electric(-self.headroom())

    def supply_on_demand(self, resources, time):
        output = Resources()
        if resources.power < 0.0:
            delta = min(self.charge_level, -resources.power)
            if delta > 0.0:
                self.charge_level = max(0.0, self.charge_level - delta)
                self.discharged = True
                output.power += delta
        return output

    def consume_on_demand(self, resources, time):
        output = Resources()
        if resources.power > 0.0 and not self.discharged:
            delta = min(self.headroom(), resources.power)
            self.charge_level = min(self.capacity, self.charge_level + delta)
            output.power -= delta
        return output

    def status(self):
        return f"capacitor at {self.charge_percent()}% charge"

    def get_state(self):
        state = super().get_state()
        state.update({
            "capacity": self.capacity,
            "charge_level": self.charge_level,
        })
        return state
