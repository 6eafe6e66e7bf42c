# shipgrid/components/fuel_tank.py

from shipgrid.core.base_component import Component
from shipgrid.core.resources import Resources
from shipgrid.core.constants import DEFAULT_FUEL_STORAGE


class FuelTank(Component):
    """Deuterium store drawn down whenever the ledger runs short of fuel."""

    type_name = "fuel_tank"

    def __init__(self, config=None):
        super().__init__(config)
        config = config or {}
        storage = max(0.0, float(config.get("storage", DEFAULT_FUEL_STORAGE)))
        self.capacity = max(storage, float(config.get("capacity", storage)))
        self.storage = storage

    def fuel_percent(self):
        if self.capacity <= 0:
            return 0.0
        return 100.0 * self.storage / self.capacity

    def get_potential_supply(self, time):
        return Resources(fuel=self.storage)

    def supply_on_demand(self, resources, time):
        output = Resources()
        if resources.fuel < 0.0:
            delta = min(-resources.fuel, self.storage)
            self.storage -= delta
            output.fuel += delta
        return output

    def status(self):
        return f"available fuel: {self.storage}g"

    def get_state(self):
        state = super().get_state()
        state.update({
            "storage": self.storage,
            "capacity": self.capacity,
            "fuel_percent": self.fuel_percent(),
        })
        return state
