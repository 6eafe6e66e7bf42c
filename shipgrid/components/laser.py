# shipgrid/components/laser.py

import logging

from shipgrid.core.base_component import Component
from shipgrid.core.resources import Resources
from shipgrid.core.constants import DEFAULT_LASER_POWER_COST, DEFAULT_LASER_HEAT_OUTPUT
from shipgrid.utils.errors import success_dict

logger = logging.getLogger(__name__)


class Laser(Component):
    """All-or-nothing power sink: fires only when the full shot cost is available."""

    type_name = "laser"

    def __init__(self, config=None):
        super().__init__(config)
        config = config or {}
        self.power_cost = float(config.get("power_cost", DEFAULT_LASER_POWER_COST))
        self.heat_output = float(config.get("heat_output", DEFAULT_LASER_HEAT_OUTPUT))
        self.armed = bool(config.get("armed", True))
        self.fired = False
        self.shots = 0

    def get_potential_consumption(self, resources, time):
        if self.armed and resources.power >= self.power_cost:
            return Resources.electric(-self.power_cost)
        return Resources()

    def consume_on_demand(self, resources, time):
        if self.armed and resources.power >= self.power_cost:
            self.fired = True
            self.shots += 1
            return Resources(power=-self.power_cost, heat=self.heat_output)
        if self.armed:
            logger.debug(f"Laser {self.name} starved: {resources.power}W < {self.power_cost}W")
        self.fired = False
        return Resources()

    def status(self):
        if self.fired:
            return "laser fired!"
        return "laser didn't fire."

    def available_commands(self):
        return super().available_commands() + ["hold_fire", "open_fire"]

    def command(self, action, params):
        if action == "hold_fire":
            self.armed = False
            return success_dict("laser_holding_fire", name=self.name)
        if action == "open_fire":
            self.armed = True
            return success_dict("laser_armed", name=self.name)
        return super().command(action, params)

    def get_state(self):
        state = super().get_state()
        state.update({
            "armed": self.armed,
            "fired": self.fired,
            "shots": self.shots,
            "power_cost": self.power_cost,
        })
        return state
