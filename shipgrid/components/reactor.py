# shipgrid/components/reactor.py

import logging
from enum import Enum

from shipgrid.core.base_component import Component
from shipgrid.core.resources import Resources
from shipgrid.core.constants import (
    DEFAULT_REACTOR_SIZING, REACTOR_IDLE_LOAD, REACTOR_SUPPLY_FRACTION,
    REACTOR_HEAT_FACTOR, REACTOR_FUEL_FACTOR, REACTOR_START_POWER,
    REACTOR_START_HEAT, REACTOR_START_FUEL, REACTOR_DEMAND_MARGIN,
)
from shipgrid.utils.errors import success_dict, error_dict

logger = logging.getLogger(__name__)


class ReactorPhase(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class FusionReactor(Component):
    """Fusion reactor that self-starts once offered enough power.

    While running it idles at a small load every tick and throttles up to
    cover the power deficit it is offered during the supply phase.
    """

    type_name = "reactor"

    def __init__(self, config=None):
        super().__init__(config)
        config = config or {}
        self.sizing = float(config.get("sizing", DEFAULT_REACTOR_SIZING))
        self.phase = ReactorPhase(config.get("phase", ReactorPhase.STOPPED.value))
        self.last_utilization = 0.0
        # Set on the tick the reactor starts, cleared on its first load level
        self.just_started = False

    @property
    def running(self):
        return self.phase == ReactorPhase.RUNNING

    def compute_load_level(self, load, time):
        self.last_utilization = load
        self.just_started = False
        output = load * self.sizing * time.ms
        return Resources(
            power=output,
            heat=REACTOR_HEAT_FACTOR * output,
            fuel=REACTOR_FUEL_FACTOR * output,
        )

    def compute_demand_level(self, demand, time):
        full_output = self.sizing * time.ms
        if full_output <= 0:
            return self.compute_load_level(0.0, time)
        # Output is load * full_output, so it never exceeds the demand
        load = max(0.0, min(1.0, demand / full_output))
        return self.compute_load_level(load, time)

    def get_fixed_processing(self, time):
        if self.running:
            return self.compute_load_level(REACTOR_IDLE_LOAD, time)
        return Resources()

    def get_potential_supply(self, time):
        if self.running:
            return Resources(
                power=REACTOR_SUPPLY_FRACTION * self.sizing,
                heat=REACTOR_HEAT_FACTOR * self.sizing,
            )
        return Resources()

    def get_potential_consumption(self, resources, time):
        if self.running:
            return Resources(
                heat=REACTOR_HEAT_FACTOR * self.sizing,
                fuel=min(resources.fuel, REACTOR_FUEL_FACTOR * self.sizing),
            )
        return Resources(
            power=min(resources.power, -REACTOR_START_POWER * self.sizing),
            heat=REACTOR_START_HEAT * self.sizing,
            fuel=min(resources.fuel, -REACTOR_START_FUEL * self.sizing),
        )

    def supply_on_demand(self, resources, time):
        if self.running and resources.power < 0.0:
            return self.compute_demand_level(-resources.power * REACTOR_DEMAND_MARGIN, time)
        return Resources()

    def consume_on_demand(self, resources, time):
        if self.running:
            return Resources()
        if resources.power >= REACTOR_START_POWER * self.sizing:
            self.phase = ReactorPhase.RUNNING
            self.just_started = True
            logger.info(f"Reactor {self.name} started")
            return Resources(
                power=-REACTOR_START_POWER * self.sizing,
                heat=REACTOR_START_HEAT * self.sizing,
                fuel=-REACTOR_START_FUEL * self.sizing,
            )
        return Resources()

    def shutdown(self):
        """Stop a running reactor. There is no automatic shutdown path."""
        if not self.running:
            return False
        self.phase = ReactorPhase.STOPPED
        self.last_utilization = 0.0
        self.just_started = False
        logger.info(f"Reactor {self.name} shut down")
        return True

    def status(self):
        if not self.running:
            return "Reactor stopped."
        if self.just_started:
            return "Reactor started!"
        return f"Reactor running at {self.last_utilization * 100.0}%"

    def available_commands(self):
        return super().available_commands() + ["shutdown"]

    def command(self, action, params):
        if action == "shutdown":
            if self.shutdown():
                return success_dict("reactor_shutdown", name=self.name)
            return error_dict("NOT_RUNNING", f"Reactor {self.name} is not running")
        return super().command(action, params)

    def get_state(self):
        state = super().get_state()
        state.update({
            "phase": self.phase.value,
            "sizing": self.sizing,
            "last_utilization": self.last_utilization,
            "just_started": self.just_started,
        })
        return state
