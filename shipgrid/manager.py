# shipgrid/manager.py
"""
Component manager: owns the registered components and resolves one tick
of the shared resource ledger.

Scarcity is settled strictly in list order. The first component in
``supply_order`` fills the deficit first and the first component in
``demand_order`` takes from the live ledger first; there is no fairness or
proportional sharing, so changing either order changes the outcome.
"""

import logging

from shipgrid.core.resources import Resources, GameTime
from shipgrid.core.constants import DEFAULT_TICK_MS
from shipgrid.utils.errors import ScheduleError, error_dict

logger = logging.getLogger(__name__)


class ComponentManager:
    """Runs the four-phase resolution over an ordered set of components."""

    def __init__(self, components=None, supply_order=None, demand_order=None,
                 tick_ms=DEFAULT_TICK_MS, event_bus=None):
        """
        Initialize the manager

        Args:
            components (list): Components in registration order
            supply_order (list): Component indices, in supply priority
            demand_order (list): Component indices, in demand priority
            tick_ms (int): Duration of every tick in milliseconds
            event_bus (EventBus, optional): Receives ``tick_complete`` events
        """
        self.components = []
        self.supply_order = None
        self.demand_order = None
        self.time = GameTime(ms=tick_ms)
        self.event_bus = event_bus
        self.tick_count = 0
        for component in components or []:
            self.register(component)
        if supply_order is not None or demand_order is not None:
            self.set_orders(
                supply_order if supply_order is not None else range(len(self.components)),
                demand_order if demand_order is not None else range(len(self.components)),
            )

    # ----- Registration -----
    def register(self, component):
        """
        Append a component and return its stable index

        Until explicit orders are set both orders follow registration order.
        Components cannot be added once the simulation has ticked.
        """
        if self.tick_count > 0:
            raise ScheduleError(
                f"Cannot register {component.name} after {self.tick_count} ticks"
            )
        self.components.append(component)
        index = len(self.components) - 1
        logger.debug(f"Registered {component.name} at index {index}")
        return index

    def set_orders(self, supply_order, demand_order):
        self.supply_order = list(supply_order)
        self.demand_order = list(demand_order)
        self.validate_orders()

    def get_supply_order(self):
        if self.supply_order is None:
            return list(range(len(self.components)))
        return self.supply_order

    def get_demand_order(self):
        if self.demand_order is None:
            return list(range(len(self.components)))
        return self.demand_order

    def validate_orders(self):
        """Both orders must be permutations of the component indices."""
        expected = list(range(len(self.components)))
        for label, order in (("supply", self.get_supply_order()),
                             ("demand", self.get_demand_order())):
            if len(order) != len(expected):
                raise ScheduleError(
                    f"{label} order has {len(order)} entries for {len(expected)} components"
                )
            if any(isinstance(entry, bool) or not isinstance(entry, int) for entry in order):
                raise ScheduleError(f"{label} order {order} must hold integer indices")
            if sorted(order) != expected:
                raise ScheduleError(
                    f"{label} order {order} is not a permutation of {expected}"
                )

    # ----- Tick -----
    def update(self, resources):
        """
        Advance the simulation by one tick

        Args:
            resources (Resources): Ship ledger, mutated in place
        """
        self.validate_orders()
        time = self.time
        tick = {"tick": self.tick_count + 1}

        # Fixed processing
        for component in self.components:
            resources += component.get_fixed_processing(time)
        logger.debug(f"fixed state: {resources}", extra=tick)

        # Potential supply
        potential_supply = resources.copy()
        for component in self.components:
            potential_supply += component.get_potential_supply(time)

        # Potential consumption, chained through the supply snapshot
        potential_consumption = resources.copy()
        for component in self.components:
            output = component.get_potential_consumption(potential_supply, time)
            potential_supply += output
            potential_consumption += output
        logger.debug(f"potential demand: {potential_consumption}", extra=tick)

        # Actual supply; later suppliers see the deficit shrink
        for index in self.get_supply_order():
            component = self.components[index]
            output = component.supply_on_demand(potential_consumption, time)
            logger.debug(f"{component.name} supplied {output}", extra=tick)
            resources += output
            potential_consumption += output
        logger.debug(f"after supply: {resources}", extra=tick)

        # Actual consumption against the live ledger
        for index in self.get_demand_order():
            resources += self.components[index].consume_on_demand(resources, time)
        logger.debug(f"after demand: {resources}", extra=tick)

        self.tick_count += 1
        if self.event_bus is not None:
            self.event_bus.publish_tick(self.tick_count, time, resources)

    # ----- Lookup and commands -----
    def get_component(self, key):
        """Find a component by registration index or by name."""
        if isinstance(key, int) and not isinstance(key, bool):
            if 0 <= key < len(self.components):
                return self.components[key]
            return None
        for component in self.components:
            if component.name == key:
                return component
        return None

    def index_of(self, name):
        for index, component in enumerate(self.components):
            if component.name == name:
                return index
        return None

    def command(self, target, action, params=None):
        """Route an operator command to a component. Call between ticks only."""
        component = self.get_component(target)
        if component is None:
            return error_dict("UNKNOWN_COMPONENT", f"No component named {target!r}")
        return component.command(action, params or {})

    # ----- Diagnostics -----
    def render(self):
        parts = ["{ "]
        for component in self.components:
            parts.append(component.status())
            parts.append(" : ")
        parts.append(" }")
        return "".join(parts)

    def __str__(self):
        return self.render()

    def get_state(self):
        return {
            "tick": self.tick_count,
            "tick_ms": self.time.ms,
            "supply_order": list(self.get_supply_order()),
            "demand_order": list(self.get_demand_order()),
            "components": [component.get_state() for component in self.components],
        }
