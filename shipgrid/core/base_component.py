# shipgrid/core/base_component.py
"""
Base component interface for the resource economy.
This defines the contract the ComponentManager drives every tick.
"""

from shipgrid.core.resources import Resources
from shipgrid.utils.errors import unknown_command_error


class Component:
    """Base class for all producers and consumers of ship resources.

    Every hook defaults to "no effect" and returns a zero ledger, so a
    component only overrides the phases it takes part in. Consumption is
    reported as a negative contribution.
    """

    type_name = "component"

    def __init__(self, config=None):
        """
        Initialize the component with configuration

        Args:
            config (dict): Configuration dictionary for this component
        """
        config = config or {}
        self.name = config.get("name", self.type_name)

    def get_fixed_processing(self, time):
        """
        Apply the unconditional, demand independent effect for this tick

        Called exactly once per tick. Must not depend on any other component.

        Args:
            time (GameTime): Duration of the current tick

        Returns:
            Resources: Delta added straight into the ship ledger
        """
        return Resources()

    def get_potential_supply(self, time):
        """
        Report the most this component could supply this tick (read-only)

        Args:
            time (GameTime): Duration of the current tick

        Returns:
            Resources: Best case supply
        """
        return Resources()

    def get_potential_consumption(self, resources, time):
        """
        Report the most this component could absorb this tick (read-only)

        Args:
            resources (Resources): Running potential supply seen so far
            time (GameTime): Duration of the current tick

        Returns:
            Resources: Signed delta, negative for what would be consumed
        """
        return Resources()

    def supply_on_demand(self, resources, time):
        """
        Release up to the outstanding deficit

        Args:
            resources (Resources): Remaining deficit, negative where short
            time (GameTime): Duration of the current tick

        Returns:
            Resources: Exactly what was released
        """
        return Resources()

    def consume_on_demand(self, resources, time):
        """
        Absorb up to what is currently available

        Args:
            resources (Resources): Live ship ledger
            time (GameTime): Duration of the current tick

        Returns:
            Resources: Negative amount actually taken
        """
        return Resources()

    def status(self):
        """Human readable one line summary."""
        return f"{self.name} idle"

    def __str__(self):
        return self.status()

    # ----- Command Helpers -----
    def available_commands(self):
        return ["status", "get_state"]

    def command(self, action, params):
        """
        Process an operator command directed at this component

        Args:
            action (str): The action to perform
            params (dict): Parameters for the action

        Returns:
            dict: Response containing the result or error
        """
        if action == "status":
            return {"ok": True, "status": self.status()}
        if action == "get_state":
            return self.get_state()
        return unknown_command_error(action, self.available_commands())

    def get_state(self):
        """
        Return current component state as a dictionary

        Returns:
            dict: Component state
        """
        return {
            "name": self.name,
            "type": self.type_name,
            "status": self.status(),
        }
