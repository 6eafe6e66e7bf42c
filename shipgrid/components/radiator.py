# shipgrid/components/radiator.py

from shipgrid.core.base_component import Component
from shipgrid.core.resources import Resources
from shipgrid.core.constants import (
    DEFAULT_RADIATOR_DISSIPATION, RADIATOR_AMBIENT_DECAY,
    RADIATOR_MAX_DUMP, RADIATOR_LOCAL_HEATING,
)


class Radiator(Component):
    """Dumps ship heat relative to its local ambient temperature."""

    type_name = "radiator"

    def __init__(self, config=None):
        super().__init__(config)
        config = config or {}
        self.ambient = float(config.get("ambient", 0.0))
        self.rated_dissipation = float(config.get("rated_dissipation", DEFAULT_RADIATOR_DISSIPATION))

    def get_fixed_processing(self, time):
        self.ambient *= RADIATOR_AMBIENT_DECAY
        return Resources()

    def get_potential_supply(self, time):
        return Resources(heat=self.rated_dissipation)

    def dump_fraction(self, heat):
        """Share of the heat above ambient to remove, in [0, RADIATOR_MAX_DUMP]."""
        if self.ambient <= 0.0:
            # Ratio against a cold or non-positive ambient is unbounded
            return RADIATOR_MAX_DUMP if heat > 0.0 else 0.0
        excess = heat / self.ambient - 1.0
        if excess <= 0.0:
            return 0.0
        return min(excess, RADIATOR_MAX_DUMP)

    def consume_on_demand(self, resources, time):
        output = Resources()
        fraction = self.dump_fraction(resources.heat)
        if fraction > 0.0:
            remove = min(resources.heat, fraction * (resources.heat - self.ambient))
            output.heat -= remove
            self.ambient += remove * RADIATOR_LOCAL_HEATING
        return output

    def status(self):
        return f"ambient temp: {self.ambient}K"

    def get_state(self):
        state = super().get_state()
        state.update({
            "ambient": self.ambient,
            "rated_dissipation": self.rated_dissipation,
        })
        return state
