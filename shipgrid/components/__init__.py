# shipgrid/components/__init__.py
"""
Reference component implementations.
Each component takes part in one or more phases of the tick resolution.
"""


def get_component_class(component_type):
    """
    Get the component class for a given component type

    Args:
        component_type (str): Type of component to create

    Returns:
        class: The component class, or None if not found
    """
    component_map = {
        "reactor": FusionReactor,
        "capacitor": Capacitor,
        "battery": Battery,
        "radiator": Radiator,
        "fuel_tank": FuelTank,
        "laser": Laser,
    }

    return component_map.get(component_type)


# Import component implementations
from shipgrid.components.reactor import FusionReactor, ReactorPhase
from shipgrid.components.capacitor import Capacitor
from shipgrid.components.battery import Battery, BatteryData
from shipgrid.components.radiator import Radiator
from shipgrid.components.fuel_tank import FuelTank
from shipgrid.components.laser import Laser

__all__ = [
    'FusionReactor',
    'ReactorPhase',
    'Capacitor',
    'Battery',
    'BatteryData',
    'Radiator',
    'FuelTank',
    'Laser',
    'get_component_class',
]
