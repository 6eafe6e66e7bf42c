# shipgrid/__init__.py
"""
Shared ship resource economy.
Components negotiate power, heat and fuel each tick through a ComponentManager.
"""

from shipgrid.core.resources import Resources, GameTime
from shipgrid.core.base_component import Component
from shipgrid.manager import ComponentManager

__all__ = ['Resources', 'GameTime', 'Component', 'ComponentManager']
