# shipgrid/utils/__init__.py
"""Utility modules for the simulation."""

from .errors import *

__all__ = ['errors']
