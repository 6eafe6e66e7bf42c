# shipgrid/core/__init__.py
"""Core types shared by the manager and every component."""
