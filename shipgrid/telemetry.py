# shipgrid/telemetry.py
"""Ledger history recorded from manager tick events."""

from typing import Dict, List

import numpy as np

from shipgrid.core.event_bus import TICK_COMPLETE, TickEvent
from shipgrid.core.resources import Resources

FIELDS = ("power", "heat", "fuel")


class LedgerRecorder:
    """Collects the ship ledger after every tick.

    Attach to the manager's event bus; each ``tick_complete`` event appends
    one ``(power, heat, fuel)`` row.
    """

    def __init__(self, event_bus=None):
        self.rows: List[List[float]] = []
        self.event_bus = event_bus
        if event_bus is not None:
            event_bus.subscribe(TICK_COMPLETE, self.on_tick)

    def on_tick(self, event: TickEvent):
        self.record(event.resources)

    def record(self, resources: Resources):
        self.rows.append([resources.power, resources.heat, resources.fuel])

    def __len__(self):
        return len(self.rows)

    def as_array(self) -> np.ndarray:
        """History as a ``(ticks, 3)`` float array."""
        if not self.rows:
            return np.zeros((0, len(FIELDS)))
        return np.asarray(self.rows, dtype=float)

    def summary(self) -> Dict[str, Dict[str, float]]:
        """Min, max and final value of each quantity."""
        history = self.as_array()
        if history.shape[0] == 0:
            return {}
        return {
            field: {
                "min": float(history[:, column].min()),
                "max": float(history[:, column].max()),
                "final": float(history[-1, column]),
            }
            for column, field in enumerate(FIELDS)
        }

    def clear(self):
        self.rows = []

    def detach(self):
        if self.event_bus is not None:
            self.event_bus.unsubscribe(TICK_COMPLETE, self.on_tick)
            self.event_bus = None
