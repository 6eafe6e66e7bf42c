# shipgrid/core/resources.py
"""
Resource ledger shared by every component.

The same ``Resources`` record is used as an absolute stock, as a signed
per-tick delta and as an outstanding deficit or surplus handed between
resolution phases, so none of its fields may be assumed non-negative.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional


@dataclass
class Resources:
    """Power (W), heat (J) and fuel (g) accumulator."""

    power: float = 0.0
    heat: float = 0.0
    fuel: float = 0.0

    @classmethod
    def electric(cls, amount: float) -> "Resources":
        return cls(power=amount)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, float]]) -> "Resources":
        data = data or {}
        return cls(
            power=float(data.get("power", 0.0)),
            heat=float(data.get("heat", 0.0)),
            fuel=float(data.get("fuel", 0.0)),
        )

    def __add__(self, other: "Resources") -> "Resources":
        return Resources(
            power=self.power + other.power,
            heat=self.heat + other.heat,
            fuel=self.fuel + other.fuel,
        )

    def __iadd__(self, other: "Resources") -> "Resources":
        self.power += other.power
        self.heat += other.heat
        self.fuel += other.fuel
        return self

    def copy(self) -> "Resources":
        return Resources(self.power, self.heat, self.fuel)

    def is_zero(self) -> bool:
        return self.power == 0.0 and self.heat == 0.0 and self.fuel == 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.power}W {self.heat}J {self.fuel}g"


@dataclass(frozen=True)
class GameTime:
    """Duration of the current tick in milliseconds."""

    ms: int = 1
