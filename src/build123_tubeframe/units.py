"""Unit conversion between the parameter unit (inches) and the model unit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MM_PER_INCH: float = 25.4

# Overlap used to keep boolean operands from sharing coincident faces.
# Always expressed in model units and never part of a reported dimension.
BOOLEAN_EPSILON: float = 0.01


class Units(Enum):
    MM = "mm"
    INCH = "in"

    @classmethod
    def parse(cls, value: Units | str) -> Units:
        if isinstance(value, Units):
            return value
        aliases = {"mm": cls.MM, "millimeter": cls.MM, "in": cls.INCH, "inch": cls.INCH}
        try:
            return aliases[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown unit '{value}'. Use: {sorted(aliases)}") from None


@dataclass(frozen=True)
class UnitConverter:
    """Linear scale from inches to the model unit.

    ``Units.MM`` scales by 25.4, ``Units.INCH`` keeps values inch-native.
    """

    model_units: Units = Units.MM
    epsilon: float = BOOLEAN_EPSILON

    @property
    def scale(self) -> float:
        return MM_PER_INCH if self.model_units is Units.MM else 1.0

    def to_model_units(self, value: float) -> float:
        return value * self.scale

    def to_inches(self, value: float) -> float:
        return value / self.scale


def to_model_units(value: float, model_units: Units = Units.MM) -> float:
    """Convert an inch value to ``model_units``."""
    return UnitConverter(model_units).to_model_units(value)
