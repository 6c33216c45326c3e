from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LinearLayout:
    """Spreads ``count`` evenly spaced positions along a span.

    The first position sits ``start_offset`` from the start of the span and
    the last ``end_offset`` from its end. A single position lands midway
    between the two offsets.
    """
    length: float
    count: int
    start_offset: float = 0
    end_offset: float = 0

    @property
    def usable_length(self) -> float:
        return self.length - self.start_offset - self.end_offset

    def positions(self) -> list[float]:
        """Positions measured from the start of the span."""
        if self.count < 1:
            return []
        if self.count == 1:
            return [self.start_offset + self.usable_length / 2]
        step = self.usable_length / (self.count - 1)
        return [self.start_offset + i * step for i in range(self.count)]

    def centered_positions(self) -> list[float]:
        """Positions measured from the midpoint of the span."""
        return [pos - self.length / 2 for pos in self.positions()]
