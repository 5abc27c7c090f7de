from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Slot:
    start: datetime
    end: datetime

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Half-open comparison: touching endpoints do not overlap."""
        return self.start < end and start < self.end


@dataclass(frozen=True)
class AvailableSlot:
    formatted: str
    starts_at: str  # ISO 8601 with offset
