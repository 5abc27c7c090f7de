from __future__ import annotations

from datetime import datetime

from app.application.ports.booking_store import BookingStorePort
from app.application.utils.schedule import format_display, generate_slots
from app.domain.entities.business_hours import BusinessHours
from app.domain.entities.slot import AvailableSlot


class AvailabilityUseCase:
    def __init__(
        self,
        store: BookingStorePort,
        hours: BusinessHours,
        days_ahead: int = 21,
    ) -> None:
        self._store = store
        self._hours = hours
        self._days_ahead = days_ahead

    def get_next_available_slots(self, now: datetime, count: int = 6) -> list[AvailableSlot]:
        available: list[AvailableSlot] = []
        for slot in generate_slots(now, self._hours, self._days_ahead):
            if len(available) >= count:
                break
            if slot.start < now or self._store.conflicts_with(slot):
                continue
            available.append(
                AvailableSlot(formatted=format_display(slot.start), starts_at=slot.start.isoformat())
            )
        return available
