from __future__ import annotations

import logging
import threading

from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking
from app.domain.entities.slot import Slot


class MemoryBookingStore(BookingStorePort):
    """Process-lifetime booking list. A single lock serializes every writer."""

    def __init__(self) -> None:
        self._bookings: list[Booking] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings)

    def conflicts_with(self, slot: Slot) -> bool:
        with self._lock:
            return self._has_conflict(slot)

    def append(self, booking: Booking) -> bool:
        with self._lock:
            if self._has_conflict(booking.slot):
                self._logger.info(
                    "Booking rejected on write, slot taken",
                    extra={"booking_id": booking.id, "starts_at": booking.starts_at.isoformat()},
                )
                return False
            self._bookings.append(booking)
            return True

    def _has_conflict(self, slot: Slot) -> bool:
        return any(slot.overlaps(b.starts_at, b.ends_at) for b in self._bookings)
