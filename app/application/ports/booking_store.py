from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.booking import Booking
from app.domain.entities.slot import Slot


class BookingStorePort(ABC):
    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """Return a copy of all confirmed bookings in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def conflicts_with(self, slot: Slot) -> bool:
        """True if any stored booking overlaps the slot (half-open intervals)."""
        raise NotImplementedError

    @abstractmethod
    def append(self, booking: Booking) -> bool:
        """
        Store a booking if its interval is still free.

        The conflict check and the write must happen atomically. Returns False
        and stores nothing when an overlapping booking already exists.
        """
        raise NotImplementedError
