from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from app.application.ports.booking_store import BookingStorePort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.domain.entities.booking import Booking
from app.domain.entities.business_hours import BusinessHours
from app.domain.entities.slot import Slot


class ReservationFailure(str, Enum):
    service_not_found = "service_not_found"
    before_opening = "before_opening"
    after_closing = "after_closing"
    slot_conflict = "slot_conflict"


@dataclass(frozen=True)
class ReservationResult:
    booking: Booking | None = None
    failure: ReservationFailure | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.booking is not None


class ReservationUseCase:
    def __init__(
        self,
        store: BookingStorePort,
        catalog: ServiceCatalogPort,
        hours: BusinessHours,
        artist_name: str = "Sasha",
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._hours = hours
        self._artist_name = artist_name
        self._logger = logging.getLogger(__name__)

    def reserve_booking(
        self,
        client_name: str,
        email: str,
        service_id: str,
        starts_at: datetime,
        phone: str | None = None,
        notes: str | None = None,
    ) -> ReservationResult:
        """
        Validate and commit a booking. Checks run in a fixed order and the
        first failure is returned; nothing is stored on failure.
        """
        service = self._catalog.get_service(service_id)
        if not service:
            return self._reject(ReservationFailure.service_not_found, "Service not found.")

        starts_at = starts_at.astimezone(self._hours.timezone)
        ends_at = starts_at + timedelta(minutes=service.duration_minutes)

        if starts_at < self._hours.open_boundary(starts_at):
            return self._reject(
                ReservationFailure.before_opening,
                f"{self._artist_name} starts at {self._hours.open_hour}:00. Please choose a later time.",
            )

        if ends_at > self._hours.close_boundary(starts_at):
            return self._reject(
                ReservationFailure.after_closing,
                f"This service finishes after {self._hours.close_hour}:00. Pick an earlier slot.",
            )

        if self._store.conflicts_with(Slot(start=starts_at, end=ends_at)):
            return self._slot_conflict()

        booking = Booking(
            id=str(uuid.uuid4()),
            client_name=client_name,
            email=email,
            phone=phone,
            service_id=service.id,
            starts_at=starts_at,
            ends_at=ends_at,
            notes=notes,
        )

        # Another writer may have taken the slot since the check above.
        if not self._store.append(booking):
            return self._slot_conflict()

        self._logger.info(
            "Booking reserved",
            extra={"booking_id": booking.id, "service": service.id, "starts_at": starts_at.isoformat()},
        )
        return ReservationResult(booking=booking)

    def _slot_conflict(self) -> ReservationResult:
        return self._reject(
            ReservationFailure.slot_conflict,
            "That slot just booked up. Let me know another time that works for you.",
        )

    def _reject(self, failure: ReservationFailure, error: str) -> ReservationResult:
        self._logger.warning("Booking rejected", extra={"reason": failure.value})
        return ReservationResult(failure=failure, error=error)
