"""
Tests for booking validation and commit.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from app.application.use_cases.reservation import ReservationFailure, ReservationUseCase
from app.domain.entities.business_hours import BusinessHours
from app.domain.entities.slot import Slot
from app.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from app.infrastructure.store.memory_store import MemoryBookingStore

TZ = ZoneInfo("America/New_York")
FRIDAY_2PM = datetime(2026, 10, 23, 14, 0, tzinfo=TZ)


def _use_case(store: MemoryBookingStore | None = None) -> ReservationUseCase:
    return ReservationUseCase(
        store=store or MemoryBookingStore(),
        catalog=ServiceCatalogStore(),
        hours=BusinessHours(timezone=TZ),
    )


def _reserve(use_case: ReservationUseCase, service_id: str = "event-glam", starts_at: datetime = FRIDAY_2PM):
    return use_case.reserve_booking(
        client_name="Jane Doe",
        email="jane@example.com",
        service_id=service_id,
        starts_at=starts_at,
    )


def test_successful_reservation_sets_end_from_duration():
    store = MemoryBookingStore()
    result = _reserve(_use_case(store))

    assert result.ok
    assert result.booking.ends_at == FRIDAY_2PM + timedelta(minutes=90)
    assert result.booking.service_id == "event-glam"
    assert store.list_bookings() == [result.booking]


def test_booking_instants_survive_iso_round_trip():
    booking = _reserve(_use_case()).booking
    payload = booking.to_payload()

    assert datetime.fromisoformat(payload["startsAt"]) == booking.starts_at
    assert datetime.fromisoformat(payload["endsAt"]) == booking.ends_at
    assert "phone" not in payload


def test_unknown_service_is_rejected_first():
    """Service lookup fails before the hours check even for an out-of-hours time."""
    result = _reserve(_use_case(), service_id="airbrush-tan", starts_at=FRIDAY_2PM.replace(hour=7))

    assert not result.ok
    assert result.failure is ReservationFailure.service_not_found
    assert result.error == "Service not found."


def test_start_before_opening_is_rejected():
    result = _reserve(_use_case(), starts_at=FRIDAY_2PM.replace(hour=8, minute=30))

    assert result.failure is ReservationFailure.before_opening
    assert result.error == "Sasha starts at 9:00. Please choose a later time."


def test_end_after_closing_is_rejected():
    """Bridal glam runs two hours, so 16:30 would end at 18:30."""
    result = _reserve(_use_case(), service_id="bridal-glam", starts_at=FRIDAY_2PM.replace(hour=16, minute=30))

    assert result.failure is ReservationFailure.after_closing
    assert result.error == "This service finishes after 18:00. Pick an earlier slot."


def test_service_ending_exactly_at_close_is_accepted():
    result = _reserve(_use_case(), service_id="bridal-glam", starts_at=FRIDAY_2PM.replace(hour=16))

    assert result.ok
    assert result.booking.ends_at.hour == 18


def test_overlapping_request_is_a_slot_conflict():
    use_case = _use_case()
    assert _reserve(use_case).ok

    result = _reserve(use_case, service_id="lesson", starts_at=FRIDAY_2PM + timedelta(minutes=60))

    assert result.failure is ReservationFailure.slot_conflict
    assert result.error.startswith("That slot just booked up.")


def test_back_to_back_bookings_are_allowed():
    use_case = _use_case()
    assert _reserve(use_case).ok

    assert _reserve(use_case, starts_at=FRIDAY_2PM + timedelta(minutes=90)).ok


def test_stale_conflict_check_cannot_double_book():
    """A check that passes before another writer lands is caught on append."""

    class StaleCheckStore(MemoryBookingStore):
        def conflicts_with(self, slot: Slot) -> bool:
            return False

    store = StaleCheckStore()
    use_case = _use_case(store)

    assert _reserve(use_case).ok
    result = _reserve(use_case)

    assert result.failure is ReservationFailure.slot_conflict
    assert len(store.list_bookings()) == 1


def test_concurrent_reservations_for_same_slot_book_once():
    store = MemoryBookingStore()
    use_case = _use_case(store)
    barrier = threading.Barrier(8)
    results = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        result = _reserve(use_case)
        with results_lock:
            results.append(result)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(1 for r in results if r.ok) == 1
    assert len(store.list_bookings()) == 1


def test_stored_bookings_never_overlap():
    store = MemoryBookingStore()
    use_case = _use_case(store)
    for hour in range(9, 18):
        for minute in (0, 30):
            _reserve(use_case, service_id="soft-glow", starts_at=FRIDAY_2PM.replace(hour=hour, minute=minute))

    bookings = store.list_bookings()
    assert bookings
    for i, a in enumerate(bookings):
        for b in bookings[i + 1 :]:
            assert not (a.starts_at < b.ends_at and b.starts_at < a.ends_at)


def test_sunday_within_hours_is_not_rejected():
    """Reservation checks cover hours and conflicts only; Sunday is filtered from offered slots."""
    result = _reserve(_use_case(), starts_at=datetime(2026, 10, 25, 11, 0, tzinfo=TZ))

    assert result.ok
