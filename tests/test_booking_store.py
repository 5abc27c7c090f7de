"""
Tests for the in-memory booking store.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from app.domain.entities.booking import Booking
from app.domain.entities.slot import Slot
from app.infrastructure.store.memory_store import MemoryBookingStore

TZ = ZoneInfo("America/New_York")


def _booking(booking_id: str, hour: int, minute: int = 0, minutes: int = 60) -> Booking:
    start = datetime(2026, 10, 20, hour, minute, tzinfo=TZ)
    return Booking(
        id=booking_id,
        client_name="Test Client",
        email="test@example.com",
        service_id="lesson",
        starts_at=start,
        ends_at=start + timedelta(minutes=minutes),
    )


def test_touching_intervals_do_not_conflict():
    """A booking ending at 10:00 and one starting at 10:00 can both be stored."""
    store = MemoryBookingStore()

    assert store.append(_booking("a", 9)) is True
    assert store.conflicts_with(Slot(datetime(2026, 10, 20, 10, 0, tzinfo=TZ), datetime(2026, 10, 20, 10, 30, tzinfo=TZ))) is False
    assert store.append(_booking("b", 10)) is True
    assert len(store.list_bookings()) == 2


def test_overlapping_append_is_refused():
    store = MemoryBookingStore()
    store.append(_booking("a", 9, minutes=120))

    assert store.conflicts_with(Slot(datetime(2026, 10, 20, 10, 30, tzinfo=TZ), datetime(2026, 10, 20, 11, 0, tzinfo=TZ)))
    assert store.append(_booking("b", 10, 30)) is False
    assert [b.id for b in store.list_bookings()] == ["a"]


def test_list_bookings_is_a_copy_and_idempotent():
    store = MemoryBookingStore()
    store.append(_booking("a", 9))

    first = store.list_bookings()
    first.clear()
    second = store.list_bookings()
    third = store.list_bookings()

    assert second == third
    assert [b.id for b in second] == ["a"]
