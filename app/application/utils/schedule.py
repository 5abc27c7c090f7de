from __future__ import annotations

from datetime import date, datetime, time, timedelta

from app.domain.entities.business_hours import BusinessHours
from app.domain.entities.slot import Slot


def generate_slots(now: datetime, hours: BusinessHours, days_ahead: int = 21) -> list[Slot]:
    """
    Candidate slots for today and the next `days_ahead` days.

    Each business day yields back-to-back slots of one interval, the first at
    the opening hour and the last ending exactly at closing.
    """
    today = now.astimezone(hours.timezone).date()
    slots: list[Slot] = []

    for day_offset in range(days_ahead + 1):
        day = today + timedelta(days=day_offset)
        if not hours.is_business_day(day):
            continue
        slots.extend(_day_slots(day, hours))

    return slots


def _day_slots(day: date, hours: BusinessHours) -> list[Slot]:
    current = datetime.combine(day, time(hour=hours.open_hour), tzinfo=hours.timezone)
    closing = datetime.combine(day, time(hour=hours.close_hour), tzinfo=hours.timezone)
    slots: list[Slot] = []

    while current + hours.slot_interval <= closing:
        slots.append(Slot(start=current, end=current + hours.slot_interval))
        current += hours.slot_interval

    return slots


def format_display(moment: datetime) -> str:
    """'Friday, October 23 at 2:00 PM'"""
    return f"{moment:%A, %B} {moment.day} at {format_clock(moment)}"


def format_clock(moment: datetime) -> str:
    """'2:00 PM'"""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment:%M %p}"
