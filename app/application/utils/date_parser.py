from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

from dateutil.parser import isoparse
from dateutil.relativedelta import MO, TU, WE, TH, FR, SA, SU, relativedelta

DAY_PATTERNS = (
    (r"mon(?:day)?", MO),
    (r"tue(?:s|sday)?", TU),
    (r"wed(?:nesday)?", WE),
    (r"thu(?:r|rs|rsday)?", TH),
    (r"fri(?:day)?", FR),
    (r"sat(?:urday)?", SA),
    (r"sun(?:day)?", SU),
)

MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

VAGUE_TIME_RANGES = {
    "morning": (9, 12),
    "afternoon": (12, 17),
    "evening": (17, 20),
    "tonight": (17, 20),
    "night": (18, 21),
}

ISO_PATTERN = re.compile(
    r"\b(?P<date>\d{4}-\d{2}-\d{2})(?P<time>[t ]\d{2}:\d{2}(?::\d{2})?(?:z|[+-]\d{2}:?\d{2})?)?",
    re.IGNORECASE,
)

DEFAULT_HOUR = 12


def parse_date_preference(text: str, reference_date: date) -> date | None:
    """
    Parse a calendar day from text. Returns date or None if not found.

    An explicit month/day wins over a weekday name in the same message.
    """
    normalized = text.lower().strip()

    if re.search(r"\b(today|tonight)\b", normalized):
        return reference_date

    if re.search(r"\btomorrow\b", normalized):
        return reference_date + timedelta(days=1)

    explicit = _parse_month_day(normalized, reference_date)
    if explicit:
        return explicit

    for day_pattern, day_of_week in DAY_PATTERNS:
        match = re.search(rf"\b(next\s+)?{day_pattern}\b\.?", normalized)
        if match:
            # Plain weekday includes today; "next friday" is strictly after today.
            if match.group(1):
                return reference_date + relativedelta(days=+1, weekday=day_of_week)
            return reference_date + relativedelta(weekday=day_of_week)

    return None


def _parse_month_day(normalized: str, reference_date: date) -> date | None:
    for month_name, month_num in MONTH_NAMES.items():
        abbreviation = month_name[:3]
        match = re.search(
            rf"\b(?:{month_name}|{abbreviation}\.?)\s+(\d{{1,2}})(?:st|nd|rd|th)?\b",
            normalized,
        ) or re.search(
            rf"\b(\d{{1,2}})(?:st|nd|rd|th)?\s+(?:of\s+)?(?:{month_name}|{abbreviation})\b",
            normalized,
        )
        if match:
            day = int(match.group(1))
            resolved = _forward_date(reference_date, month_num, day)
            if resolved:
                return resolved

    match = re.search(r"\b(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?\b", normalized)
    if match:
        month = int(match.group(1))
        day = int(match.group(2))
        if match.group(3):
            year = int(match.group(3))
            if year < 100:
                year += 2000
            try:
                return date(year, month, day)
            except ValueError:
                return None
        return _forward_date(reference_date, month, day)

    return None


def parse_time_preference(text: str) -> tuple[int, int] | None:
    """Parse time preference from text. Returns (hour, minute) or None."""
    normalized = text.lower().strip()

    if re.search(r"\b(noon|midday)\b", normalized):
        return (12, 0)

    time_patterns = [
        r"\b(\d{1,2}):(\d{2})\s*(am|pm)?\b",
        r"\b(\d{1,2})\s*(am|pm)\b",
    ]

    for pattern in time_patterns:
        match = re.search(pattern, normalized)
        if match:
            hour = int(match.group(1))
            minute = int(match.group(2)) if match.group(2).isdigit() else 0
            am_pm = match.group(match.lastindex) if match.group(match.lastindex) in ("am", "pm") else None

            if am_pm == "pm" and hour != 12:
                hour += 12
            elif am_pm == "am" and hour == 12:
                hour = 0

            if 0 <= hour <= 23 and 0 <= minute <= 59:
                return (hour, minute)

    return None


def map_vague_time_to_range(text: str) -> tuple[int, int] | None:
    """Map a vague time of day in text to an hour range. Returns (start_hour, end_hour) or None."""
    normalized = text.lower().strip()
    for word, hour_range in VAGUE_TIME_RANGES.items():
        if re.search(rf"\b{word}\b", normalized):
            return hour_range
    return None


def parse_desired_start(text: str, now: datetime, interval_minutes: int = 30) -> datetime | None:
    """
    Resolve the appointment start a message asks for, relative to `now`.

    Ambiguous references resolve forward: a bare time already past today moves
    to tomorrow. A vague time of day ("morning") starts its range; a day with
    no time at all implies noon. The result is rounded to the nearest slot
    boundary. Impossible dates resolve to nothing.
    """
    tz = now.tzinfo
    iso_match = ISO_PATTERN.search(text)
    day: date | None = None
    if iso_match:
        try:
            if iso_match.group("time"):
                parsed = isoparse(iso_match.group(0).upper())
                if parsed.tzinfo is None:
                    parsed = parsed.replace(tzinfo=tz)
                return round_to_nearest_slot(parsed.astimezone(tz), interval_minutes)
            day = isoparse(iso_match.group("date")).date()
        except ValueError:
            return None
    else:
        day = parse_date_preference(text, now.date())

    clock = parse_time_preference(text)
    if clock is None:
        vague_range = map_vague_time_to_range(text)
        if vague_range:
            clock = (vague_range[0], 0)

    if day is None and clock is None:
        return None

    if day is None:
        hour, minute = clock
        candidate = datetime.combine(now.date(), time(hour, minute), tzinfo=tz)
        if candidate < now:
            candidate += timedelta(days=1)
    else:
        hour, minute = clock or (DEFAULT_HOUR, 0)
        candidate = datetime.combine(day, time(hour, minute), tzinfo=tz)

    return round_to_nearest_slot(candidate, interval_minutes)


def round_to_nearest_slot(moment: datetime, interval_minutes: int = 30) -> datetime:
    """Round to the nearest interval boundary; the exact midpoint rounds up."""
    remainder = moment.minute % interval_minutes
    floored = moment.replace(second=0, microsecond=0) - timedelta(minutes=remainder)
    if remainder * 2 >= interval_minutes:
        return floored + timedelta(minutes=interval_minutes)
    return floored


def _forward_date(reference_date: date, month: int, day: int) -> date | None:
    year = reference_date.year
    if month < reference_date.month or (month == reference_date.month and day < reference_date.day):
        year += 1
    try:
        return date(year, month, day)
    except ValueError:
        return None
