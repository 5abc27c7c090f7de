"""
Tests for natural-language start time parsing.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from app.application.utils.date_parser import (
    map_vague_time_to_range,
    parse_date_preference,
    parse_desired_start,
    parse_time_preference,
    round_to_nearest_slot,
)

TZ = ZoneInfo("America/New_York")
MONDAY_8AM = datetime(2026, 10, 19, 8, 0, tzinfo=TZ)


def test_time_parsing():
    assert parse_time_preference("2pm") == (14, 0)
    assert parse_time_preference("14:00") == (14, 0)
    assert parse_time_preference("9:30 am") == (9, 30)
    assert parse_time_preference("12am") == (0, 0)
    assert parse_time_preference("around noon") == (12, 0)
    assert parse_time_preference("no time here") is None


def test_weekday_resolves_forward():
    friday = date(2026, 10, 23)

    assert parse_date_preference("this Friday", date(2026, 10, 19)) == friday
    assert parse_date_preference("friday please", friday) == friday
    assert parse_date_preference("next friday", friday) == date(2026, 10, 30)


def test_month_day_rolls_into_next_year_when_past():
    assert parse_date_preference("October 30", date(2026, 10, 19)) == date(2026, 10, 30)
    assert parse_date_preference("jan 5th", date(2026, 10, 19)) == date(2027, 1, 5)
    assert parse_date_preference("3 of march", date(2026, 10, 19)) == date(2027, 3, 3)
    assert parse_date_preference("11/2", date(2026, 10, 19)) == date(2026, 11, 2)


def test_month_name_needs_word_boundary():
    assert parse_date_preference("maybe 2 options", date(2026, 10, 19)) is None


def test_desired_start_combines_day_and_time():
    assert parse_desired_start("book the Event Glam this Friday at 2pm", MONDAY_8AM) == datetime(
        2026, 10, 23, 14, 0, tzinfo=TZ
    )
    assert parse_desired_start("tomorrow at 10:15am", MONDAY_8AM) == datetime(2026, 10, 20, 10, 30, tzinfo=TZ)


def test_day_without_time_implies_noon():
    assert parse_desired_start("Saturday works", MONDAY_8AM) == datetime(2026, 10, 24, 12, 0, tzinfo=TZ)


def test_bare_time_already_past_moves_to_tomorrow():
    assert parse_desired_start("7am", MONDAY_8AM) == datetime(2026, 10, 20, 7, 0, tzinfo=TZ)
    assert parse_desired_start("3:14pm", MONDAY_8AM) == datetime(2026, 10, 19, 15, 0, tzinfo=TZ)


def test_iso_timestamps_are_accepted():
    assert parse_desired_start("2026-10-24T10:00:00-04:00", MONDAY_8AM) == datetime(2026, 10, 24, 10, 0, tzinfo=TZ)
    assert parse_desired_start("on 2026-10-24 at 3pm", MONDAY_8AM) == datetime(2026, 10, 24, 15, 0, tzinfo=TZ)


def test_no_date_returns_none():
    assert parse_desired_start("asdf qwerty", MONDAY_8AM) is None
    assert parse_desired_start("jane@example.com", MONDAY_8AM) is None


def test_rounding_to_half_hour():
    base = datetime(2026, 10, 19, 10, 0, tzinfo=TZ)

    assert round_to_nearest_slot(base.replace(minute=14)) == base
    assert round_to_nearest_slot(base.replace(minute=15)) == base.replace(minute=30)
    assert round_to_nearest_slot(base.replace(minute=44)) == base.replace(minute=30)
    assert round_to_nearest_slot(base.replace(minute=45)) == base.replace(hour=11)
    assert round_to_nearest_slot(base.replace(minute=30, second=59)) == base.replace(minute=30)


def test_impossible_iso_date_resolves_to_nothing():
    assert parse_desired_start("book event glam on 2026-13-45", MONDAY_8AM) is None
    assert parse_desired_start("2026-02-30T10:00", MONDAY_8AM) is None


def test_explicit_date_wins_over_weekday_name():
    """October 30 is itself a Friday; the weekday must not pull it back a week."""
    assert parse_desired_start("Friday, October 30 at 2pm", MONDAY_8AM) == datetime(2026, 10, 30, 14, 0, tzinfo=TZ)
    assert parse_desired_start("wed 11/4 at 10am", MONDAY_8AM) == datetime(2026, 11, 4, 10, 0, tzinfo=TZ)


def test_abbreviated_weekdays():
    assert parse_desired_start("fri 2pm", MONDAY_8AM) == datetime(2026, 10, 23, 14, 0, tzinfo=TZ)
    assert parse_date_preference("tues works", date(2026, 10, 19)) == date(2026, 10, 20)
    assert parse_date_preference("thurs?", date(2026, 10, 19)) == date(2026, 10, 22)
    assert parse_date_preference("next sat.", date(2026, 10, 24)) == date(2026, 10, 31)
    assert parse_date_preference("wedding glam", date(2026, 10, 19)) is None


def test_vague_time_of_day():
    assert map_vague_time_to_range("sometime in the afternoon") == (12, 17)
    assert map_vague_time_to_range("nightly") is None
    assert parse_desired_start("tonight", MONDAY_8AM) == datetime(2026, 10, 19, 17, 0, tzinfo=TZ)
    assert parse_desired_start("tomorrow morning", MONDAY_8AM) == datetime(2026, 10, 20, 9, 0, tzinfo=TZ)
    assert parse_desired_start("saturday evening at 5:30pm", MONDAY_8AM) == datetime(2026, 10, 24, 17, 30, tzinfo=TZ)
