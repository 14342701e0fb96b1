from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from spurgeon_daily.quotes.calendar import (
    calendar_date,
    day_of_year,
    format_complete,
    reference_zone,
)


def test_jan_first_non_leap_is_one():
    assert day_of_year(date(2023, 1, 1)) == 1


def test_dec_31_leap_is_366():
    assert day_of_year(date(2024, 12, 31)) == 366


def test_dec_31_non_leap_is_365():
    assert day_of_year(date(2023, 12, 31)) == 365


def test_after_feb_29():
    assert day_of_year(date(2024, 3, 1)) == 61
    assert day_of_year(date(2023, 3, 1)) == 60


def test_deterministic_across_calls():
    when = datetime(2024, 7, 4, 12, 30, tzinfo=UTC)
    tz = ZoneInfo("Europe/London")
    assert len({day_of_year(when, tz) for _ in range(10)}) == 1


def test_aware_datetime_uses_reference_zone():
    # 03:00 UTC on Jan 1 is still Dec 31 in New York
    when = datetime(2024, 1, 1, 3, 0, tzinfo=UTC)
    assert day_of_year(when, ZoneInfo("UTC")) == 1
    assert day_of_year(when, ZoneInfo("America/New_York")) == 365
    assert calendar_date(when, ZoneInfo("America/New_York")) == date(2023, 12, 31)


def test_naive_datetime_taken_as_local():
    assert day_of_year(datetime(2024, 2, 1, 23, 59), ZoneInfo("Asia/Tokyo")) == 32


def test_format_complete():
    assert format_complete(date(2026, 10, 17)) == "Saturday, October 17, 2026"
    assert format_complete(date(2024, 1, 1)) == "Monday, January 1, 2024"


def test_unknown_zone_falls_back_to_local():
    assert reference_zone("Mars/Olympus") is None
    assert reference_zone("/etc/passwd") is None
    assert reference_zone("") is None
    assert reference_zone("Europe/London") == ZoneInfo("Europe/London")
