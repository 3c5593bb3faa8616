# tests/test_timezones.py
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from devstreams.errors import DateOutOfRangeError, UnknownTimeZoneError
from devstreams.timezones import (
    get_zone,
    resolve_day_range,
    start_of_day,
    to_local_date,
)


def test_spring_forward_day_is_23_hours():
    """DST start in New York: 2024-03-10 loses an hour."""
    start, end = resolve_day_range(date(2024, 3, 10), ZoneInfo("America/New_York"))

    assert start == datetime(2024, 3, 10, 5, 0, tzinfo=timezone.utc)
    assert end == datetime(2024, 3, 11, 4, 0, tzinfo=timezone.utc)
    assert end - start == timedelta(hours=23)


def test_fall_back_day_is_25_hours():
    start, end = resolve_day_range(date(2024, 11, 3), ZoneInfo("America/New_York"))

    assert start == datetime(2024, 11, 3, 4, 0, tzinfo=timezone.utc)
    assert end == datetime(2024, 11, 4, 5, 0, tzinfo=timezone.utc)
    assert end - start == timedelta(hours=25)


def test_regular_day_is_24_hours():
    start, end = resolve_day_range(date(2024, 6, 15), ZoneInfo("Europe/Berlin"))

    assert start == datetime(2024, 6, 14, 22, 0, tzinfo=timezone.utc)
    assert end - start == timedelta(hours=24)


def test_utc_day_matches_calendar_day():
    start, end = resolve_day_range(date(2024, 2, 29), ZoneInfo("UTC"))

    assert start == datetime(2024, 2, 29, tzinfo=timezone.utc)
    assert end == datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_boundaries_are_utc_aware():
    start, end = resolve_day_range(date(2024, 1, 1), ZoneInfo("Asia/Tokyo"))

    assert start.tzinfo == timezone.utc
    assert end.tzinfo == timezone.utc
    assert start == datetime(2023, 12, 31, 15, 0, tzinfo=timezone.utc)


def test_start_of_day_when_midnight_is_skipped():
    """Sao Paulo began DST at midnight on 2018-11-04; the day starts at 01:00."""
    zone = ZoneInfo("America/Sao_Paulo")

    start = start_of_day(date(2018, 11, 4), zone)

    assert start == datetime(2018, 11, 4, 3, 0, tzinfo=timezone.utc)
    assert start.astimezone(zone).hour == 1
    _, end = resolve_day_range(date(2018, 11, 4), zone)
    assert end - start == timedelta(hours=23)


def test_start_of_day_is_first_instant_of_date():
    """Havana springs forward at midnight on 2024-03-10."""
    zone = ZoneInfo("America/Havana")

    start = start_of_day(date(2024, 3, 10), zone)

    assert start.astimezone(zone).date() == date(2024, 3, 10)
    assert (start - timedelta(seconds=1)).astimezone(zone).date() == date(2024, 3, 9)


def test_day_range_past_last_supported_date():
    with pytest.raises(DateOutOfRangeError) as exc_info:
        resolve_day_range(date(9999, 12, 31), ZoneInfo("America/New_York"))

    assert exc_info.value.details["local_date"] == "9999-12-31"
    assert exc_info.value.details["time_zone_id"] == "America/New_York"
    assert isinstance(exc_info.value.__cause__, OverflowError)


def test_day_range_before_first_supported_date():
    with pytest.raises(DateOutOfRangeError):
        resolve_day_range(date(1, 1, 1), ZoneInfo("Asia/Tokyo"))


def test_to_local_date_drops_time_of_day():
    assert to_local_date(datetime(2024, 3, 10, 23, 59)) == date(2024, 3, 10)
    assert to_local_date(date(2024, 3, 10)) == date(2024, 3, 10)


def test_get_zone_known():
    assert get_zone("America/New_York") == ZoneInfo("America/New_York")


@pytest.mark.parametrize("bad", ["Not/AZone", "", "../etc/passwd"])
def test_get_zone_unknown(bad):
    with pytest.raises(UnknownTimeZoneError) as exc_info:
        get_zone(bad)

    assert exc_info.value.details["time_zone_id"] == bad
