# src/devstreams/timezones.py
"""Local calendar day to UTC interval resolution.

A local day is the half-open interval between the start of that date and the
start of the next one in the same zone. Across daylight-saving transitions it
is 23 or 25 hours long, so the end is never computed as ``start + 24h``.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

from .errors import DateOutOfRangeError, UnknownTimeZoneError


def get_zone(time_zone_id: str) -> ZoneInfo:
    """Look up an IANA time zone.

    Raises:
        UnknownTimeZoneError: If the identifier is unknown or malformed
    """
    try:
        return ZoneInfo(time_zone_id)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise UnknownTimeZoneError(time_zone_id) from e


def start_of_day(local_date: date, zone: ZoneInfo) -> datetime:
    """Get the first UTC instant whose local date in ``zone`` is ``local_date``.

    Usually this is local midnight. When midnight is repeated the earlier
    occurrence wins; when midnight is skipped by a transition the day starts
    at the transition itself.
    """
    midnight = datetime.combine(local_date, time.min, tzinfo=zone)
    if not tz.datetime_exists(midnight):
        # Skipped by a transition: shift forward by the gap
        midnight = tz.resolve_imaginary(midnight)
    return midnight.astimezone(timezone.utc)


def resolve_day_range(local_date: date, zone: ZoneInfo) -> tuple[datetime, datetime]:
    """Resolve a local calendar date to a UTC ``[day_start, day_end)`` interval.

    Args:
        local_date: Calendar date in ``zone``
        zone: Time zone the date is expressed in

    Returns:
        Tuple of timezone-aware UTC datetimes (day_start, day_end)

    Raises:
        DateOutOfRangeError: If either boundary falls outside the range
            ``datetime`` can represent (dates at the ends of years 1 and 9999)
    """
    try:
        day_start = start_of_day(local_date, zone)
        day_end = start_of_day(local_date + timedelta(days=1), zone)
    except OverflowError as e:
        raise DateOutOfRangeError(local_date, str(zone)) from e
    return day_start, day_end


def to_local_date(value: date | datetime) -> date:
    """Extract the calendar date from a local date or wall-clock datetime.

    Any time-of-day component (and tzinfo) is ignored.
    """
    if isinstance(value, datetime):
        return value.date()
    return value
