"""Result records returned by the session query service.

Records are immutable and detached from any database session. All datetimes
are timezone-aware UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StreamSession:
    """A scheduled interval during which a channel is live."""

    id: int
    channel_id: int
    utc_start_time: datetime
    utc_end_time: datetime
    scheduled_stream_id: int | None = None
    tzdb_version_id: str | None = None


@dataclass(frozen=True)
class Channel:
    """A content source hosting stream sessions."""

    id: int
    name: str
    uri: str | None = None
    country_code: str | None = None
    time_zone_id: str | None = None


@dataclass(frozen=True)
class EventResult:
    """One session paired with the channel that owns it."""

    stream_session: StreamSession
    channel: Channel
