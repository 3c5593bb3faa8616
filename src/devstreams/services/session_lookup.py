# src/devstreams/services/session_lookup.py
"""SQL-backed stream session lookups.

Each public call opens its own ORM session, runs a fixed query, maps rows to
immutable records and closes the session before returning. The engine created
from the configured URL lives as long as the service.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone

from sqlalchemy import Engine, and_, distinct, func, select

from ..config import DevStreamsConfig
from ..db import models
from ..db.session import create_db_engine, create_session_factory
from ..errors import (
    AmbiguousNextSessionError,
    SessionQueryError,
    UnknownTimeZoneError,
)
from ..timezones import get_zone, resolve_day_range, to_local_date
from ..types import Channel, EventResult, StreamSession
from .interface import StreamSessionService

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_session(row: models.StreamSession) -> StreamSession:
    return StreamSession(
        id=row.id,
        channel_id=row.channel_id,
        utc_start_time=_as_utc(row.utc_start_time),
        utc_end_time=_as_utc(row.utc_end_time),
        scheduled_stream_id=row.scheduled_stream_id,
        tzdb_version_id=row.tzdb_version_id,
    )


def _to_channel(row: models.Channel) -> Channel:
    return Channel(
        id=row.id,
        name=row.name,
        uri=row.uri,
        country_code=row.country_code,
        time_zone_id=row.time_zone_id,
    )


class SessionQueryService(StreamSessionService):
    """Answers session lookups against the DevStreams database.

    Args:
        database_url: SQLAlchemy URL of the database to read
        echo: Log emitted SQL
        clock: Callable returning the current aware UTC time
        default_time_zone_id: IANA zone used by day lookups when the caller
            passes none
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        clock: Callable[[], datetime] | None = None,
        default_time_zone_id: str | None = None,
    ):
        self._engine = create_db_engine(database_url, echo=echo)
        self._session_factory = create_session_factory(self._engine)
        self._clock = clock or _utc_now
        self._default_time_zone_id = default_time_zone_id

    @classmethod
    def from_config(
        cls,
        config: DevStreamsConfig,
        clock: Callable[[], datetime] | None = None,
    ) -> SessionQueryService:
        """Build a service from a validated configuration."""
        config.validate()
        return cls(
            config.database.url,
            echo=config.database.echo,
            clock=clock,
            default_time_zone_id=config.preferences.default_timezone,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        self._engine.dispose()

    def __enter__(self) -> SessionQueryService:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _now(self) -> datetime:
        return _as_utc(self._clock())

    def get_future_sessions_by_channel(
        self, channel_ids: Iterable[int]
    ) -> dict[int, list[StreamSession]]:
        ids = sorted(set(channel_ids))
        if not ids:
            return {}

        now = self._now()
        stmt = (
            select(models.StreamSession)
            .where(
                models.StreamSession.utc_start_time > now,
                models.StreamSession.channel_id.in_(ids),
            )
            .order_by(models.StreamSession.utc_start_time, models.StreamSession.id)
        )

        with self._session_factory() as session:
            rows = session.scalars(stmt).all()

        lookup: dict[int, list[StreamSession]] = {}
        for row in rows:
            lookup.setdefault(row.channel_id, []).append(_to_session(row))

        logger.debug(
            f"Found {len(rows)} future sessions across {len(lookup)} of "
            f"{len(ids)} channels"
        )
        return lookup

    def get_next_session_by_channel(
        self, channel_ids: Iterable[int], strict: bool = False
    ) -> dict[int, StreamSession]:
        ids = sorted(set(channel_ids))
        if not ids:
            return {}

        now = self._now()
        earliest = (
            select(
                models.StreamSession.channel_id.label("channel_id"),
                func.min(models.StreamSession.utc_start_time).label("utc_start_time"),
            )
            .where(
                models.StreamSession.utc_start_time > now,
                models.StreamSession.channel_id.in_(ids),
            )
            .group_by(models.StreamSession.channel_id)
            .subquery()
        )
        stmt = (
            select(models.StreamSession)
            .join(
                earliest,
                and_(
                    models.StreamSession.channel_id == earliest.c.channel_id,
                    models.StreamSession.utc_start_time == earliest.c.utc_start_time,
                ),
            )
            .order_by(models.StreamSession.channel_id, models.StreamSession.id)
        )

        with self._session_factory() as session:
            rows = session.scalars(stmt).all()

        # Rows are ordered by id within each channel, so the first one wins
        lookup: dict[int, StreamSession] = {}
        tied: dict[int, list[int]] = {}
        for row in rows:
            if row.channel_id in lookup:
                tied.setdefault(row.channel_id, [lookup[row.channel_id].id]).append(
                    row.id
                )
                continue
            lookup[row.channel_id] = _to_session(row)

        if tied:
            if strict:
                channel_id = min(tied)
                raise AmbiguousNextSessionError(channel_id, tied[channel_id])
            logger.debug(
                f"Resolved next-session ties by lowest id for channels {sorted(tied)}"
            )

        return lookup

    def get_events_for_day(
        self,
        time_zone_id: str | None,
        local_date_time: date | datetime,
        tag_ids: Iterable[int] = (),
    ) -> list[EventResult]:
        if time_zone_id is None:
            time_zone_id = self._default_time_zone_id
        if time_zone_id is None:
            raise UnknownTimeZoneError(None)
        zone = get_zone(time_zone_id)
        local_date = to_local_date(local_date_time)
        day_start, day_end = resolve_day_range(local_date, zone)
        wanted_tags = sorted(set(tag_ids))

        params = {
            "time_zone_id": time_zone_id,
            "local_date": local_date.isoformat(),
            "tag_ids": wanted_tags,
            "day_start": day_start.isoformat(),
            "day_end": day_end.isoformat(),
        }
        logger.debug(f"Looking up events for day {params}")

        overlaps_day = and_(
            models.StreamSession.utc_end_time > day_start,
            models.StreamSession.utc_start_time < day_end,
        )
        stmt = select(models.StreamSession).where(overlaps_day)
        if wanted_tags:
            # Channel must carry every requested tag
            tagged = (
                select(models.StreamSession.id)
                .join(
                    models.ChannelTag,
                    models.ChannelTag.channel_id == models.StreamSession.channel_id,
                )
                .where(overlaps_day, models.ChannelTag.tag_id.in_(wanted_tags))
                .group_by(models.StreamSession.id)
                .having(
                    func.count(distinct(models.ChannelTag.tag_id)) >= len(wanted_tags)
                )
                .correlate(None)
            )
            stmt = stmt.where(models.StreamSession.id.in_(tagged))
        stmt = stmt.order_by(models.StreamSession.utc_start_time, models.StreamSession.id)

        try:
            with self._session_factory() as session:
                rows = session.scalars(stmt).all()

                channel_ids = sorted({row.channel_id for row in rows})
                channels: dict[int, Channel] = {}
                if channel_ids:
                    channel_rows = session.scalars(
                        select(models.Channel).where(models.Channel.id.in_(channel_ids))
                    ).all()
                    channels = {c.id: _to_channel(c) for c in channel_rows}

            results = []
            for row in rows:
                channel = channels.get(row.channel_id)
                if channel is None:
                    raise LookupError(
                        f"Channel {row.channel_id} not found for session {row.id}"
                    )
                results.append(EventResult(stream_session=_to_session(row), channel=channel))
        except Exception as e:
            raise SessionQueryError("get_events_for_day", params, e) from e

        logger.debug(f"Found {len(results)} events for {local_date} in {time_zone_id}")
        return results
