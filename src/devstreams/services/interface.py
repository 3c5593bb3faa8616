"""Abstract interface for stream session lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date, datetime

from ..types import EventResult, StreamSession


class StreamSessionService(ABC):
    """Contract for read-side stream session lookups.

    Implementations answer three questions about externally scheduled
    sessions: what is coming up per channel, what is next per channel, and
    what overlaps a local calendar day. Results are detached records; absent
    channels in a returned mapping mean "no upcoming sessions".
    """

    @abstractmethod
    def get_future_sessions_by_channel(
        self, channel_ids: Iterable[int]
    ) -> dict[int, list[StreamSession]]:
        """Get all future sessions for the given channels, grouped by channel.

        Args:
            channel_ids: Channel identifiers (duplicates are ignored)

        Returns:
            Mapping of channel id to its future sessions, earliest first
        """
        pass

    @abstractmethod
    def get_next_session_by_channel(
        self, channel_ids: Iterable[int], strict: bool = False
    ) -> dict[int, StreamSession]:
        """Get the single next session for each of the given channels.

        Args:
            channel_ids: Channel identifiers (duplicates are ignored)
            strict: Raise instead of tie-breaking when a channel has several
                sessions at its earliest start time

        Returns:
            Mapping of channel id to its next session

        Raises:
            AmbiguousNextSessionError: In strict mode, on a start-time tie
        """
        pass

    @abstractmethod
    def get_events_for_day(
        self,
        time_zone_id: str | None,
        local_date_time: date | datetime,
        tag_ids: Iterable[int] = (),
    ) -> list[EventResult]:
        """Get sessions overlapping a local calendar day, with their channels.

        Args:
            time_zone_id: IANA time zone the day is expressed in; None uses
                the implementation's default zone
            local_date_time: Wall-clock date (time of day is ignored)
            tag_ids: Tags every returned channel must carry; empty for no filter

        Returns:
            Session/channel pairs ordered by start time

        Raises:
            UnknownTimeZoneError: If the zone is unknown or none is available
            DateOutOfRangeError: If the day cannot be represented in UTC
            SessionQueryError: If the query or row mapping fails
        """
        pass
