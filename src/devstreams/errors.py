"""Custom exceptions for devstreams with structured error information."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any


class DevStreamsError(Exception):
    """Base exception for all devstreams errors.

    Carries a ``details`` dict so callers can log the failure with context
    without parsing the message.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class UnknownTimeZoneError(DevStreamsError):
    """Raised when a time zone identifier is not in the IANA database."""

    def __init__(self, time_zone_id: str | None):
        if time_zone_id is None:
            message = "No time zone given and no default time zone configured"
        else:
            message = f"Unknown time zone: {time_zone_id!r}"
        details = {
            "time_zone_id": time_zone_id,
            "suggested_action": (
                "Use an IANA time zone identifier (e.g., 'America/New_York')"
            ),
        }
        super().__init__(message, details)


class DateOutOfRangeError(DevStreamsError):
    """Raised when a local day cannot be represented as UTC datetimes."""

    def __init__(self, local_date: date, time_zone_id: str):
        message = (
            f"Day {local_date.isoformat()} in {time_zone_id} is outside the "
            "supported datetime range"
        )
        details = {
            "local_date": local_date.isoformat(),
            "time_zone_id": time_zone_id,
            "suggested_action": "Use a date between years 1 and 9999",
        }
        super().__init__(message, details)


class SessionQueryError(DevStreamsError):
    """Raised when a session query fails while executing or mapping rows."""

    def __init__(
        self,
        operation: str,
        params: dict[str, Any],
        original_error: Exception,
    ):
        message = f"Session query '{operation}' failed ({original_error})"
        details = {
            "operation": operation,
            "params": params,
            "original_error": str(original_error),
            "error_type": type(original_error).__name__,
        }
        super().__init__(message, details)
        self.operation = operation
        self.params = params


class AmbiguousNextSessionError(DevStreamsError):
    """Raised when a channel has several sessions at its earliest future start."""

    def __init__(self, channel_id: int, session_ids: Sequence[int]):
        ids = sorted(session_ids)
        message = (
            f"Channel {channel_id} has {len(ids)} sessions sharing its next "
            f"start time: {ids}"
        )
        details = {
            "channel_id": channel_id,
            "session_ids": ids,
            "suggested_action": (
                "Remove the duplicate sessions or query without strict mode"
            ),
        }
        super().__init__(message, details)
        self.channel_id = channel_id
        self.session_ids = ids
