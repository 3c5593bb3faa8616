"""Query services for devstreams."""

from .session_lookup import SessionQueryService

__all__ = ["SessionQueryService"]
