"""Database module for devstreams."""

from .models import Base, Channel, ChannelTag, ScheduledStream, StreamSession, Tag
from .session import create_db_engine, create_session_factory, init_db

__all__ = [
    "Base",
    "Channel",
    "ChannelTag",
    "ScheduledStream",
    "StreamSession",
    "Tag",
    "create_db_engine",
    "create_session_factory",
    "init_db",
]
