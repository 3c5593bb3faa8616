# src/devstreams/db/models.py
"""SQLAlchemy models for the DevStreams schema.

The schema is owned by the scheduling side; these mappings only describe the
tables this package reads. Column names follow the existing PascalCase schema.

IMPORTANT: All datetime fields store UTC.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class Channel(Base):
    __tablename__ = "Channels"

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    name = Column("Name", String, nullable=False)
    uri = Column("Uri", String)
    country_code = Column("CountryCode", String)
    time_zone_id = Column("TimeZoneId", String)

    sessions = relationship("StreamSession", back_populates="channel")
    tags = relationship("ChannelTag", back_populates="channel")


class Tag(Base):
    __tablename__ = "Tags"

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    name = Column("Name", String, nullable=False, unique=True)
    description = Column("Description", Text)


class ChannelTag(Base):
    __tablename__ = "ChannelTags"

    channel_id = Column(
        "ChannelId", Integer, ForeignKey("Channels.Id"), primary_key=True
    )
    tag_id = Column("TagId", Integer, ForeignKey("Tags.Id"), primary_key=True)

    channel = relationship("Channel", back_populates="tags")

    __table_args__ = (Index("ix_channel_tags_tag", "TagId"),)


class ScheduledStream(Base):
    """Weekly recurring template that sessions are generated from."""

    __tablename__ = "ScheduledStreams"

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    channel_id = Column("ChannelId", Integer, ForeignKey("Channels.Id"), nullable=False)
    day_of_week = Column("DayOfWeek", Integer, nullable=False)  # 0=Sunday
    local_start_time = Column("LocalStartTime", Time, nullable=False)
    local_end_time = Column("LocalEndTime", Time, nullable=False)
    time_zone_id = Column("TimeZoneId", String, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "ChannelId", "DayOfWeek", "LocalStartTime", name="uq_scheduled_stream_slot"
        ),
    )


class StreamSession(Base):
    __tablename__ = "StreamSessions"

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    channel_id = Column("ChannelId", Integer, ForeignKey("Channels.Id"), nullable=False)
    utc_start_time = Column("UtcStartTime", DateTime(timezone=True), nullable=False)
    utc_end_time = Column("UtcEndTime", DateTime(timezone=True), nullable=False)
    scheduled_stream_id = Column(
        "ScheduledStreamId", Integer, ForeignKey("ScheduledStreams.Id")
    )
    tzdb_version_id = Column("TzdbVersionId", String)  # e.g. "2024a"

    channel = relationship("Channel", back_populates="sessions")

    __table_args__ = (
        Index("ix_stream_sessions_channel_start", "ChannelId", "UtcStartTime"),
        Index("ix_stream_sessions_window", "UtcStartTime", "UtcEndTime"),
    )
