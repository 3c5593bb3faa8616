# src/devstreams/db/session.py
"""Database engine and session factory helpers."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from .models import Base


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given SQLAlchemy database URL.

    Args:
        database_url: SQLAlchemy URL (e.g. ``sqlite:///path/to/devstreams.db``)
        echo: Log emitted SQL through the ``sqlalchemy.engine`` logger

    Returns:
        SQLAlchemy engine
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        # SQLite-specific: engine is shared across caller threads
        connect_args["check_same_thread"] = False

    return create_engine(database_url, echo=echo, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``.

    Sessions never expire loaded rows, so records can be mapped after close.
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> Engine:
    """Create the schema tables if missing (tests and local development).

    Returns:
        The same engine, for chaining
    """
    Base.metadata.create_all(engine)
    return engine
