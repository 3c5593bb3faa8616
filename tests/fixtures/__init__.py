"""Shared test fixtures and builders for devstreams tests."""

from .builders import (
    create_test_channel,
    create_test_session,
    create_test_tag,
)

__all__ = [
    "create_test_channel",
    "create_test_session",
    "create_test_tag",
]
