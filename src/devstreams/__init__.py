"""devstreams: read-side lookups of scheduled channel stream sessions."""

from .services.session_lookup import SessionQueryService
from .types import Channel, EventResult, StreamSession
from .version import get_package_version

__version__ = get_package_version()
__author__ = "devstreams contributors"
__description__ = "Read-side lookups of scheduled channel stream sessions"

__all__ = ["SessionQueryService", "StreamSession", "Channel", "EventResult"]
