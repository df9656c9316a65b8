"""Upstream room event sources."""

from roomwatch.sources.base import RoomEventSource, SourceHandler
from roomwatch.sources.memory import LocalEventSource

__all__ = [
    "LocalEventSource",
    "RoomEventSource",
    "SourceHandler",
]
