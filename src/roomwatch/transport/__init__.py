"""Transports the controller uses to re-fetch room data."""

from typing import Any

from roomwatch.transport.base import RoomTransport, TransportError
from roomwatch.transport.config import HttpTransportConfig
from roomwatch.transport.mock import MockRoomTransport

__all__ = [
    "HttpRoomTransport",
    "HttpTransportConfig",
    "MockRoomTransport",
    "RoomTransport",
    "TransportError",
]


def __getattr__(name: str) -> Any:
    """Lazy import for the httpx-backed transport."""
    if name == "HttpRoomTransport":
        from roomwatch.transport.http import HttpRoomTransport

        return HttpRoomTransport
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
