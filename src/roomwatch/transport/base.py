"""Transport abstraction used to re-fetch room data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class TransportError(Exception):
    """A transport request failed.

    Attributes:
        url: The URL that was requested.
        status_code: HTTP status code, if a response was received.
    """

    def __init__(self, message: str, *, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RoomTransport(ABC):
    """Capability the controller needs from the page/socket transport.

    Only the panel-refresh hooks use it: ``fetch`` retrieves panel HTML and
    ``profile`` re-navigates to the room so newly started apps show up.
    """

    @abstractmethod
    async def fetch(self, url: str, params: Mapping[str, Any] | None = None) -> str:
        """GET *url* with query *params* and return the response body."""
        ...

    @abstractmethod
    async def profile(self, room: str) -> None:
        """Load the room page for *room*."""
        ...

    async def close(self) -> None:  # noqa: B027
        """Release transport resources. No-op by default."""
