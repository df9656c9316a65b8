"""Mock transport for testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from roomwatch.transport.base import RoomTransport, TransportError


class MockRoomTransport(RoomTransport):
    """Records calls and serves canned panel HTML.

    ``queue`` bodies are served first, one per fetch; afterwards every fetch
    returns ``html``. Setting ``fail`` makes every call raise.
    """

    def __init__(self, html: str = "", *, fail: bool = False) -> None:
        self.html = html
        self.fail = fail
        self.queue: list[str] = []
        self.fetches: list[dict[str, Any]] = []
        self.profiles: list[str] = []
        self.calls: list[str] = []

    async def fetch(self, url: str, params: Mapping[str, Any] | None = None) -> str:
        self.fetches.append({"url": url, "params": dict(params) if params else None})
        self.calls.append("fetch")
        if self.fail:
            raise TransportError("mock fetch failure", url=url)
        if self.queue:
            return self.queue.pop(0)
        return self.html

    async def profile(self, room: str) -> None:
        self.profiles.append(room)
        self.calls.append("profile")
        if self.fail:
            raise TransportError("mock profile failure", url=room)
