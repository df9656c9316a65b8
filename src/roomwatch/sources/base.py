"""Base abstraction for upstream room event sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

# Handler invoked with the event payload. May be sync or async.
SourceHandler = Callable[[Any], Awaitable[None] | None]


class RoomEventSource(ABC):
    """Delivers normalized room events by name.

    The normalization layer turns raw page/socket traffic into a fixed
    catalog of named events plus the lifecycle signals (``init``,
    ``socket_hooked``, ``socket_open``, ``socket_error``,
    ``socket_close``). Consumers subscribe per name.

    Implementations are expected to deliver one event at a time and to
    await each handler before delivering the next event.
    """

    @property
    @abstractmethod
    def event_names(self) -> tuple[str, ...]:
        """Catalog event names this source can deliver (lifecycle excluded)."""
        ...

    @abstractmethod
    def on(self, name: str, handler: SourceHandler) -> None:
        """Subscribe *handler* to events named *name*."""
        ...

    @abstractmethod
    def off(self, name: str, handler: SourceHandler) -> bool:
        """Unsubscribe *handler*. Returns True if it was subscribed."""
        ...
