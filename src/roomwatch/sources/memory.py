"""In-process event source."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from typing import Any

from roomwatch.models.enums import CatalogEvent
from roomwatch.sources.base import RoomEventSource, SourceHandler

logger = logging.getLogger("roomwatch.sources")


class LocalEventSource(RoomEventSource):
    """Source that the normalization layer (or a test) pushes events into.

    ``emit`` runs the subscribed handlers one after another and waits for
    each, so awaiting ``emit`` per event gives strictly serialized
    processing. Handler failures are logged and never reach the caller.
    """

    def __init__(self, event_names: Iterable[str] | None = None) -> None:
        """Initialise the source.

        Args:
            event_names: Catalog names to announce. Defaults to every
                :class:`CatalogEvent`.
        """
        names = event_names if event_names is not None else (e.value for e in CatalogEvent)
        self._event_names = tuple(dict.fromkeys(names))
        self._handlers: dict[str, list[SourceHandler]] = {}

    @property
    def event_names(self) -> tuple[str, ...]:
        return self._event_names

    def on(self, name: str, handler: SourceHandler) -> None:
        self._handlers.setdefault(name, []).append(handler)

    def off(self, name: str, handler: SourceHandler) -> bool:
        handlers = self._handlers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def handler_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))

    async def emit(self, name: str, payload: Any = None) -> None:
        """Deliver one event to every handler subscribed to *name*."""
        for handler in list(self._handlers.get(name, [])):
            try:
                result = handler(payload)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Source handler failed", extra={"event_name": name})
