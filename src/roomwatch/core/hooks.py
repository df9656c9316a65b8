"""Per-event hook dispatch table."""

from __future__ import annotations

import copy
import logging
from collections.abc import Awaitable, Callable, Iterator, MutableMapping
from dataclasses import dataclass
from typing import Any

from roomwatch.models.enums import CatalogEvent

logger = logging.getLogger("roomwatch.hooks")

EventHookFn = Callable[[Any], Awaitable[Any]]


@dataclass
class HookOutcome:
    """Result of running the hook (if any) for one event.

    Attributes:
        payload: The payload to re-emit. On failure this is the original,
            unmodified payload.
        hooked: Whether a hook was registered for the event.
        error: The exception raised by the hook, if it failed.
    """

    payload: Any
    hooked: bool = False
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class HookTable:
    """Maps catalog events to async transformation hooks.

    Events without a hook pass through verbatim. A hook receives the payload
    itself and may enrich it in place. When a hook fails, a mapping payload
    is rolled back to its pre-hook contents and forwarded unchanged.
    """

    def __init__(self, hooks: dict[CatalogEvent, EventHookFn] | None = None) -> None:
        self._hooks: dict[CatalogEvent, EventHookFn] = dict(hooks or {})

    def register(self, event: CatalogEvent | str, fn: EventHookFn) -> None:
        """Register (or replace) the hook for *event*."""
        self._hooks[CatalogEvent(event)] = fn

    def unregister(self, event: CatalogEvent | str) -> bool:
        """Remove the hook for *event*. Returns True if one was registered."""
        try:
            key = CatalogEvent(event)
        except ValueError:
            return False
        return self._hooks.pop(key, None) is not None

    def get(self, name: str) -> EventHookFn | None:
        try:
            return self._hooks.get(CatalogEvent(name))
        except ValueError:
            return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[CatalogEvent]:
        return iter(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    @property
    def names(self) -> list[str]:
        return [str(e) for e in self._hooks]

    async def run(self, name: str, payload: Any) -> HookOutcome:
        """Run the hook for *name* on *payload*. Errors are logged, never raised."""
        fn = self.get(name)
        if fn is None:
            return HookOutcome(payload=payload)

        logger.debug("hooked event %s", name)
        snapshot = _snapshot(payload)
        try:
            result = await fn(payload)
        except Exception as exc:
            logger.exception("Hook failed for %s", name, extra={"event_name": name})
            if snapshot is not None:
                _restore(payload, snapshot)
            return HookOutcome(payload=payload, hooked=True, error=exc)

        logger.debug("hook result for %s: %r", name, result)
        return HookOutcome(payload=result, hooked=True)


def _snapshot(payload: Any) -> dict[Any, Any] | None:
    """Deep copy of a mapping payload's items, or None if it cannot be rolled back."""
    if not isinstance(payload, MutableMapping):
        return None
    try:
        return copy.deepcopy(dict(payload))
    except (TypeError, copy.Error):
        logger.debug("payload not copyable, a failing hook will not be rolled back")
        return None


def _restore(payload: MutableMapping[Any, Any], snapshot: dict[Any, Any]) -> None:
    payload.clear()
    payload.update(snapshot)
