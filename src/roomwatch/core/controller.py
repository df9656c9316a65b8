"""RoomController - tracks room state and relays room events."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel

from roomwatch.core.app_info import parse_app_info
from roomwatch.core.errors import (
    PanelEndpointMissingError,
    RoomWatchError,
    TransportNotConfiguredError,
)
from roomwatch.core.hooks import HookTable
from roomwatch.core.panel_loader import PanelLoader
from roomwatch.core.room_hooks import RoomHooks
from roomwatch.core.state import RoomState
from roomwatch.models.enums import ConnectionState, LifecycleSignal, ModelStatus, SyntheticEvent
from roomwatch.models.init import InitPayload
from roomwatch.models.room import Goal, PanelRow, RoomSettings
from roomwatch.panel.goals import GoalExtractor
from roomwatch.sources.base import RoomEventSource
from roomwatch.transport.base import RoomTransport, TransportError

__all__ = [
    "ControllerConfig",
    "EventListener",
    "PanelEndpointMissingError",
    "RoomController",
    "RoomWatchError",
    "TransportNotConfiguredError",
]

logger = logging.getLogger("roomwatch.controller")

# Listener invoked with the emitted payload. May be sync or async.
EventListener = Callable[[Any], Awaitable[None] | None]


class ControllerConfig(BaseModel):
    """Behaviour switches for :class:`RoomController`."""

    multiple_goals: bool = False
    """The room runs sequential goals; completion is a ``goal_count`` increase."""

    strict_app_info: bool = False
    """Raise on app-info URLs without a ``slot`` parameter instead of keeping them."""


class RoomController:
    """Tracks the state of one room and re-emits its events.

    The controller subscribes to every catalog event of *source* and to the
    lifecycle signals. Each catalog event runs through the hook table,
    which updates the room state, and is then re-emitted (possibly
    transformed) to listeners. State changes additionally emit
    ``state_change``, ``model_status_change``, ``goal_progress`` and
    ``goal_reached``; the init signal emits ``init`` with the settings
    projection.

    Example::

        source = LocalEventSource()
        controller = RoomController(source, transport)

        @controller.on("state_change")
        async def on_state(event):
            print("state is now", event["state"])

        await source.emit("init", init_payload)
    """

    def __init__(
        self,
        source: RoomEventSource,
        transport: RoomTransport | None = None,
        *,
        config: ControllerConfig | None = None,
        goal_extractor: GoalExtractor | None = None,
    ) -> None:
        """Initialise the controller and subscribe to *source*.

        Args:
            source: Upstream source of normalized room events.
            transport: Capability used to re-fetch the panel. Without it,
                panel refreshes fail and the refresh events pass through
                unmodified.
            config: Behaviour switches. Defaults to ``ControllerConfig()``.
            goal_extractor: Derives the goal from panel rows. Defaults to
                :func:`roomwatch.panel.goals.extract_goal`.
        """
        self._source = source
        self._transport = transport
        self._config = config or ControllerConfig()
        self._listeners: list[tuple[str, EventListener]] = []

        self._state = RoomState(
            self._emit,
            multiple_goals=self._config.multiple_goals,
            strict_app_info=self._config.strict_app_info,
        )
        self._panel = PanelLoader(self._state, transport, goal_extractor)
        self._hooks = RoomHooks(self._state, self._panel).table()

        self._subscriptions: list[tuple[str, Callable[[Any], Awaitable[None]]]] = [
            (LifecycleSignal.INIT, self._on_init),
            (LifecycleSignal.SOCKET_HOOKED, self._on_init),
            (LifecycleSignal.SOCKET_OPEN, self._on_socket_open),
            (LifecycleSignal.SOCKET_ERROR, self._on_socket_error),
            (LifecycleSignal.SOCKET_CLOSE, self._on_socket_close),
        ]
        for name in source.event_names:
            self._subscriptions.append((name, self._relay_for(name)))
        for name, handler in self._subscriptions:
            source.on(name, handler)

    # -- Read access --

    @property
    def state(self) -> RoomState:
        return self._state

    @property
    def hooks(self) -> HookTable:
        return self._hooks

    @property
    def config(self) -> ControllerConfig:
        return self._config

    @property
    def connection_state(self) -> ConnectionState | None:
        return self._state.connection_state

    @property
    def model_status(self) -> ModelStatus | None:
        return self._state.model_status

    @property
    def goal(self) -> Goal | None:
        return self._state.goal

    @property
    def panel(self) -> list[PanelRow]:
        return self._state.panel

    @property
    def settings(self) -> RoomSettings:
        return self._state.settings

    @property
    def event_names(self) -> list[str]:
        """Every event name listeners can receive."""
        names = list(self._source.event_names)
        names.extend(str(e) for e in SyntheticEvent if str(e) not in names)
        return names

    # -- Listeners --

    def on(self, name: str) -> Callable[[EventListener], EventListener]:
        """Decorator to register a listener for events named *name*."""

        def decorator(fn: EventListener) -> EventListener:
            self.add_listener(name, fn)
            return fn

        return decorator

    def add_listener(self, name: str, fn: EventListener) -> None:
        self._listeners.append((str(name), fn))

    def remove_listener(self, name: str, fn: EventListener) -> bool:
        entry = (str(name), fn)
        if entry in self._listeners:
            self._listeners.remove(entry)
            return True
        return False

    def detach(self) -> None:
        """Unsubscribe from the source. Listeners stay registered."""
        for name, handler in self._subscriptions:
            self._source.off(name, handler)
        self._subscriptions.clear()

    async def _emit(self, name: str, payload: Any) -> None:
        """Deliver *payload* to the listeners registered for *name*."""
        for filter_name, listener in list(self._listeners):
            if filter_name != name:
                continue
            try:
                result = listener(payload)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Event listener failed", extra={"event_name": str(name)})

    # -- Catalog events --

    def _relay_for(self, name: str) -> Callable[[Any], Awaitable[None]]:
        async def relay(payload: Any) -> None:
            await self.relay(name, payload)

        return relay

    async def relay(self, name: str, payload: Any) -> None:
        """Run the hook for *name* (if any) and re-emit the result."""
        outcome = await self._hooks.run(name, payload)
        await self._emit(name, outcome.payload)

    # -- Lifecycle signals --

    async def _on_init(self, payload: Any) -> None:
        init = InitPayload.model_validate(payload or {})
        state = self._state
        chat = init.chat_settings

        # Strict app-info errors abort before any state change
        app_info = None
        if chat is not None:
            app_info = parse_app_info(chat.app_info_json, strict=self._config.strict_app_info)

        if init.has_websocket:
            await state.set_connection_state(ConnectionState.INIT)
        else:
            await state.set_connection_state(ConnectionState.OFFLINE)

        if chat is not None and app_info is not None:
            state.welcome_message = chat.welcome_message or ""
            state.spy_price = chat.spy_price or 0
            state.private_price = chat.private_price or 0
            state.group_num_users_required = chat.num_users_required_for_group_show or 0
            state.group_num_users_waiting = chat.num_users_waiting_for_group_show or 0
            state.group_price = chat.group_price or 0
            state.subject = chat.current_subject or ""
            state.gender = chat.broadcaster_gender or ""
            state.load_app_info(app_info)
            state.api.get_panel_url = chat.get_panel_url

            try:
                await self._panel.refresh(cache_bust=True)
            except (RoomWatchError, TransportError):
                logger.exception("Initial panel fetch failed, continuing without panel")
            except Exception:
                logger.exception("Initial panel processing failed, continuing without goal")

        room = init.settings
        if room is not None:
            state.groups_enabled = bool(room.groups_enabled)
            state.privates_enabled = bool(room.privates_enabled)
            state.room = room.room or ""

            if room.connecting:
                await state.set_connection_state(ConnectionState.CONNECTING)
            if room.connected:
                await state.set_connection_state(ConnectionState.CONNECTED)

        initializer = init.initializer_settings
        if initializer is not None:
            status = ModelStatus.parse(initializer.model_status)
            if status is not None:
                await state.set_model_status(status)
            elif initializer.model_status:
                logger.warning("Unknown model status %r, keeping current", initializer.model_status)

            if initializer.joined:
                await state.set_connection_state(ConnectionState.JOINED)

        settings = state.settings
        logger.debug("init settings: %s", settings)
        await self._emit(SyntheticEvent.INIT, settings)

    async def _on_socket_open(self, payload: Any = None) -> None:
        await self._state.set_connection_state(ConnectionState.CONNECTING)

    async def _on_socket_error(self, payload: Any = None) -> None:
        await self._state.set_connection_state(ConnectionState.ERROR)

    async def _on_socket_close(self, payload: Any = None) -> None:
        await self._state.set_connection_state(ConnectionState.DISCONNECTED)
