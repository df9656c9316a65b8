"""Built-in hooks that keep the room state in sync with catalog events."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from roomwatch.core.hooks import EventHookFn, HookTable
from roomwatch.core.panel_loader import PanelLoader
from roomwatch.core.state import RoomState
from roomwatch.models.enums import CatalogEvent, ConnectionState, ModelStatus

logger = logging.getLogger("roomwatch.hooks")

Payload = MutableMapping[str, Any]


class RoomHooks:
    """Hook implementations bound to one room state.

    Every hook takes the event payload, may update the state and returns
    the payload to re-emit. Panel refresh hooks replace the payload with
    ``{"panel": ..., "goal": ...}``.
    """

    def __init__(self, state: RoomState, panel: PanelLoader) -> None:
        self._state = state
        self._panel = panel

    def table(self) -> HookTable:
        """Build the dispatch table for every hooked catalog event."""
        hooks: dict[CatalogEvent, EventHookFn] = {
            CatalogEvent.AUTH: self.on_auth,
            CatalogEvent.JOINED_ROOM: self.on_joined_room,
            CatalogEvent.LEAVE_ROOM: self.on_leave_room,
            CatalogEvent.PERSONALLY_KICKED: self.on_personally_kicked,
            CatalogEvent.AWAY_MODE_CANCEL: self.on_away_mode_cancel,
            CatalogEvent.APP_TAB_REFRESH: self.on_app_tab_refresh,
            CatalogEvent.CLEAR_APP: self.on_panel_refresh,
            CatalogEvent.REFRESH_PANEL: self.on_panel_refresh,
            CatalogEvent.SETTINGS_UPDATE: self.on_settings_update,
            CatalogEvent.TITLE_CHANGE: self.on_title_change,
            CatalogEvent.PRIVATE_SHOW_APPROVED: self.on_private_show_approved,
            CatalogEvent.PRIVATE_SHOW_CANCEL: self.on_show_cancel,
            CatalogEvent.GROUP_SHOW_APPROVE: self.on_group_show_approve,
            CatalogEvent.GROUP_SHOW_CANCEL: self.on_show_cancel,
            CatalogEvent.GROUP_SHOW_REQUEST: self.on_group_show_request,
            CatalogEvent.HIDDEN_SHOW_STATUS_CHANGE: self.on_hidden_show_status_change,
            CatalogEvent.ROOM_COUNT: self.on_room_count,
            CatalogEvent.ROOM_ENTRY: self.stamp_host,
            CatalogEvent.ROOM_LEAVE: self.stamp_host,
            CatalogEvent.ROOM_MESSAGE: self.stamp_host,
            CatalogEvent.TIP: self.stamp_host,
        }
        return HookTable(hooks)

    # -- Connection --

    async def on_auth(self, event: Payload) -> Payload:
        if event.get("success"):
            await self._state.set_connection_state(ConnectionState.CONNECTED)
        else:
            await self._state.set_connection_state(ConnectionState.FAIL)
        return event

    async def on_joined_room(self, event: Payload) -> Payload:
        await self._state.set_connection_state(ConnectionState.JOINED)
        return event

    async def on_leave_room(self, event: Payload) -> Payload:
        await self._state.set_connection_state(ConnectionState.LEAVE)
        return event

    async def on_personally_kicked(self, event: Payload) -> Payload:
        await self._state.set_connection_state(ConnectionState.KICKED)
        return event

    # -- Panel --

    async def on_app_tab_refresh(self, event: Any) -> dict[str, Any]:
        panel, goal = await self._panel.refresh(navigate=True)
        return {"panel": panel, "goal": goal}

    async def on_panel_refresh(self, event: Any) -> dict[str, Any]:
        """Shared by ``clear_app`` and ``refresh_panel``."""
        panel, goal = await self._panel.refresh()
        return {"panel": panel, "goal": goal}

    # -- Room settings --

    async def on_settings_update(self, event: Payload) -> Payload:
        self._state.apply_settings_update(event)
        return event

    async def on_title_change(self, event: Payload) -> Payload:
        if not event.get("title"):
            event["title"] = self._state.subject
        else:
            self._state.subject = event["title"]
        return event

    async def on_room_count(self, event: Payload) -> Payload:
        self._state.view_count = event.get("count") or 0
        return event

    # -- Shows --

    async def on_away_mode_cancel(self, event: Payload) -> Payload:
        await self._state.set_model_status(ModelStatus.PUBLIC)
        return event

    async def on_private_show_approved(self, event: Payload) -> Payload:
        await self._state.set_model_status(ModelStatus.PRIVATE)
        self._state.private_price = event.get("tokensPerMinute") or 0
        return event

    async def on_group_show_approve(self, event: Payload) -> Payload:
        await self._state.set_model_status(ModelStatus.GROUP)
        self._state.group_price = event.get("tokensPerMinute") or 0
        return event

    async def on_show_cancel(self, event: Payload) -> Payload:
        """Shared by ``private_show_cancel`` and ``group_show_cancel``."""
        await self._state.set_model_status(ModelStatus.AWAY)
        return event

    async def on_group_show_request(self, event: Payload) -> Payload:
        self._state.group_num_users_required = event.get("usersRequired") or 0
        self._state.group_num_users_waiting = event.get("usersWaiting") or 0
        self._state.group_price = event.get("tokensPerMinute") or 0
        return event

    async def on_hidden_show_status_change(self, event: Payload) -> Payload:
        status = ModelStatus.HIDDEN if event.get("isStarting") else ModelStatus.PUBLIC
        await self._state.set_model_status(status)
        return event

    # -- Users --

    async def stamp_host(self, event: Payload) -> Payload:
        """Mark whether the event's user is the broadcaster."""
        user = event.get("user")
        if not isinstance(user, MutableMapping):
            logger.debug("event without user, nothing to stamp")
            return event
        user["isHost"] = self._state.is_host(user.get("username"))
        return event
