"""Mutable room snapshot with guarded, change-emitting setters."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from roomwatch.core.app_info import parse_app_info
from roomwatch.core.goals import detect_goal_events
from roomwatch.models.enums import ConnectionState, ModelStatus, SyntheticEvent
from roomwatch.models.room import ApiEndpoints, AppInfo, Goal, Number, PanelRow, RoomSettings

logger = logging.getLogger("roomwatch.state")

# Emit callback: (event_name, payload) -> None
StateEmitFn = Callable[[str, Any], Awaitable[None]]


async def _discard(name: str, payload: Any) -> None:
    return None


class RoomState:
    """Derived state of one room, owned by a single controller.

    Plain attributes hold pricing, counts, toggles and text. The connection
    state, model status and goal are only changed through the async setters,
    which compare against the current value and emit the matching synthetic
    event on a genuine change.
    """

    def __init__(
        self,
        emit: StateEmitFn | None = None,
        *,
        multiple_goals: bool = False,
        strict_app_info: bool = False,
    ) -> None:
        self._emit = emit or _discard
        self.multiple_goals = multiple_goals
        self.strict_app_info = strict_app_info

        self._connection_state: ConnectionState | None = None
        self._model_status: ModelStatus | None = None
        self._app_info: list[AppInfo] = []
        self._goal: Goal | None = None
        self.api = ApiEndpoints()

        # General
        self.room: str | None = None
        self.gender: str | None = None
        self.welcome_message: str | None = None
        self.subject: str | None = None
        self.spy_price: Number = 0
        self.view_count: Number = 0

        # Panel
        self.panel: list[PanelRow] = []

        # Group shows
        self.groups_enabled = False
        self.group_price: Number = 0
        self.group_num_users_required: Number = 0
        self.group_num_users_waiting: Number = 0

        # Private shows
        self.privates_enabled = False
        self.private_price: Number = 0

    # -- Guarded fields --

    @property
    def connection_state(self) -> ConnectionState | None:
        return self._connection_state

    async def set_connection_state(self, state: ConnectionState) -> bool:
        """Set the connection state, emitting ``state_change`` if it changed.

        Returns:
            True if the value changed.
        """
        if self._connection_state == state:
            return False
        logger.debug("state changed to %s", state)
        self._connection_state = state
        await self._emit(SyntheticEvent.STATE_CHANGE, {"state": state})
        return True

    @property
    def model_status(self) -> ModelStatus | None:
        return self._model_status

    async def set_model_status(self, status: ModelStatus) -> bool:
        """Set the model status, emitting ``model_status_change`` if it changed.

        Returns:
            True if the value changed.
        """
        if self._model_status == status:
            return False
        logger.debug("model status changed to %s", status)
        self._model_status = status
        await self._emit(SyntheticEvent.MODEL_STATUS_CHANGE, {"status": status})
        return True

    @property
    def goal(self) -> Goal | None:
        return self._goal

    async def set_goal(self, goal: Goal | None) -> None:
        """Replace the goal, emitting progress/reached events for the delta first."""
        old = self._goal
        for event, new in detect_goal_events(old, goal, multiple_goals=self.multiple_goals):
            logger.debug("%s: %s", event, new)
            await self._emit(event, {"goal": new})
        self._goal = goal

    @property
    def app_info(self) -> list[AppInfo]:
        return self._app_info

    def set_app_info(self, raw: str | None) -> None:
        """Replace the app list from its raw ``name|url,...`` form."""
        self.load_app_info(parse_app_info(raw, strict=self.strict_app_info))

    def load_app_info(self, entries: Iterable[AppInfo]) -> None:
        self._app_info = list(entries)

    @property
    def panel_app(self) -> str | None:
        """Name of the panel app (the first app-info entry), if any."""
        if not self._app_info:
            return None
        return self._app_info[0].name

    # -- Bulk updates --

    def apply_settings_update(self, update: Mapping[str, Any]) -> None:
        """Overwrite pricing and toggles from a ``settings_update`` payload."""
        self.spy_price = update.get("spyPrice") or 0
        self.private_price = update.get("privatePrice") or 0
        self.privates_enabled = bool(update.get("privatesEnabled"))
        self.group_num_users_required = update.get("minimumUsersForGroupShow") or 0
        self.group_price = update.get("groupPrice") or 0
        self.groups_enabled = bool(update.get("allowGroups"))

    def is_host(self, username: str | None) -> bool:
        """Whether *username* is the broadcaster of this room."""
        return self.room is not None and username == self.room

    @property
    def settings(self) -> RoomSettings:
        """Flat, immutable copy of every public field."""
        return RoomSettings(
            state=self._connection_state,
            room=self.room,
            welcome_message=self.welcome_message,
            subject=self.subject,
            gender=self.gender,
            view_count=self.view_count,
            spy_price=self.spy_price,
            groups_enabled=self.groups_enabled,
            group_price=self.group_price,
            group_num_users_required=self.group_num_users_required,
            group_num_users_waiting=self.group_num_users_waiting,
            privates_enabled=self.privates_enabled,
            private_price=self.private_price,
            model_status=self._model_status,
            panel=tuple(self.panel),
            app_info=tuple(self._app_info),
            goal=self._goal,
        )
