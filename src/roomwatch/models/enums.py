"""All string enums for roomwatch."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class ConnectionState(StrEnum):
    """Lifecycle of the controller's connection to the room."""

    INIT = "INIT"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    JOINED = "JOINED"
    LEAVE = "LEAVE"
    KICKED = "KICKED"
    DISCONNECTED = "DISCONNECTED"
    ERROR = "ERROR"
    FAIL = "FAIL"
    OFFLINE = "OFFLINE"


@unique
class ModelStatus(StrEnum):
    """What the broadcaster is currently doing."""

    PUBLIC = "PUBLIC"
    AWAY = "AWAY"
    PRIVATE = "PRIVATE"
    GROUP = "GROUP"
    HIDDEN = "HIDDEN"

    @classmethod
    def parse(cls, value: object) -> ModelStatus | None:
        """Upper-case *value* and map it to a member, or ``None`` if unknown."""
        if not value:
            return None
        try:
            return cls(str(value).upper())
        except ValueError:
            return None


@unique
class CatalogEvent(StrEnum):
    """Catalog events the controller attaches hooks to."""

    AUTH = "auth"
    JOINED_ROOM = "joined_room"
    LEAVE_ROOM = "leave_room"
    PERSONALLY_KICKED = "personally_kicked"
    AWAY_MODE_CANCEL = "away_mode_cancel"
    APP_TAB_REFRESH = "app_tab_refresh"
    CLEAR_APP = "clear_app"
    REFRESH_PANEL = "refresh_panel"
    SETTINGS_UPDATE = "settings_update"
    TITLE_CHANGE = "title_change"
    PRIVATE_SHOW_APPROVED = "private_show_approved"
    PRIVATE_SHOW_CANCEL = "private_show_cancel"
    GROUP_SHOW_APPROVE = "group_show_approve"
    GROUP_SHOW_CANCEL = "group_show_cancel"
    GROUP_SHOW_REQUEST = "group_show_request"
    HIDDEN_SHOW_STATUS_CHANGE = "hidden_show_status_change"
    ROOM_COUNT = "room_count"
    ROOM_ENTRY = "room_entry"
    ROOM_LEAVE = "room_leave"
    ROOM_MESSAGE = "room_message"
    TIP = "tip"


@unique
class LifecycleSignal(StrEnum):
    """Connection lifecycle signals delivered alongside catalog events."""

    INIT = "init"
    SOCKET_HOOKED = "socket_hooked"
    SOCKET_OPEN = "socket_open"
    SOCKET_ERROR = "socket_error"
    SOCKET_CLOSE = "socket_close"


@unique
class SyntheticEvent(StrEnum):
    """Events produced by the controller itself."""

    INIT = "init"
    STATE_CHANGE = "state_change"
    MODEL_STATUS_CHANGE = "model_status_change"
    GOAL_PROGRESS = "goal_progress"
    GOAL_REACHED = "goal_reached"
