"""roomwatch - Async state tracking and event relay for live-stream chat rooms."""

from roomwatch._version import __version__
from roomwatch.core.app_info import AppInfoParseError, parse_app_info
from roomwatch.core.controller import ControllerConfig, EventListener, RoomController
from roomwatch.core.errors import (
    PanelEndpointMissingError,
    RoomWatchError,
    TransportNotConfiguredError,
)
from roomwatch.core.goals import detect_goal_events
from roomwatch.core.hooks import EventHookFn, HookOutcome, HookTable
from roomwatch.core.panel_loader import PanelLoader
from roomwatch.core.room_hooks import RoomHooks
from roomwatch.core.state import RoomState
from roomwatch.models.enums import (
    CatalogEvent,
    ConnectionState,
    LifecycleSignal,
    ModelStatus,
    SyntheticEvent,
)
from roomwatch.models.init import (
    ChatSettings,
    InitializerSettings,
    InitPayload,
    RoomSettingsBundle,
)
from roomwatch.models.room import ApiEndpoints, AppInfo, Goal, PanelRow, RoomSettings
from roomwatch.panel.goals import GoalExtractor, extract_goal
from roomwatch.panel.transform import transform_panel_html
from roomwatch.sources.base import RoomEventSource, SourceHandler
from roomwatch.sources.memory import LocalEventSource
from roomwatch.transport.base import RoomTransport, TransportError
from roomwatch.transport.config import HttpTransportConfig
from roomwatch.transport.mock import MockRoomTransport

__all__ = [
    "ApiEndpoints",
    "AppInfo",
    "AppInfoParseError",
    "CatalogEvent",
    "ChatSettings",
    "ConnectionState",
    "ControllerConfig",
    "EventHookFn",
    "EventListener",
    "Goal",
    "GoalExtractor",
    "HookOutcome",
    "HookTable",
    "HttpTransportConfig",
    "InitPayload",
    "InitializerSettings",
    "LifecycleSignal",
    "LocalEventSource",
    "MockRoomTransport",
    "ModelStatus",
    "PanelEndpointMissingError",
    "PanelLoader",
    "PanelRow",
    "RoomController",
    "RoomEventSource",
    "RoomHooks",
    "RoomSettings",
    "RoomSettingsBundle",
    "RoomState",
    "RoomTransport",
    "RoomWatchError",
    "SourceHandler",
    "SyntheticEvent",
    "TransportError",
    "TransportNotConfiguredError",
    "__version__",
    "detect_goal_events",
    "extract_goal",
    "parse_app_info",
    "transform_panel_html",
]
