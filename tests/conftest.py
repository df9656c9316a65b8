"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any

import pytest

from roomwatch.core.controller import ControllerConfig, RoomController
from roomwatch.models.enums import SyntheticEvent
from roomwatch.sources.memory import LocalEventSource
from roomwatch.transport.mock import MockRoomTransport

PANEL_HTML = """
<table>
  <tr>
    <th>Tip Received / Goal :</th>
    <td>120 / 500</td>
  </tr>
  <tr>
    <th>Highest Tip:</th>
    <td>bob (50)</td>
  </tr>
  <tr>
    <th>Latest Tip Received:</th>
    <td>alice (10)</td>
  </tr>
</table>
"""


class EventRecorder:
    """Collects ``(name, payload)`` pairs emitted by a controller."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def attach(self, controller: RoomController, *names: str) -> EventRecorder:
        for name in names or controller.event_names:

            def listener(payload: Any, _name: str = str(name)) -> None:
                self.events.append((_name, payload))

            controller.add_listener(name, listener)
        return self

    def named(self, name: str) -> list[Any]:
        return [payload for n, payload in self.events if n == name]

    @property
    def names(self) -> list[str]:
        return [n for n, _ in self.events]

    def clear(self) -> None:
        self.events.clear()


def make_init(
    *,
    has_websocket: bool = True,
    chat_settings: dict[str, Any] | None = None,
    settings: dict[str, Any] | None = None,
    initializer_settings: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"hasWebsocket": has_websocket}
    if chat_settings is not None:
        payload["chatSettings"] = chat_settings
    if settings is not None:
        payload["settings"] = settings
    if initializer_settings is not None:
        payload["initializerSettings"] = initializer_settings
    return payload


def make_chat_settings(**overrides: Any) -> dict[str, Any]:
    chat: dict[str, Any] = {
        "welcome_message": "Welcome!",
        "spy_price": 6,
        "private_price": 30,
        "num_users_required_for_group_show": 3,
        "num_users_waiting_for_group_show": 1,
        "group_price": 12,
        "current_subject": "hello world",
        "broadcaster_gender": "female",
        "app_info_json": "Tip Goal|http://apps.example.com/app/?slot=0",
        "get_panel_url": "/api/panel/hostroom/",
    }
    chat.update(overrides)
    return chat


@pytest.fixture
def source() -> LocalEventSource:
    return LocalEventSource()


@pytest.fixture
def transport() -> MockRoomTransport:
    return MockRoomTransport(PANEL_HTML)


@pytest.fixture
def controller(source: LocalEventSource, transport: MockRoomTransport) -> RoomController:
    return RoomController(source, transport, config=ControllerConfig())


@pytest.fixture
def recorder(controller: RoomController) -> EventRecorder:
    return EventRecorder().attach(controller)


@pytest.fixture
def synthetic_names() -> list[str]:
    return [str(e) for e in SyntheticEvent]
