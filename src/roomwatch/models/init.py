"""Initialization payload delivered by the upstream source."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from roomwatch.models.room import Number


def _falsy_to_none(value: Any) -> Any:
    return value if value else None


# Upstream sends "" or 0 for unset fields; both read as missing.
OptionalNumber = Annotated[Number | None, BeforeValidator(_falsy_to_none)]
OptionalText = Annotated[str | None, BeforeValidator(_falsy_to_none)]


class ChatSettings(BaseModel):
    """Chat settings bundle (upstream snake_case keys)."""

    model_config = ConfigDict(extra="allow")

    welcome_message: OptionalText = None
    spy_price: OptionalNumber = None
    private_price: OptionalNumber = None
    num_users_required_for_group_show: OptionalNumber = None
    num_users_waiting_for_group_show: OptionalNumber = None
    group_price: OptionalNumber = None
    current_subject: OptionalText = None
    broadcaster_gender: OptionalText = None
    app_info_json: OptionalText = None
    get_panel_url: OptionalText = None


class RoomSettingsBundle(BaseModel):
    """Room settings bundle. Toggles are truthy/falsy upstream values."""

    model_config = ConfigDict(extra="allow")

    groups_enabled: Any = None
    privates_enabled: Any = None
    room: OptionalText = None
    connecting: Any = None
    connected: Any = None


class InitializerSettings(BaseModel):
    """Initializer settings bundle."""

    model_config = ConfigDict(extra="allow")

    model_status: OptionalText = None
    joined: Any = None


class InitPayload(BaseModel):
    """Payload of the ``init`` / ``socket_hooked`` lifecycle signals."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    has_websocket: Any = Field(default=None, alias="hasWebsocket")
    chat_settings: ChatSettings | None = Field(default=None, alias="chatSettings")
    settings: RoomSettingsBundle | None = None
    initializer_settings: InitializerSettings | None = Field(
        default=None, alias="initializerSettings"
    )
