"""Room snapshot value models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from roomwatch.models.enums import ConnectionState, ModelStatus

Number = int | float


class PanelRow(BaseModel):
    """One label/value row of the broadcaster's app panel."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class AppInfo(BaseModel):
    """A panel app or bot running in the room.

    An entry without a URL is kept as the empty record (all fields ``None``).
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    url: str | None = None
    slot: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.url is None and self.slot is None


class Goal(BaseModel):
    """Broadcaster goal progress as derived from the panel."""

    model_config = ConfigDict(frozen=True)

    goal_current: int | None = None
    goal_remaining: int | None = None
    goal_count: int | None = None


class ApiEndpoints(BaseModel):
    """Endpoints handed over by the chat settings bundle."""

    get_panel_url: str | None = None


class RoomSettings(BaseModel):
    """Immutable flat projection of the room state."""

    model_config = ConfigDict(frozen=True)

    state: ConnectionState | None = None
    room: str | None = None
    welcome_message: str | None = None
    subject: str | None = None
    gender: str | None = None
    view_count: Number = 0
    spy_price: Number = 0
    groups_enabled: bool = False
    group_price: Number = 0
    group_num_users_required: Number = 0
    group_num_users_waiting: Number = 0
    privates_enabled: bool = False
    private_price: Number = 0
    model_status: ModelStatus | None = None
    panel: tuple[PanelRow, ...] = Field(default_factory=tuple)
    app_info: tuple[AppInfo, ...] = Field(default_factory=tuple)
    goal: Goal | None = None
