"""HTTP transport configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class HttpTransportConfig(BaseModel):
    """Configuration for :class:`~roomwatch.transport.http.HttpRoomTransport`."""

    base_url: str
    timeout: float = Field(default=30.0, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)
    profile_path: str = "/{room}/"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError("base_url must be an http(s) URL with a host")
        return v

    @field_validator("profile_path")
    @classmethod
    def validate_profile_path(cls, v: str) -> str:
        if "{room}" not in v:
            raise ValueError("profile_path must contain a {room} placeholder")
        return v
