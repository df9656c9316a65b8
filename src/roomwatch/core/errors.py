"""Exceptions raised by roomwatch."""

from __future__ import annotations


class RoomWatchError(Exception):
    """Base exception for all roomwatch errors."""


class PanelEndpointMissingError(RoomWatchError):
    """The panel URL is unknown because no chat settings were received yet."""


class TransportNotConfiguredError(RoomWatchError):
    """A panel refresh was requested on a controller without a transport."""
