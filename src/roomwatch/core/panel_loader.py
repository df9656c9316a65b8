"""Panel refresh: fetch, transform, derive the goal."""

from __future__ import annotations

import logging
import time

from roomwatch.core.errors import PanelEndpointMissingError, TransportNotConfiguredError
from roomwatch.core.state import RoomState
from roomwatch.models.room import Goal, PanelRow
from roomwatch.panel.goals import GoalExtractor, extract_goal
from roomwatch.panel.transform import transform_panel_html
from roomwatch.transport.base import RoomTransport

logger = logging.getLogger("roomwatch.panel")


class PanelLoader:
    """Re-fetches the panel through the transport and updates the room state."""

    def __init__(
        self,
        state: RoomState,
        transport: RoomTransport | None,
        goal_extractor: GoalExtractor | None = None,
    ) -> None:
        self._state = state
        self._transport = transport
        self._extract_goal = goal_extractor or extract_goal

    async def refresh(
        self, *, navigate: bool = False, cache_bust: bool = False
    ) -> tuple[list[PanelRow], Goal | None]:
        """Fetch the panel, replace ``state.panel`` and assign the new goal.

        Args:
            navigate: Reload the room page first (when a room is known) so
                newly started apps are picked up.
            cache_bust: Add a ``_`` millisecond timestamp query parameter.

        Returns:
            The new panel rows and goal.

        Raises:
            TransportNotConfiguredError: No transport was given.
            PanelEndpointMissingError: No panel URL is known yet.
        """
        if self._transport is None:
            raise TransportNotConfiguredError("panel refresh needs a transport")
        url = self._state.api.get_panel_url
        if not url:
            raise PanelEndpointMissingError("no panel URL received yet")

        if navigate and self._state.room:
            await self._transport.profile(self._state.room)

        params = {"_": int(time.time() * 1000)} if cache_bust else None
        html = await self._transport.fetch(url, params)

        self._state.panel = transform_panel_html(html)
        logger.debug("panel refreshed: %d rows", len(self._state.panel))
        await self._state.set_goal(self._extract_goal(self._state.panel_app, self._state.panel))
        return self._state.panel, self._state.goal
