"""HTTP transport backed by httpx."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from roomwatch.transport.base import RoomTransport, TransportError
from roomwatch.transport.config import HttpTransportConfig

logger = logging.getLogger("roomwatch.transport")


class HttpRoomTransport(RoomTransport):
    """Fetches panel HTML and room pages over plain HTTP.

    Example::

        config = HttpTransportConfig(base_url="https://rooms.example.com")
        async with HttpRoomTransport(config) as transport:
            controller = RoomController(source, transport)
            ...
    """

    def __init__(
        self,
        config: HttpTransportConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the transport.

        Args:
            config: Base URL, timeout, headers and profile path.
            client: Optional pre-built client (e.g. with an
                ``httpx.MockTransport`` in tests). Its lifetime stays with
                the caller.
        """
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.headers,
            follow_redirects=True,
        )

    async def fetch(self, url: str, params: Mapping[str, Any] | None = None) -> str:
        return await self._get(url, params)

    async def profile(self, room: str) -> None:
        await self._get(self._config.profile_path.format(room=quote(room, safe="")))

    async def _get(self, url: str, params: Mapping[str, Any] | None = None) -> str:
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = await self._client.get(url, params=dict(params) if params else None)
            resp.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportError(f"timeout fetching {url}", url=url) from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"http_{exc.response.status_code} fetching {url}",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc), url=url) from exc
        return resp.text

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpRoomTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
