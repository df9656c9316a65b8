"""Parser for the delimited app-info string of the chat settings bundle."""

from __future__ import annotations

import logging
import re

from roomwatch.models.room import AppInfo

logger = logging.getLogger("roomwatch.state")

_SLOT_RE = re.compile(r"[?&]slot=(\d+)")


class AppInfoParseError(ValueError):
    """An app-info URL is missing its ``slot`` query parameter."""


def parse_app_info(raw: str | None, *, strict: bool = True) -> list[AppInfo]:
    """Parse ``name|url,name|url`` into :class:`AppInfo` entries.

    Segments without a URL become the empty record. A URL that carries no
    ``slot`` parameter raises :class:`AppInfoParseError` when *strict*;
    otherwise the entry is kept with ``slot=None``.

    Example::

        parse_app_info("Dice|http://x/?slot=2,Solo")
        # [AppInfo(name="Dice", url="http://x/?slot=2", slot="2"), AppInfo()]
    """
    entries: list[AppInfo] = []
    for segment in (raw or "").split(","):
        name, _, url = segment.partition("|")
        # Only the first two pipe-separated fields are meaningful
        url = url.split("|", 1)[0]
        if not url:
            entries.append(AppInfo())
            continue

        match = _SLOT_RE.search(url)
        if match is None:
            if strict:
                raise AppInfoParseError(f"app info URL has no slot parameter: {url!r}")
            logger.warning("App info URL has no slot parameter, keeping without slot: %s", url)
            entries.append(AppInfo(name=name, url=url))
            continue

        entries.append(AppInfo(name=name, url=url, slot=match.group(1)))
    return entries
