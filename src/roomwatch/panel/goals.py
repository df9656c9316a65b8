"""Goal extraction from transformed panel rows."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Protocol

from roomwatch.models.room import Goal, PanelRow

logger = logging.getLogger("roomwatch.panel")

_NUMBER = re.compile(r"\d[\d,]*")
_GOAL_NUMBER = re.compile(r"goal\s*#\s*(\d+)", re.IGNORECASE)


class GoalExtractor(Protocol):
    """Derives a goal from the active panel app and its rows."""

    def __call__(self, app_name: str | None, panel: Sequence[PanelRow]) -> Goal | None: ...


def _numbers(text: str) -> list[int]:
    return [int(m.replace(",", "")) for m in _NUMBER.findall(text)]


def extract_goal(app_name: str | None, panel: Sequence[PanelRow]) -> Goal | None:
    """Label-driven goal extraction for the common tip-goal panel layouts.

    Recognised rows (case-insensitive labels):

    - ``... goal``/``received`` with a ``current / target`` value: current
      tokens and, when no explicit remaining row exists, the remaining
      amount up to the target.
    - ``remaining``/``left``: tokens still needed.
    - ``goal #N`` in a label or value, or a ``goals reached``/``completed``
      row: the sequential goal counter.

    Returns ``None`` when nothing goal-like is found.
    """
    current: int | None = None
    remaining: int | None = None
    target: int | None = None
    count: int | None = None

    for row in panel:
        counter = _GOAL_NUMBER.search(row.label)
        if counter is not None:
            count = int(counter.group(1))
            continue

        value = row.value
        counter = _GOAL_NUMBER.search(value)
        if counter is not None:
            count = int(counter.group(1))
            value = _GOAL_NUMBER.sub("", value)

        label = row.label.lower()
        numbers = _numbers(value)
        if not numbers:
            continue

        if "remaining" in label or "left" in label:
            remaining = numbers[0]
        elif "reached" in label or "completed" in label:
            count = numbers[0]
        elif "goal" in label or "received" in label:
            if len(numbers) >= 2:
                current, target = numbers[0], numbers[1]
            elif current is None:
                current = numbers[0]

    if remaining is None and current is not None and target is not None:
        remaining = max(target - current, 0)

    if current is None and remaining is None:
        logger.debug("No goal found in panel for app %s", app_name)
        return None

    return Goal(goal_current=current, goal_remaining=remaining, goal_count=count)
