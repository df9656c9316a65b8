"""Goal delta detection."""

from __future__ import annotations

from roomwatch.models.enums import SyntheticEvent
from roomwatch.models.room import Goal


def detect_goal_events(
    old: Goal | None,
    new: Goal | None,
    *,
    multiple_goals: bool = False,
) -> list[tuple[SyntheticEvent, Goal]]:
    """Compare two goal snapshots and return the events the change implies.

    No events are produced while either side is unknown. Progress is any
    change of ``goal_current``. Completion depends on the room mode:

    - multiple sequential goals: ``goal_count`` went up, so the previous
      goal was reached and a new one started.
    - single goal: ``goal_remaining`` went from positive to zero/absent.

    Returns:
        ``(event, goal)`` pairs in emission order; progress before reached.
    """
    if old is None or new is None:
        return []

    events: list[tuple[SyntheticEvent, Goal]] = []

    if new.goal_current != old.goal_current:
        events.append((SyntheticEvent.GOAL_PROGRESS, new))

    if multiple_goals:
        if (
            new.goal_count is not None
            and old.goal_count is not None
            and new.goal_count > old.goal_count
        ):
            events.append((SyntheticEvent.GOAL_REACHED, new))
    elif (old.goal_remaining or 0) > 0 and not new.goal_remaining:
        events.append((SyntheticEvent.GOAL_REACHED, new))

    return events
