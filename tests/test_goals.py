"""Tests for goal delta detection."""

from __future__ import annotations

from roomwatch.core.goals import detect_goal_events
from roomwatch.models.enums import SyntheticEvent
from roomwatch.models.room import Goal


class TestSingleGoal:
    def test_progress_then_reached(self) -> None:
        old = Goal(goal_current=5, goal_remaining=2, goal_count=1)
        new = Goal(goal_current=7, goal_remaining=0, goal_count=1)

        events = detect_goal_events(old, new)

        assert events == [
            (SyntheticEvent.GOAL_PROGRESS, new),
            (SyntheticEvent.GOAL_REACHED, new),
        ]

    def test_progress_only(self) -> None:
        old = Goal(goal_current=5, goal_remaining=10)
        new = Goal(goal_current=8, goal_remaining=7)

        assert detect_goal_events(old, new) == [(SyntheticEvent.GOAL_PROGRESS, new)]

    def test_remaining_becomes_absent(self) -> None:
        old = Goal(goal_current=5, goal_remaining=3)
        new = Goal(goal_current=5, goal_remaining=None)

        assert detect_goal_events(old, new) == [(SyntheticEvent.GOAL_REACHED, new)]

    def test_already_reached_does_not_fire_again(self) -> None:
        old = Goal(goal_current=10, goal_remaining=0)
        new = Goal(goal_current=10, goal_remaining=0)

        assert detect_goal_events(old, new) == []

    def test_count_increase_ignored_in_single_mode(self) -> None:
        old = Goal(goal_current=1, goal_remaining=5, goal_count=1)
        new = Goal(goal_current=1, goal_remaining=5, goal_count=2)

        assert detect_goal_events(old, new) == []


class TestMultipleGoals:
    def test_count_increase_is_reached(self) -> None:
        old = Goal(goal_current=3, goal_remaining=4, goal_count=1)
        new = Goal(goal_current=3, goal_remaining=4, goal_count=2)

        events = detect_goal_events(old, new, multiple_goals=True)

        assert events == [(SyntheticEvent.GOAL_REACHED, new)]

    def test_remaining_drop_ignored_in_multi_mode(self) -> None:
        old = Goal(goal_current=3, goal_remaining=4, goal_count=1)
        new = Goal(goal_current=3, goal_remaining=0, goal_count=1)

        assert detect_goal_events(old, new, multiple_goals=True) == []

    def test_unknown_count_never_reaches(self) -> None:
        old = Goal(goal_current=3, goal_count=None)
        new = Goal(goal_current=3, goal_count=4)

        assert detect_goal_events(old, new, multiple_goals=True) == []


class TestMissingGoal:
    def test_no_old_goal(self) -> None:
        assert detect_goal_events(None, Goal(goal_current=1, goal_remaining=0)) == []

    def test_goal_cleared(self) -> None:
        assert detect_goal_events(Goal(goal_current=1, goal_remaining=4), None) == []
