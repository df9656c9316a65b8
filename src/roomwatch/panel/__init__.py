"""Panel transform and goal extraction."""

from roomwatch.panel.goals import GoalExtractor, extract_goal
from roomwatch.panel.transform import transform_panel_html

__all__ = [
    "GoalExtractor",
    "extract_goal",
    "transform_panel_html",
]
