"""
Goal Repository Interface (Port).

Reads and updates client goals, and counts the activity used to keep
workout consistency goals in sync.
"""
from datetime import datetime
from typing import Protocol, Optional, List, Dict, Any


class GoalRepository(Protocol):
    """Abstract interface for goal persistence."""

    def find_active_consistency_goals(self, client_id: str) -> List[Dict[str, Any]]:
        """
        Get the client's active workout consistency goals.

        Matches titles containing "Workout Consistency" or "workouts per week",
        case-insensitively.

        Returns:
            List of goal rows (at least ``id``)
        """
        ...

    def get(self, goal_id: str) -> Optional[Dict[str, Any]]:
        """Get a goal's ``current_value``, ``target_value``, ``status`` and ``completed_date``."""
        ...

    def update_progress(self, goal_id: str, fields: Dict[str, Any]) -> None:
        """Update progress columns of a goal."""
        ...

    def count_completed_sessions(
        self,
        client_id: str,
        start: datetime,
        end: datetime,
    ) -> int:
        """Count completed workout sessions with ``completed_at`` in [start, end]."""
        ...
