"""
Side-effect routine interfaces (Ports).

Gamification and analytics routines triggered after a workout completes.
Callers treat them as best-effort: their failures never change a response.
"""
from typing import Protocol, Any


class GoalSync(Protocol):
    """Recomputes progress of an automatically tracked goal."""

    def sync_workout_consistency_goal(self, goal_id: str, client_id: str) -> Any:
        ...


class AchievementChecker(Protocol):
    """Unlocks achievements whose thresholds the client has reached."""

    def check_and_unlock(self, client_id: str, achievement_type: str) -> Any:
        ...
