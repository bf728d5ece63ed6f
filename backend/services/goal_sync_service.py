"""
Goal Sync Service.

Keeps automatically tracked goals in sync with activity data. Currently
covers workout consistency goals ("N workouts per week"), whose current value
is the number of workout sessions completed in the current Monday-Sunday week.
"""
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Tuple
import logging

from application.ports.goal_repository import GoalRepository

logger = logging.getLogger(__name__)


@dataclass
class GoalSyncResult:
    """Outcome of syncing one goal."""
    goal_id: str
    old_value: float
    new_value: float
    updated: bool
    reason: str


def week_bounds(today: date) -> Tuple[datetime, datetime]:
    """
    Get Monday 00:00:00 and Sunday 23:59:59.999 (UTC) of the week containing ``today``.
    """
    monday = today - timedelta(days=today.weekday())
    sunday = monday + timedelta(days=6)
    start = datetime.combine(monday, time.min, tzinfo=timezone.utc)
    end = datetime.combine(sunday, time(23, 59, 59, 999000), tzinfo=timezone.utc)
    return start, end


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GoalSyncService:
    """
    Recomputes goal progress from activity data.

    Sync methods never raise: failures are reported through
    ``GoalSyncResult.reason`` with ``updated=False``.
    """

    def __init__(
        self,
        goal_repo: GoalRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize with dependencies.

        Args:
            goal_repo: Repository for goals and session counts
            clock: Returns the current time (overridable in tests)
        """
        self._goal_repo = goal_repo
        self._clock = clock

    def sync_workout_consistency_goal(self, goal_id: str, client_id: str) -> GoalSyncResult:
        """
        Sync a workout consistency goal with this week's completed sessions.

        Args:
            goal_id: Goal to update
            client_id: Goal owner

        Returns:
            GoalSyncResult with old/new values and whether the goal changed
        """
        try:
            now = self._clock()
            start, end = week_bounds(now.date())

            try:
                new_value = self._goal_repo.count_completed_sessions(client_id, start, end)
            except Exception as e:
                logger.error(f"Error counting workouts for client {client_id}: {e}")
                return GoalSyncResult(goal_id, 0, 0, False, f"Database error: {e}")

            goal = self._goal_repo.get(goal_id)
            if not goal:
                return GoalSyncResult(goal_id, 0, 0, False, "Goal not found")

            old_value = goal.get("current_value") or 0
            if new_value == old_value:
                return GoalSyncResult(goal_id, old_value, new_value, False, "Count unchanged")

            target = goal.get("target_value")
            progress = min(100.0, (new_value / target) * 100) if target else 0
            if progress >= 100 or goal.get("status") == "completed":
                status = "completed"
            else:
                status = "active"
            completed_date = goal.get("completed_date")
            if progress >= 100 and not completed_date:
                completed_date = now.date().isoformat()

            try:
                self._goal_repo.update_progress(goal_id, {
                    "current_value": new_value,
                    "progress_percentage": progress,
                    "status": status,
                    "completed_date": completed_date,
                    "updated_at": now.isoformat(),
                })
            except Exception as e:
                logger.error(f"Error updating goal {goal_id}: {e}")
                return GoalSyncResult(goal_id, old_value, new_value, False, f"Update failed: {e}")

            logger.info(f"Goal {goal_id} synced: {old_value} -> {new_value} workouts this week")
            return GoalSyncResult(
                goal_id,
                old_value,
                new_value,
                True,
                f"Updated to {new_value} workouts this week",
            )
        except Exception as e:
            logger.error(f"Error in sync_workout_consistency_goal: {e}")
            return GoalSyncResult(goal_id, 0, 0, False, f"Exception: {e}")
