"""Backend services for the CoachHub API."""

from backend.services.achievement_service import AchievementService
from backend.services.goal_sync_service import GoalSyncResult, GoalSyncService

__all__ = [
    "AchievementService",
    "GoalSyncResult",
    "GoalSyncService",
]
