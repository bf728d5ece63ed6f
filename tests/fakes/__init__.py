"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection for the error paths of each store operation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutLogRepository, create_workout_log_repo

    # Direct instantiation
    repo = FakeWorkoutLogRepository()
    repo.seed_logs([{"id": "log-1", "client_id": "user1"}])

    # Factory function with pre-populated data
    repo = create_workout_log_repo(client_id="user1", set_logs=[(100, 5), (100, 5)])
"""
from typing import Optional, List, Tuple
from datetime import datetime, timedelta, timezone

from tests.fakes.workout_log_repository import FakeWorkoutLogRepository
from tests.fakes.program_progress_repository import (
    FakeProgramProgressRepository,
    network_failure,
)
from tests.fakes.goal_repository import FakeGoalRepository, FakeGoalSync
from tests.fakes.achievement_repository import (
    FakeAchievementRepository,
    FakeAchievementChecker,
)
from tests.fakes.coach_repository import FakeCoachRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_log_repo(
    *,
    workout_log_id: str = "log-1",
    client_id: str = "test_user",
    set_logs: Optional[List[Tuple[Optional[float], Optional[int]]]] = None,
    started_minutes_ago: Optional[float] = None,
    now: Optional[datetime] = None,
    program_assignment_id: Optional[str] = None,
    program_schedule_id: Optional[str] = None,
) -> FakeWorkoutLogRepository:
    """
    Create a FakeWorkoutLogRepository holding one workout log.

    Args:
        workout_log_id: ID of the seeded log
        client_id: Owner of the log and its set logs
        set_logs: (weight, reps) pairs logged against the log
        started_minutes_ago: Sets started_at relative to ``now``
        now: Reference time for started_at (defaults to current UTC time)
        program_assignment_id: Program assignment the log belongs to
        program_schedule_id: Program schedule day the log belongs to

    Returns:
        Pre-populated FakeWorkoutLogRepository
    """
    repo = FakeWorkoutLogRepository()
    started_at = None
    if started_minutes_ago is not None:
        reference = now or datetime.now(timezone.utc)
        started_at = (reference - timedelta(minutes=started_minutes_ago)).isoformat()

    repo.seed_logs([{
        "id": workout_log_id,
        "client_id": client_id,
        "started_at": started_at,
        "program_assignment_id": program_assignment_id,
        "program_schedule_id": program_schedule_id,
    }])
    repo.seed_set_logs([
        {"workout_log_id": workout_log_id, "client_id": client_id, "weight": weight, "reps": reps}
        for weight, reps in (set_logs or [])
    ])
    return repo


def create_coach_repo(
    *,
    coach_id: str = "coach-1",
    client_ids: Optional[List[str]] = None,
    role: str = "coach",
) -> FakeCoachRepository:
    """
    Create a FakeCoachRepository with one coach and their clients.

    Args:
        coach_id: Coach user ID
        client_ids: Clients on the coach's roster
        role: Profile role of the coach

    Returns:
        Pre-populated FakeCoachRepository
    """
    repo = FakeCoachRepository()
    repo.add_profile(coach_id, role)
    for client_id in client_ids or []:
        repo.add_profile(client_id, "client")
        repo.add_client(coach_id, client_id)
    return repo


__all__ = [
    # Fakes
    "FakeWorkoutLogRepository",
    "FakeProgramProgressRepository",
    "FakeGoalRepository",
    "FakeGoalSync",
    "FakeAchievementRepository",
    "FakeAchievementChecker",
    "FakeCoachRepository",
    # Factories
    "create_workout_log_repo",
    "create_coach_repo",
    "network_failure",
]
