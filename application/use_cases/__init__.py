"""
Application Use Cases for the CoachHub API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain results or raise ``application.exceptions.ApiError``

Usage:
    from application.use_cases import CompleteWorkoutUseCase, MarkDayCompleteUseCase

    complete = CompleteWorkoutUseCase(
        workout_log_repo=workout_log_repo,
        progress_repo=progress_repo,
        goal_repo=goal_repo,
        goal_sync=goal_sync,
        achievements=achievements,
    )
    result = complete.execute("log-1", "client-1", "client-1", duration_minutes=45)

    mark = MarkDayCompleteUseCase(coach_repo=coach_repo, progress_repo=progress_repo)
    progression = mark.execute("coach-1", "client-1", notes="Great session")
"""

from application.use_cases.complete_workout import (
    CompleteWorkoutResult,
    CompleteWorkoutUseCase,
    is_valid_uuid,
)
from application.use_cases.mark_day_complete import MarkDayCompleteUseCase

__all__ = [
    # CompleteWorkout
    "CompleteWorkoutUseCase",
    "CompleteWorkoutResult",
    "is_valid_uuid",
    # MarkDayComplete
    "MarkDayCompleteUseCase",
]
