"""
Repository Interfaces (Ports) for the CoachHub API.

This package defines abstract interfaces that decouple use cases from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutLogRepository, ProgramProgressRepository

    class CompleteWorkoutUseCase:
        def __init__(self, workout_log_repo: WorkoutLogRepository, ...):
            self._workout_log_repo = workout_log_repo
"""

# Workout log persistence
from application.ports.workout_log_repository import WorkoutLogRepository

# Program progression procedure
from application.ports.program_progress_repository import ProgramProgressRepository

# Goals and achievements
from application.ports.goal_repository import GoalRepository
from application.ports.achievement_repository import AchievementRepository
from application.ports.side_effects import GoalSync, AchievementChecker

# Coach access control
from application.ports.coach_repository import CoachRepository

__all__ = [
    # Workout logs
    "WorkoutLogRepository",
    # Progression
    "ProgramProgressRepository",
    # Goals / achievements
    "GoalRepository",
    "AchievementRepository",
    "GoalSync",
    "AchievementChecker",
    # Coach
    "CoachRepository",
]
