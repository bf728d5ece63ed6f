"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseWorkoutLogRepository,
        SupabaseProgramProgressRepository,
    )

    # Service role client for reads/writes, user-scoped client for progression
    admin = create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)
    user_client = create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
    user_client.postgrest.auth(access_token)

    workout_log_repo = SupabaseWorkoutLogRepository(admin)
    progress_repo = SupabaseProgramProgressRepository(user_client)
"""

from infrastructure.db.workout_log_repository import SupabaseWorkoutLogRepository
from infrastructure.db.program_progress_repository import SupabaseProgramProgressRepository
from infrastructure.db.goal_repository import SupabaseGoalRepository
from infrastructure.db.achievement_repository import SupabaseAchievementRepository
from infrastructure.db.coach_repository import SupabaseCoachRepository

__all__ = [
    # Workout logs, set logs, sessions
    "SupabaseWorkoutLogRepository",

    # Program progression procedure (user-scoped client)
    "SupabaseProgramProgressRepository",

    # Goals and achievements
    "SupabaseGoalRepository",
    "SupabaseAchievementRepository",

    # Coach roster and profile roles
    "SupabaseCoachRepository",
]
