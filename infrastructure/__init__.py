"""
Infrastructure Layer for the CoachHub API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutLogRepository,
    SupabaseProgramProgressRepository,
    SupabaseGoalRepository,
    SupabaseAchievementRepository,
    SupabaseCoachRepository,
)

__all__ = [
    "SupabaseWorkoutLogRepository",
    "SupabaseProgramProgressRepository",
    "SupabaseGoalRepository",
    "SupabaseAchievementRepository",
    "SupabaseCoachRepository",
]
