"""
Domain models for the CoachHub API.

These models represent the core business concepts of completing a workout:
- WorkoutTotals: Sets, reps, volume and duration of one workout log
- ProgressionResult: Outcome of advancing a client's program

Usage:
    >>> from domain.models import WorkoutTotals
    >>> WorkoutTotals.from_set_logs([{"weight": 60, "reps": 10}]).weight
    600.0
"""

from domain.models.progression import ProgressionResult, ProgressionStatus
from domain.models.workout_totals import (
    WorkoutTotals,
    parse_timestamp,
    resolve_duration_minutes,
    round_half_up,
)

__all__ = [
    "ProgressionResult",
    "ProgressionStatus",
    "WorkoutTotals",
    "parse_timestamp",
    "resolve_duration_minutes",
    "round_half_up",
]
