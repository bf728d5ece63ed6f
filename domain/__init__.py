"""
Domain layer for the CoachHub API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ProgressionResult,
    ProgressionStatus,
    WorkoutTotals,
)

__all__ = [
    "ProgressionResult",
    "ProgressionStatus",
    "WorkoutTotals",
]
