"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- completion: Workout completion and program progression models
"""

from api.schemas.completion import (
    CompleteWorkoutRequest,
    CompleteWorkoutResponse,
    MarkDayCompleteRequest,
    ProgramDayResponse,
    ProgramProgressionResponse,
    WorkoutTotalsResponse,
)

__all__ = [
    "CompleteWorkoutRequest",
    "CompleteWorkoutResponse",
    "MarkDayCompleteRequest",
    "ProgramDayResponse",
    "ProgramProgressionResponse",
    "WorkoutTotalsResponse",
]
