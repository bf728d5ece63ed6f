"""
Request and response schemas for workout completion and program progression.

Required fields are declared Optional on purpose: missing values are
reported by the routers as a 400 VALIDATION_ERROR listing the field names,
in the standard error envelope.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompleteWorkoutRequest(BaseModel):
    """Body of POST /complete-workout."""

    workout_log_id: Optional[str] = Field(default=None, description="Workout log being completed")
    client_id: Optional[str] = Field(default=None, description="Owner of the workout log")
    duration_minutes: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Client measured duration; takes precedence over started_at",
    )
    session_id: Optional[str] = Field(
        default=None,
        description="Workout session to mark completed (UUID, best-effort)",
    )

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def reject_boolean_duration(cls, v: Any) -> Any:
        """Booleans are not durations."""
        if isinstance(v, bool):
            raise ValueError("duration_minutes must be a number")
        return v


class MarkDayCompleteRequest(BaseModel):
    """Body of POST /coach/pickup/mark-complete."""

    model_config = ConfigDict(populate_by_name=True)

    client_id: Optional[str] = Field(default=None, alias="clientId")
    notes: Optional[str] = None


class WorkoutTotalsResponse(BaseModel):
    sets: int
    reps: int
    weight: float
    duration_minutes: int


class ProgramProgressionResponse(BaseModel):
    status: str
    message: Optional[str] = None
    current_week_index: Optional[int] = None
    current_day_index: Optional[int] = None
    is_completed: Optional[bool] = None


class ProgramDayResponse(BaseModel):
    program_assignment_id: Optional[str] = None
    program_schedule_id: Optional[str] = None


class CompleteWorkoutResponse(BaseModel):
    """200 body of POST /complete-workout."""

    success: bool = True
    workout_log: Dict[str, Any]
    totals: WorkoutTotalsResponse
    program_progression: ProgramProgressionResponse
    program_day: ProgramDayResponse
