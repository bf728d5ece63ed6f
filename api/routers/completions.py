"""
Completions router for finishing workouts.

This router contains:
- POST /complete-workout - Finalize a workout log and advance the client's program

Response status reflects the program progression outcome:
- 200: program advanced
- 409: day already completed, or program already finished
- 4xx/5xx: error envelope ({error, details?, code?})
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import (
    get_complete_workout_request,
    get_complete_workout_use_case,
    get_current_user,
)
from api.errors import validate_required_fields
from api.schemas.completion import (
    CompleteWorkoutRequest,
    CompleteWorkoutResponse,
    ProgramDayResponse,
    ProgramProgressionResponse,
    WorkoutTotalsResponse,
)
from application.exceptions import ValidationError
from application.use_cases import CompleteWorkoutResult, CompleteWorkoutUseCase
from backend.auth import AuthenticatedUser, validate_ownership
from domain.models.progression import ProgressionStatus

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Completions"],
)

REQUIRED_FIELDS = ("workout_log_id", "client_id")

CONFLICT_ERRORS = {
    ProgressionStatus.ALREADY_COMPLETED: "Day already completed",
    ProgressionStatus.COMPLETED: "Program already completed",
}


def _conflict_response(result: CompleteWorkoutResult) -> JSONResponse:
    """409 body for a day or program that was already complete."""
    progression = result.progression
    is_completed = progression.is_completed
    if progression.status == ProgressionStatus.COMPLETED:
        is_completed = True
    body = {
        "success": False,
        "error": CONFLICT_ERRORS[progression.status],
        "message": progression.message,
        "workout_log": result.workout_log,
        "program_progression": {
            "status": progression.status.value,
            "current_week_index": progression.current_week_index,
            "current_day_index": progression.current_day_index,
            "is_completed": is_completed,
        },
    }
    return JSONResponse(status_code=409, content=body)


def _success_response(result: CompleteWorkoutResult) -> CompleteWorkoutResponse:
    progression = result.progression
    return CompleteWorkoutResponse(
        workout_log=result.workout_log,
        totals=WorkoutTotalsResponse(**result.totals.model_dump()),
        program_progression=ProgramProgressionResponse(
            status=progression.status.value,
            message=progression.message,
            current_week_index=progression.current_week_index,
            current_day_index=progression.current_day_index,
            is_completed=progression.is_completed,
        ),
        program_day=ProgramDayResponse(**result.program_day),
    )


@router.post("/complete-workout", response_model=CompleteWorkoutResponse)
def complete_workout_endpoint(
    user: AuthenticatedUser = Depends(get_current_user),
    request: CompleteWorkoutRequest = Depends(get_complete_workout_request),
    use_case: CompleteWorkoutUseCase = Depends(get_complete_workout_use_case),
):
    """
    Complete a workout.

    Aggregates the sets logged against ``workout_log_id``, stores totals and
    duration on the log, marks the optional workout session completed, runs
    goal/achievement side effects, and advances the client's program.

    Args:
        request: workout_log_id, client_id, optional duration_minutes and session_id
        user: Authenticated user (must be the client)

    Returns:
        Workout log, totals, program progression and program day
    """
    logger.info(
        f"/complete-workout called: workout_log_id={request.workout_log_id} "
        f"client_id={request.client_id} has_duration={request.duration_minutes is not None} "
        f"session_id={request.session_id}"
    )

    missing = validate_required_fields(request.model_dump(), REQUIRED_FIELDS)
    if missing:
        raise ValidationError("Missing required fields", f"Missing: {', '.join(missing)}")

    validate_ownership(user.id, request.client_id)

    result = use_case.execute(
        request.workout_log_id,
        request.client_id,
        user.id,
        duration_minutes=request.duration_minutes,
        session_id=request.session_id,
    )

    if result.progression.is_conflict:
        return _conflict_response(result)
    return _success_response(result)
