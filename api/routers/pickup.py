"""
Coach pickup router.

This router contains:
- POST /coach/pickup/mark-complete - Coach marks a client's current program day complete

Uses the same ``advance_program_progress`` procedure as client completions:
- 'advanced': success (200)
- 'already_completed': day was already marked complete (409)
- 'completed': program was already fully completed (409)
- 'error': 404 for no active assignment, else 500
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import (
    get_current_user,
    get_mark_day_complete_request,
    get_mark_day_complete_use_case,
)
from api.schemas.completion import MarkDayCompleteRequest
from application.exceptions import ValidationError
from application.use_cases import MarkDayCompleteUseCase
from backend.auth import AuthenticatedUser
from domain.models.progression import ProgressionStatus

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/coach/pickup",
    tags=["Coach Pickup"],
)


@router.post("/mark-complete")
def mark_day_complete_endpoint(
    user: AuthenticatedUser = Depends(get_current_user),
    request: MarkDayCompleteRequest = Depends(get_mark_day_complete_request),
    use_case: MarkDayCompleteUseCase = Depends(get_mark_day_complete_use_case),
):
    """
    Mark the client's current training day complete and advance their program.

    Args:
        request: clientId and optional notes
        user: Authenticated coach (or admin)

    Returns:
        What was completed and the client's new program position
    """
    if not request.client_id:
        raise ValidationError("Missing required field: clientId", "Missing: clientId")

    result = use_case.execute(user.id, request.client_id, request.notes)
    raw = result.raw

    if result.status == ProgressionStatus.ALREADY_COMPLETED:
        return JSONResponse(status_code=409, content={
            "error": "Day already completed",
            "message": result.message,
            "current_week_index": result.current_week_index,
            "current_day_index": result.current_day_index,
        })

    if result.status == ProgressionStatus.COMPLETED:
        return JSONResponse(status_code=409, content={
            "error": "Program already completed",
            "message": result.message,
            "is_completed": True,
            "current_week_index": result.current_week_index,
            "current_day_index": result.current_day_index,
        })

    logger.info(
        f"[pickup/mark-complete] Client {request.client_id} advanced to "
        f"week {result.current_week_index}, day {result.current_day_index}"
    )
    return {
        "success": True,
        "message": result.message,
        # What was just completed
        "completed": {
            "week_index": raw.get("completed_week_index"),
            "day_index": raw.get("completed_day_index"),
        },
        # New state
        "program_assignment_id": raw.get("program_assignment_id"),
        "program_id": raw.get("program_id"),
        "program_name": raw.get("program_name") or "Program",
        "current_week_index": result.current_week_index,
        "current_day_index": result.current_day_index,
        "is_completed": result.is_completed,
    }
