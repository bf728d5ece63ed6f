"""
MarkDayComplete Use Case.

Lets a coach mark a client's current program day as complete ("pickup"
sessions run by the coach), advancing the client's program through the same
``advance_program_progress`` procedure clients use.
"""

import logging
from typing import Optional

from application.exceptions import (
    ForbiddenError,
    ProgressionError,
    RepositoryError,
    UnauthorizedError,
)
from application.ports.coach_repository import CoachRepository
from application.ports.program_progress_repository import ProgramProgressRepository
from domain.models.progression import ProgressionResult, ProgressionStatus

logger = logging.getLogger(__name__)

COACH_ROLES = ("coach", "admin")

# Procedure error code returned when the client has no active program
NO_ACTIVE_ASSIGNMENT = "no_active_assignment"


class MarkDayCompleteUseCase:
    """
    Use case for a coach completing a client's program day.

    Usage:
        >>> use_case = MarkDayCompleteUseCase(coach_repo=coach_repo, progress_repo=progress_repo)
        >>> result = use_case.execute(coach_id="coach-1", client_id="client-1")
    """

    def __init__(
        self,
        coach_repo: CoachRepository,
        progress_repo: ProgramProgressRepository,
    ) -> None:
        self._coach_repo = coach_repo
        self._progress_repo = progress_repo

    def execute(
        self,
        coach_id: str,
        client_id: str,
        notes: Optional[str] = None,
    ) -> ProgressionResult:
        """
        Verify the coach relationship and advance the client's program.

        Returns:
            ProgressionResult (advanced, already_completed or completed)

        Raises:
            UnauthorizedError: Caller has no profile
            ForbiddenError: Caller is not a coach of this client
            ProgressionError: Procedure failed (404 for no active assignment)
        """
        try:
            role = self._coach_repo.get_role(coach_id)
        except RepositoryError as e:
            logger.error(f"Error loading profile {coach_id}: {e.describe()}")
            role = None
        if role is None:
            raise UnauthorizedError("Profile not found")
        if role not in COACH_ROLES:
            raise ForbiddenError("Only coaches can access this endpoint")

        try:
            has_client = self._coach_repo.has_client(coach_id, client_id)
        except RepositoryError as e:
            logger.error(f"Error checking client {client_id} for coach {coach_id}: {e.describe()}")
            has_client = False
        if not has_client:
            raise ForbiddenError("Client not found or does not belong to this coach")

        logger.info(f"[pickup/mark-complete] Calling advance_program_progress for client {client_id}")
        try:
            result = self._progress_repo.advance(client_id, coach_id, notes or None)
        except RepositoryError as e:
            logger.error(f"[pickup/mark-complete] RPC error: {e.describe()}")
            raise ProgressionError("Failed to advance program progress", e.message)

        if result.status == ProgressionStatus.ERROR:
            status_code = 404 if result.error == NO_ACTIVE_ASSIGNMENT else 500
            raise ProgressionError(
                result.error or "Failed to advance program progress",
                result.message,
                code=result.error or ProgressionError.code,
                status_code=status_code,
            )
        return result
