"""
Supabase Workout Log Repository Implementation.

This module implements the WorkoutLogRepository protocol using Supabase as the
backend. Reads and writes ``workout_logs``, ``workout_set_logs`` and
``workout_sessions``.
"""
from datetime import datetime
from typing import Optional, Dict, Any, List
from supabase import Client
import logging

from application.exceptions import RepositoryError
from domain.models.workout_totals import WorkoutTotals
from infrastructure.db.errors import NO_ROWS_CODE, to_repository_error

logger = logging.getLogger(__name__)

WORKOUT_LOG_COLUMNS = "id, client_id, started_at, program_assignment_id, program_schedule_id"
SET_LOG_COLUMNS = "id, weight, reps, exercise_id, completed_at, workout_log_id"


class SupabaseWorkoutLogRepository:
    """
    Supabase implementation of WorkoutLogRepository.

    Meant to be constructed with the service role client: ownership is
    checked by the caller before any of these methods run.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_for_client(
        self,
        workout_log_id: str,
        client_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Get a workout log matching both id and client."""
        try:
            result = self._client.table("workout_logs") \
                .select(WORKOUT_LOG_COLUMNS) \
                .eq("id", workout_log_id) \
                .eq("client_id", client_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e

        rows = result.data or []
        return rows[0] if rows else None

    def get_set_logs(
        self,
        workout_log_id: str,
        client_id: str,
    ) -> List[Dict[str, Any]]:
        """Get set logs of one workout log, scoped to the client."""
        try:
            result = self._client.table("workout_set_logs") \
                .select(SET_LOG_COLUMNS) \
                .eq("workout_log_id", workout_log_id) \
                .eq("client_id", client_id) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e

        return result.data or []

    def finalize(
        self,
        workout_log_id: str,
        *,
        completed_at: datetime,
        totals: WorkoutTotals,
    ) -> Dict[str, Any]:
        """Write completion timestamp and totals; returns the updated row."""
        update = {"completed_at": completed_at.isoformat(), **totals.to_log_columns()}
        try:
            result = self._client.table("workout_logs") \
                .update(update) \
                .eq("id", workout_log_id) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e

        rows = result.data or []
        if not rows:
            raise RepositoryError(
                f"No workout_logs row updated for id {workout_log_id}",
                code=NO_ROWS_CODE,
            )
        return rows[0]

    def mark_session_completed(
        self,
        session_id: str,
        client_id: str,
        *,
        completed_at: datetime,
    ) -> None:
        """Set a workout session's status to completed."""
        try:
            result = self._client.table("workout_sessions") \
                .update({
                    "status": "completed",
                    "completed_at": completed_at.isoformat(),
                }) \
                .eq("id", session_id) \
                .eq("client_id", client_id) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e

        if not result.data:
            logger.warning(f"No workout_sessions row matched id {session_id} for client {client_id}")
