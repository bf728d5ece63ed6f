"""
Workout Log Repository Interface (Port).

This module defines the abstract interface for the rows touched when a
client completes a workout: ``workout_logs``, ``workout_set_logs`` and
``workout_sessions``.
"""
from datetime import datetime
from typing import Protocol, Optional, List, Dict, Any

from domain.models.workout_totals import WorkoutTotals


class WorkoutLogRepository(Protocol):
    """
    Abstract interface for workout log persistence.

    Store failures are raised as ``application.exceptions.RepositoryError``.
    """

    def get_for_client(
        self,
        workout_log_id: str,
        client_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Get a workout log matching both id and owner.

        Args:
            workout_log_id: Workout log UUID
            client_id: Owning client's user ID

        Returns:
            Row with ``id``, ``client_id``, ``started_at``,
            ``program_assignment_id`` and ``program_schedule_id``,
            or None if no row matches
        """
        ...

    def get_set_logs(
        self,
        workout_log_id: str,
        client_id: str,
    ) -> List[Dict[str, Any]]:
        """
        Get the set logs recorded against one workout log.

        Filters on both the workout log id and the client id so sets from
        other logs of the same client are never included.

        Returns:
            List of set log rows (``weight``, ``reps``, ``exercise_id``, ...)
        """
        ...

    def finalize(
        self,
        workout_log_id: str,
        *,
        completed_at: datetime,
        totals: WorkoutTotals,
    ) -> Dict[str, Any]:
        """
        Write completion timestamp and totals onto a workout log.

        Returns:
            The updated workout log row
        """
        ...

    def mark_session_completed(
        self,
        session_id: str,
        client_id: str,
        *,
        completed_at: datetime,
    ) -> None:
        """Set a workout session's status to ``completed``."""
        ...
