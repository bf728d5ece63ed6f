"""
CompleteWorkout Use Case.

Finalizes a client's workout log and advances their program.

Orchestrates the following workflow:
1. Fetch the workout log scoped to the client
2. Aggregate the set logs of that log only
3. Resolve the duration (client supplied, else from started_at)
4. Persist totals and completion timestamp
5. Best-effort: mark the workout session completed
6. Best-effort: sync consistency goals, check achievements
7. Advance the program through ``advance_program_progress``

Steps 1-4 and 7 fail the request; steps 5-6 only log.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from application.exceptions import (
    DatabaseError,
    NotFoundError,
    ProgressionError,
    RepositoryError,
)
from application.ports.goal_repository import GoalRepository
from application.ports.program_progress_repository import ProgramProgressRepository
from application.ports.side_effects import AchievementChecker, GoalSync
from application.ports.workout_log_repository import WorkoutLogRepository
from application.tasks import NonCriticalTask, run_non_critical
from domain.models.progression import ProgressionResult, ProgressionStatus
from domain.models.workout_totals import (
    WorkoutTotals,
    parse_timestamp,
    resolve_duration_minutes,
)

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Achievement categories affected by completing a workout
ACHIEVEMENT_TYPES = ("workout_count", "streak_weeks")


def is_valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CompleteWorkoutResult:
    """Result of the CompleteWorkout use case execution."""

    workout_log: Dict[str, Any]
    totals: WorkoutTotals
    progression: ProgressionResult
    program_day: Dict[str, Optional[str]] = field(default_factory=dict)


class CompleteWorkoutUseCase:
    """
    Use case for completing a workout and advancing program progression.

    Ownership of ``client_id`` must be verified by the caller. Store reads and
    writes go through the elevated repositories; only ``progress_repo`` runs
    as the calling user.

    Usage:
        >>> use_case = CompleteWorkoutUseCase(
        ...     workout_log_repo=workout_log_repo,
        ...     progress_repo=progress_repo,
        ...     goal_repo=goal_repo,
        ...     goal_sync=goal_sync,
        ...     achievements=achievements,
        ... )
        >>> result = use_case.execute(
        ...     workout_log_id="log-1",
        ...     client_id="user-1",
        ...     completed_by="user-1",
        ... )
        >>> result.progression.status
        <ProgressionStatus.ADVANCED: 'advanced'>
    """

    def __init__(
        self,
        workout_log_repo: WorkoutLogRepository,
        progress_repo: ProgramProgressRepository,
        goal_repo: GoalRepository,
        goal_sync: GoalSync,
        achievements: AchievementChecker,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_log_repo: Repository for workout logs, set logs and sessions
            progress_repo: User-scoped access to the progression procedure
            goal_repo: Repository used to find consistency goals
            goal_sync: Goal sync routine
            achievements: Achievement unlock routine
            clock: Returns the current time (overridable in tests)
        """
        self._workout_log_repo = workout_log_repo
        self._progress_repo = progress_repo
        self._goal_repo = goal_repo
        self._goal_sync = goal_sync
        self._achievements = achievements
        self._clock = clock

    def execute(
        self,
        workout_log_id: str,
        client_id: str,
        completed_by: str,
        *,
        duration_minutes: Optional[float] = None,
        session_id: Optional[str] = None,
    ) -> CompleteWorkoutResult:
        """
        Execute the complete workout workflow.

        Args:
            workout_log_id: Workout log being completed
            client_id: Owner of the workout log
            completed_by: Authenticated user completing the workout
            duration_minutes: Client measured duration, takes precedence
            session_id: Optional workout session to mark completed

        Returns:
            CompleteWorkoutResult; ``progression.status`` tells whether the
            program advanced or the day/program was already complete

        Raises:
            NotFoundError: Workout log missing for this client
            DatabaseError: Set logs could not be read or the log not updated
            ProgressionError: The progression procedure failed
        """
        workout_log = self._fetch_log(workout_log_id, client_id)
        base_totals = self._aggregate_sets(workout_log_id, client_id)

        completed_at = self._clock()
        duration = resolve_duration_minutes(
            duration_minutes,
            parse_timestamp(workout_log.get("started_at")),
            completed_at,
        )
        logger.info(
            f"Duration for workout_log {workout_log_id}: {duration} min "
            f"({'client supplied' if duration_minutes is not None else 'from started_at'})"
        )
        totals = base_totals.with_duration(duration)

        updated_log = self._finalize(workout_log_id, completed_at, totals)

        self._mark_session_completed(session_id, client_id, completed_at)

        run_non_critical([
            NonCriticalTask(
                "sync workout consistency goals",
                lambda: self._sync_consistency_goals(client_id),
            ),
            NonCriticalTask(
                "check/unlock achievements",
                lambda: self._check_achievements(client_id),
            ),
        ])

        progression = self._advance(client_id, completed_by)

        return CompleteWorkoutResult(
            workout_log=updated_log,
            totals=totals,
            progression=progression,
            program_day={
                "program_assignment_id": workout_log.get("program_assignment_id"),
                "program_schedule_id": workout_log.get("program_schedule_id"),
            },
        )

    # -------------------------------------------------------------------------
    # Critical path
    # -------------------------------------------------------------------------

    def _fetch_log(self, workout_log_id: str, client_id: str) -> Dict[str, Any]:
        try:
            workout_log = self._workout_log_repo.get_for_client(workout_log_id, client_id)
        except RepositoryError as e:
            logger.error(f"Error fetching workout_log {workout_log_id}: {e.describe()}")
            raise NotFoundError("Workout log not found", e.message)

        if not workout_log:
            logger.warning(f"workout_log {workout_log_id} not found for client {client_id}")
            raise NotFoundError("Workout log not found")

        logger.info(f"Found workout_log {workout_log_id} (started_at={workout_log.get('started_at')})")
        return workout_log

    def _aggregate_sets(self, workout_log_id: str, client_id: str) -> WorkoutTotals:
        try:
            set_logs = self._workout_log_repo.get_set_logs(workout_log_id, client_id)
        except RepositoryError as e:
            logger.error(f"Error fetching workout_set_logs for {workout_log_id}: {e.describe()}")
            raise DatabaseError("Failed to fetch set logs", e.message)

        totals = WorkoutTotals.from_set_logs(set_logs)
        logger.info(
            f"Calculated totals for workout_log {workout_log_id}: "
            f"sets={totals.sets} reps={totals.reps} weight={totals.weight}"
        )
        return totals

    def _finalize(
        self,
        workout_log_id: str,
        completed_at: datetime,
        totals: WorkoutTotals,
    ) -> Dict[str, Any]:
        try:
            updated = self._workout_log_repo.finalize(
                workout_log_id,
                completed_at=completed_at,
                totals=totals,
            )
        except RepositoryError as e:
            logger.error(
                f"Error updating workout_log {workout_log_id}: code={e.code} "
                f"message={e.message} details={e.details} hint={e.hint}"
            )
            raise DatabaseError("Failed to update workout log", e.describe())

        logger.info(f"Updated workout_log {workout_log_id} (completed_at={completed_at.isoformat()})")
        return updated

    def _advance(self, client_id: str, completed_by: str) -> ProgressionResult:
        logger.info(f"Calling advance_program_progress for client {client_id}")
        try:
            progression = self._progress_repo.advance(client_id, completed_by, None)
        except RepositoryError as e:
            logger.error(f"advance_program_progress failed for client {client_id}: {e.describe()}")
            raise ProgressionError("Failed to advance program progress", e.message)

        logger.info(
            f"advance_program_progress result for client {client_id}: "
            f"status={progression.status.value} week={progression.current_week_index} "
            f"day={progression.current_day_index}"
        )
        if progression.status == ProgressionStatus.ERROR:
            raise ProgressionError(
                "Failed to advance program progress",
                progression.message,
                code=progression.error or ProgressionError.code,
            )
        return progression

    # -------------------------------------------------------------------------
    # Best-effort steps
    # -------------------------------------------------------------------------

    def _mark_session_completed(
        self,
        session_id: Optional[str],
        client_id: str,
        completed_at: datetime,
    ) -> None:
        if not session_id:
            return
        if not is_valid_uuid(session_id):
            logger.info(f"Skipping workout_session update, invalid session_id: {session_id!r}")
            return
        try:
            self._workout_log_repo.mark_session_completed(
                session_id,
                client_id,
                completed_at=completed_at,
            )
            logger.info(f"Marked workout_session {session_id} completed")
        except Exception as e:
            logger.warning(f"Failed to update workout_session {session_id} (non-blocking): {e}")

    def _sync_consistency_goals(self, client_id: str) -> None:
        goals = self._goal_repo.find_active_consistency_goals(client_id)
        for goal in goals:
            self._goal_sync.sync_workout_consistency_goal(goal["id"], client_id)

    def _check_achievements(self, client_id: str) -> None:
        for achievement_type in ACHIEVEMENT_TYPES:
            self._achievements.check_and_unlock(client_id, achievement_type)
