"""
Program Progress Repository Interface (Port).

The actual advancement (week/day rollover, idempotency, locking) happens
inside the ``advance_program_progress`` stored procedure. This port is the
only way the application talks to it.
"""
from typing import Protocol, Optional

from domain.models.progression import ProgressionResult


class ProgramProgressRepository(Protocol):
    """Abstract interface for advancing a client's program cursor."""

    def advance(
        self,
        client_id: str,
        completed_by: str,
        notes: Optional[str] = None,
    ) -> ProgressionResult:
        """
        Advance the client's program by one day.

        Implementations must run as the calling user so the procedure's
        ``completed_by`` check against the session identity passes.

        Args:
            client_id: Client whose program advances
            completed_by: User completing the day (client or coach)
            notes: Optional completion notes

        Returns:
            ProgressionResult describing the outcome

        Raises:
            RepositoryError: If the procedure call itself failed
        """
        ...
