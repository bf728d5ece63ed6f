"""
Supabase Program Progress Repository Implementation.

Calls the ``advance_program_progress`` stored procedure, which finds the
client's active assignment, records the completed day idempotently
(INSERT ... ON CONFLICT DO NOTHING) and moves the week/day cursor inside a
single transaction.
"""
from typing import Optional, Dict, Any
from supabase import Client
import logging

from domain.models.progression import ProgressionResult
from infrastructure.db.errors import to_repository_error

logger = logging.getLogger(__name__)

ADVANCE_PROCEDURE = "advance_program_progress"


class SupabaseProgramProgressRepository:
    """
    Supabase implementation of ProgramProgressRepository.

    Must be constructed with the user-scoped client (anon key + caller's
    access token): the procedure checks ``p_completed_by`` against
    ``auth.uid()`` and relies on row-level security.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: User-scoped Supabase client instance (injected)
        """
        self._client = client

    def advance(
        self,
        client_id: str,
        completed_by: str,
        notes: Optional[str] = None,
    ) -> ProgressionResult:
        """Invoke the progression procedure and parse its response."""
        try:
            response = self._client.rpc(
                ADVANCE_PROCEDURE,
                {
                    "p_client_id": client_id,
                    "p_completed_by": completed_by,
                    "p_notes": notes,
                },
            ).execute()
        except Exception as e:
            raise to_repository_error(e) from e

        payload: Any = response.data
        # Set-returning wrappers come back as a one-element list
        if isinstance(payload, list):
            payload = payload[0] if payload else None
        if payload is not None and not isinstance(payload, dict):
            logger.warning(f"Unexpected {ADVANCE_PROCEDURE} payload type: {type(payload)}")
            payload = None

        return ProgressionResult.from_rpc(payload)
