"""
Supabase Coach Repository Implementation.

Looks up profile roles and the ``clients`` roster linking coaches to clients.
"""
from typing import Optional
from supabase import Client
import logging

from infrastructure.db.errors import to_repository_error

logger = logging.getLogger(__name__)


class SupabaseCoachRepository:
    """Supabase implementation of CoachRepository (service role client)."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_role(self, user_id: str) -> Optional[str]:
        try:
            result = self._client.table("profiles") \
                .select("id, role") \
                .eq("id", user_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        rows = result.data or []
        if not rows:
            return None
        return rows[0].get("role") or ""

    def has_client(self, coach_id: str, client_id: str) -> bool:
        try:
            result = self._client.table("clients") \
                .select("client_id") \
                .eq("coach_id", coach_id) \
                .eq("client_id", client_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        return bool(result.data)
