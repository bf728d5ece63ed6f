"""
Supabase Goal Repository Implementation.

This module implements the GoalRepository protocol using Supabase as the backend.
"""
from datetime import datetime
from typing import Optional, Dict, Any, List
from supabase import Client
import logging

from infrastructure.db.errors import to_repository_error

logger = logging.getLogger(__name__)

# PostgREST filter for workout consistency goal titles
CONSISTENCY_TITLE_FILTER = "title.ilike.%Workout Consistency%,title.ilike.%workouts per week%"


class SupabaseGoalRepository:
    """Supabase implementation of GoalRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def find_active_consistency_goals(self, client_id: str) -> List[Dict[str, Any]]:
        try:
            result = self._client.table("goals") \
                .select("id") \
                .eq("client_id", client_id) \
                .eq("status", "active") \
                .or_(CONSISTENCY_TITLE_FILTER) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        return result.data or []

    def get(self, goal_id: str) -> Optional[Dict[str, Any]]:
        try:
            result = self._client.table("goals") \
                .select("id, current_value, progress_percentage, target_value, status, completed_date") \
                .eq("id", goal_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        rows = result.data or []
        return rows[0] if rows else None

    def update_progress(self, goal_id: str, fields: Dict[str, Any]) -> None:
        try:
            self._client.table("goals") \
                .update(fields) \
                .eq("id", goal_id) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e

    def count_completed_sessions(
        self,
        client_id: str,
        start: datetime,
        end: datetime,
    ) -> int:
        try:
            result = self._client.table("workout_sessions") \
                .select("id", count="exact") \
                .eq("client_id", client_id) \
                .eq("status", "completed") \
                .gte("completed_at", start.isoformat()) \
                .lte("completed_at", end.isoformat()) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        if result.count is not None:
            return result.count
        return len(result.data or [])
