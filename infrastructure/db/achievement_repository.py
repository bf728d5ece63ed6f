"""
Supabase Achievement Repository Implementation.

Reads ``achievement_templates`` and ``user_achievements``, and counts the
rows behind each achievement metric.
"""
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List
from supabase import Client
import logging

from domain.models.workout_totals import parse_timestamp
from infrastructure.db.errors import UNIQUE_VIOLATION_CODE, to_repository_error

logger = logging.getLogger(__name__)


class SupabaseAchievementRepository:
    """Supabase implementation of AchievementRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_templates(self, achievement_type: str) -> List[Dict[str, Any]]:
        try:
            result = self._client.table("achievement_templates") \
                .select("*") \
                .eq("is_active", True) \
                .eq("achievement_type", achievement_type) \
                .order("name") \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        return result.data or []

    def get_unlocked(self, client_id: str) -> List[Dict[str, Any]]:
        try:
            result = self._client.table("user_achievements") \
                .select("id, achievement_template_id, tier, metric_value, achieved_date") \
                .eq("client_id", client_id) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        return result.data or []

    def insert_unlocked(
        self,
        client_id: str,
        template_id: str,
        tier: Optional[str],
        metric_value: float,
    ) -> Optional[Dict[str, Any]]:
        row = {
            "user_id": client_id,
            "achievement_id": template_id,
            "client_id": client_id,
            "achievement_template_id": template_id,
            "tier": tier,
            "metric_value": metric_value,
            "achieved_date": datetime.now(timezone.utc).date().isoformat(),
            "is_public": True,
        }
        try:
            result = self._client.table("user_achievements").insert(row).execute()
        except Exception as e:
            error = to_repository_error(e)
            if error.code == UNIQUE_VIOLATION_CODE:
                return None
            raise error from e
        rows = result.data or []
        return rows[0] if rows else None

    def count_workout_logs(self, client_id: str) -> int:
        return self._count("workout_logs", client_id)

    def count_completed_programs(self, client_id: str) -> int:
        return self._count("program_assignments", client_id, status="completed")

    def count_personal_records(self, client_id: str) -> int:
        return self._count("personal_records", client_id)

    def get_completion_times(self, client_id: str) -> List[datetime]:
        try:
            result = self._client.table("workout_logs") \
                .select("completed_at") \
                .eq("client_id", client_id) \
                .not_.is_("completed_at", "null") \
                .order("completed_at", desc=True) \
                .execute()
        except Exception as e:
            raise to_repository_error(e) from e
        times = []
        for row in result.data or []:
            parsed = parse_timestamp(row.get("completed_at"))
            if parsed:
                times.append(parsed)
        return times

    def _count(self, table: str, client_id: str, status: Optional[str] = None) -> int:
        try:
            query = self._client.table(table) \
                .select("id", count="exact") \
                .eq("client_id", client_id)
            if status:
                query = query.eq("status", status)
            result = query.execute()
        except Exception as e:
            raise to_repository_error(e) from e
        if result.count is not None:
            return result.count
        return len(result.data or [])
