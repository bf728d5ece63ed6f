"""
Workout totals value object.

Aggregates the set logs of a single workout log into the totals persisted
on ``workout_logs`` when the workout is finalized, and resolves the
workout duration.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, Field

# PostgREST trims trailing zeros from fractional seconds
_FRACTION_RE = re.compile(r"\.(\d+)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


def resolve_duration_minutes(
    duration_minutes: Optional[float],
    started_at: Optional[datetime],
    completed_at: datetime,
) -> int:
    """
    Resolve the duration of a workout in whole minutes.

    A client supplied duration (zero included) always wins. Otherwise the
    duration is derived from ``started_at``; a missing start time yields 0.
    The result is not clamped, clock skew may produce a negative value.

    Args:
        duration_minutes: Duration reported by the client, if any
        started_at: When the workout log was started
        completed_at: Completion timestamp used for the finalization

    Returns:
        Duration in minutes
    """
    if duration_minutes is not None:
        return round_half_up(duration_minutes)

    start = started_at or completed_at
    elapsed_ms = (completed_at - start).total_seconds() * 1000
    return round_half_up(elapsed_ms / 60000)


def _pad_fraction(match: "re.Match") -> str:
    # fromisoformat before 3.11 only accepts 3 or 6 digits
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO timestamp as returned by PostgREST (``Z`` suffix allowed)."""
    if not value:
        return None
    normalized = _FRACTION_RE.sub(_pad_fraction, value.replace("Z", "+00:00"), count=1)
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class WorkoutTotals(BaseModel):
    """
    Totals for one completed workout log.

    Examples:
        >>> totals = WorkoutTotals.from_set_logs([
        ...     {"weight": 100, "reps": 5},
        ...     {"weight": None, "reps": 8},
        ... ])
        >>> (totals.sets, totals.reps, totals.weight)
        (2, 13, 500.0)
    """

    sets: int = Field(default=0, description="Number of logged sets")
    reps: int = Field(default=0, description="Sum of reps across sets")
    weight: float = Field(default=0, description="Sum of weight x reps across sets")
    duration_minutes: int = Field(default=0, description="Workout duration in minutes")

    @classmethod
    def from_set_logs(
        cls,
        set_logs: Iterable[Dict[str, Any]],
        duration_minutes: int = 0,
    ) -> "WorkoutTotals":
        """Sum set logs; missing weight or reps count as 0."""
        sets = 0
        reps = 0
        weight = 0
        for set_log in set_logs:
            set_reps = set_log.get("reps") or 0
            set_weight = set_log.get("weight") or 0
            sets += 1
            reps += set_reps
            weight += set_weight * set_reps
        return cls(sets=sets, reps=reps, weight=weight, duration_minutes=duration_minutes)

    def with_duration(self, duration_minutes: int) -> "WorkoutTotals":
        return self.model_copy(update={"duration_minutes": duration_minutes})

    def to_log_columns(self) -> Dict[str, Any]:
        """Column values written to ``workout_logs`` on finalization."""
        return {
            "total_duration_minutes": self.duration_minutes,
            "total_sets_completed": self.sets,
            "total_reps_completed": self.reps,
            "total_weight_lifted": self.weight,
        }
