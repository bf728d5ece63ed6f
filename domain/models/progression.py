"""
Program progression result.

Outcome of the ``advance_program_progress`` stored procedure, which
atomically moves a client's cursor through their assigned program.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ProgressionStatus(str, Enum):
    """Status discriminant returned by the progression procedure."""

    ADVANCED = "advanced"
    ALREADY_COMPLETED = "already_completed"
    COMPLETED = "completed"
    ERROR = "error"


class ProgressionResult(BaseModel):
    """
    Parsed response of ``advance_program_progress``.

    Only the fields this service interprets are typed; everything else the
    procedure returns is kept in ``raw`` for callers that echo it.
    """

    status: ProgressionStatus = ProgressionStatus.ADVANCED
    message: Optional[str] = None
    error: Optional[str] = None
    current_week_index: Optional[int] = None
    current_day_index: Optional[int] = None
    is_completed: Optional[bool] = None
    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_rpc(cls, payload: Optional[Dict[str, Any]]) -> "ProgressionResult":
        """
        Build a result from the procedure's JSON payload.

        An empty payload or an unrecognized status falls through to
        ``advanced``, the procedure's default path.
        """
        payload = payload or {}
        try:
            status = ProgressionStatus(payload.get("status"))
        except ValueError:
            status = ProgressionStatus.ADVANCED
        return cls(
            status=status,
            message=payload.get("message"),
            error=payload.get("error"),
            current_week_index=payload.get("current_week_index"),
            current_day_index=payload.get("current_day_index"),
            is_completed=payload.get("is_completed"),
            raw=dict(payload),
        )

    @property
    def is_conflict(self) -> bool:
        """True when nothing advanced because the day or program was already done."""
        return self.status in (ProgressionStatus.ALREADY_COMPLETED, ProgressionStatus.COMPLETED)
