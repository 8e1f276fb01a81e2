from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BlockStatus = Literal["scheduled", "confirmed", "ongoing", "completed", "cancelled"]

ACTIVE_STATUSES: frozenset[str] = frozenset({"scheduled", "ongoing"})


class ScheduledBlock(BaseModel):
    """Committed class time for a tutor."""

    block_id: str
    tutor_id: str
    class_date: date
    start_time: str
    duration_minutes: int = Field(gt=0)
    status: BlockStatus = "scheduled"
    posting_id: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES
