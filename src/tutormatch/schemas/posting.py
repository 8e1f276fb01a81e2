from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Modality = Literal["virtual", "in_person", "hybrid"]
PostingStatus = Literal["draft", "published", "open", "assigned", "closed", "cancelled"]

OPEN_STATUSES: frozenset[str] = frozenset({"published", "open"})

_MODALITY_ALIASES: dict[str, str] = {
    "virtual": "virtual",
    "online": "virtual",
    "in_person": "in_person",
    "in-person": "in_person",
    "presencial": "in_person",
    "hybrid": "hybrid",
    "hibrida": "hybrid",
    "híbrida": "hybrid",
}


class JobPosting(BaseModel):
    """Teaching job requirements relevant to tutor matching."""

    posting_id: str
    title: str | None = None
    status: PostingStatus = "published"
    target_language: str | None = None
    required_languages: list[str] = Field(default_factory=list)
    required_experience_level: float | int | str | None = None
    max_hourly_rate: float | None = None
    currency: str = "USD"
    required_country: str | None = None
    required_state: str | None = None
    modality: Modality = "virtual"
    class_date: date | None = None
    start_time: str | None = None
    total_duration_minutes: int | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("modality", mode="before")
    @classmethod
    def _normalize_modality(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _MODALITY_ALIASES.get(value.strip().lower(), value)
        return value

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES
