from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TutorProfile(BaseModel):
    """Tutor attributes consulted by the eligibility gates."""

    tutor_id: str
    full_name: str | None = None
    taught_languages: list[str] = Field(default_factory=list)
    country: str | None = None
    state: str | None = None
    experience_level: float | int | str | None = None
    hourly_rate: float | None = None
    currency: str = "USD"

    model_config = ConfigDict(extra="ignore", frozen=True)
