"""Language catalogue and tutor language assignment schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LevelCEFR = Literal["A1", "A2", "B1", "B2", "C1", "C2"]
LanguageKind = Literal["teaching", "spoken"]


class LanguageRecord(BaseModel):
    """Canonical language entry (ISO 639-1 style code)."""

    code: str
    name: str
    localized_names: dict[str, str] = Field(default_factory=dict)
    is_active: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("code")
    @classmethod
    def _normalize_code(cls, value: str) -> str:
        code = value.strip().lower()
        if not code:
            raise ValueError("language code must not be empty")
        return code

    def names(self) -> list[str]:
        """Return the default name followed by every localized name."""
        names = [self.name]
        names.extend(name for name in self.localized_names.values() if name)
        return names


class TutorLanguage(BaseModel):
    """Language assignment for a tutor, flagged teaching or spoken."""

    tutor_id: str
    language: str
    kind: LanguageKind = "teaching"
    level: LevelCEFR | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)
