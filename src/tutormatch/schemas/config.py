"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.gates import DEFAULT_GATE_ORDER
from .posting import Modality


class ResolverSettings(BaseModel):
    fuzzy_threshold: float | None = None
    min_containment_length: int | None = None

    model_config = ConfigDict(extra="forbid")


class LocationGateSettings(BaseModel):
    remote_modalities: list[Modality] | None = None

    model_config = ConfigDict(extra="forbid")


class ExperienceGateSettings(BaseModel):
    allow_representation_mismatch: bool | None = None

    model_config = ConfigDict(extra="forbid")


class RateGateSettings(BaseModel):
    tolerance_ratio: float | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class GateSettings(BaseModel):
    enabled: list[str] | None = None
    location: LocationGateSettings | None = None
    experience: ExperienceGateSettings | None = None
    rate: RateGateSettings | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("enabled")
    @classmethod
    def _known_gates(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        unknown = sorted(set(value) - set(DEFAULT_GATE_ORDER))
        if unknown:
            raise ValueError(f"Unknown gates: {unknown}; expected any of {list(DEFAULT_GATE_ORDER)}")
        return value


class PipelineSettings(BaseModel):
    max_workers: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    gates: GateSettings = Field(default_factory=GateSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section in ("resolver", "gates", "pipeline"):
            dumped = getattr(self, section).model_dump(exclude_none=True)
            if dumped:
                settings[section] = dumped
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValueError("Config must be a mapping")
    return AppConfig.model_validate(raw)
