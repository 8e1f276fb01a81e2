"""Gate implementations for the eligibility evaluator."""

from __future__ import annotations

from typing import Any, Sequence

from ..languages import LanguageResolver
from .experience import ExperienceGate, ExperienceGateConfig
from .languages import RequiredLanguagesGate, TargetLanguageGate
from .location import LocationGate, LocationGateConfig
from .rate import RateGate, RateGateConfig

DEFAULT_GATE_ORDER: tuple[str, ...] = (
    "location",
    "target_language",
    "required_languages",
    "experience",
    "rate",
)


def build_gates(
    resolver: LanguageResolver,
    *,
    enabled: Sequence[str] | None = None,
    location: LocationGateConfig | None = None,
    experience: ExperienceGateConfig | None = None,
    rate: RateGateConfig | None = None,
) -> list[Any]:
    """Instantiate gates in evaluation order, keeping only ``enabled`` ones."""
    factories = {
        "location": lambda: LocationGate(config=location),
        "target_language": lambda: TargetLanguageGate(resolver),
        "required_languages": lambda: RequiredLanguagesGate(resolver),
        "experience": lambda: ExperienceGate(config=experience),
        "rate": lambda: RateGate(config=rate),
    }
    selected = set(DEFAULT_GATE_ORDER if enabled is None else enabled)
    unknown = selected - set(factories)
    if unknown:
        raise ValueError(f"Unknown gates: {sorted(unknown)}")
    return [factories[name]() for name in DEFAULT_GATE_ORDER if name in selected]


__all__ = [
    "DEFAULT_GATE_ORDER",
    "ExperienceGate",
    "ExperienceGateConfig",
    "LocationGate",
    "LocationGateConfig",
    "RateGate",
    "RateGateConfig",
    "RequiredLanguagesGate",
    "TargetLanguageGate",
    "build_gates",
]
