"""Experience level representations.

Experience arrives either as years (a number) or as one of a small ordered
set of categories. The two are never compared with each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

ORDINAL_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced", "expert")

Comparison = Literal["met", "unmet", "unconstrained"]


@dataclass(frozen=True, slots=True)
class Numeric:
    years: float

    def describe(self) -> str:
        return f"{self.years:g} years"


@dataclass(frozen=True, slots=True)
class Ordinal:
    rank: int

    @property
    def label(self) -> str:
        return ORDINAL_LEVELS[self.rank]

    def describe(self) -> str:
        return self.label


ExperienceLevel = Union[Numeric, Ordinal]


def parse_experience(value: Any) -> ExperienceLevel | None:
    """Parse a raw experience value, returning None when it is absent or unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (Numeric, Ordinal)):
        return value
    if isinstance(value, (int, float)):
        return Numeric(float(value))
    if isinstance(value, str):
        text = value.strip().lower()
        if not text:
            return None
        if text in ORDINAL_LEVELS:
            return Ordinal(ORDINAL_LEVELS.index(text))
        try:
            return Numeric(float(text))
        except ValueError:
            return None
    return None


def compare_experience(required: ExperienceLevel, actual: ExperienceLevel) -> Comparison:
    """Compare same-tagged levels; mixed representations are unconstrained."""
    if isinstance(required, Numeric) and isinstance(actual, Numeric):
        return "met" if actual.years >= required.years else "unmet"
    if isinstance(required, Ordinal) and isinstance(actual, Ordinal):
        return "met" if actual.rank >= required.rank else "unmet"
    return "unconstrained"


__all__ = [
    "Comparison",
    "ExperienceLevel",
    "Numeric",
    "ORDINAL_LEVELS",
    "Ordinal",
    "compare_experience",
    "parse_experience",
]
