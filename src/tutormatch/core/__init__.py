"""Core matching engine components."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..schemas import JobPosting, TutorProfile

from .eligibility import Decision, EligibilityEvaluator, Eligible, GateResult, Rejected
from .experience import Numeric, Ordinal, compare_experience, parse_experience
from .gates import DEFAULT_GATE_ORDER, build_gates
from .languages import NOT_FOUND, LanguageResolver, LanguageResolverConfig
from .schedule import ScheduleConflictDetector, find_conflicts, has_conflict


@runtime_checkable
class Gate(Protocol):
    """Single eligibility check applied by the evaluator."""

    gate: str

    def check(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> GateResult:
        """Return the gate outcome for the tutor under the given posting."""


__all__ = [
    "DEFAULT_GATE_ORDER",
    "Decision",
    "EligibilityEvaluator",
    "Eligible",
    "Gate",
    "GateResult",
    "LanguageResolver",
    "LanguageResolverConfig",
    "NOT_FOUND",
    "Numeric",
    "Ordinal",
    "Rejected",
    "ScheduleConflictDetector",
    "build_gates",
    "compare_experience",
    "find_conflicts",
    "has_conflict",
    "parse_experience",
]
