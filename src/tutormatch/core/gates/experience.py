"""Minimum experience gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import JobPosting, TutorProfile
from ..eligibility import GateResult
from ..experience import compare_experience, parse_experience


@dataclass
class ExperienceGateConfig:
    """Configuration for experience comparison.

    ``allow_representation_mismatch`` keeps the historical behaviour of
    passing when one side is numeric and the other categorical. Set it to
    False to reject those pairs instead.
    """

    allow_representation_mismatch: bool = True


class ExperienceGate:
    gate = "experience"

    def __init__(self, *, config: ExperienceGateConfig | None = None) -> None:
        self._config = config or ExperienceGateConfig()

    def check(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> GateResult:
        required = parse_experience(posting.required_experience_level)
        if required is None:
            return GateResult(gate=self.gate, passed=True, status="not_specified")

        actual = parse_experience(tutor.experience_level)
        if actual is None:
            return GateResult(
                gate=self.gate,
                passed=True,
                status="insufficient_data",
                expected=required.describe(),
            )

        comparison = compare_experience(required, actual)
        if comparison == "unconstrained":
            return GateResult(
                gate=self.gate,
                passed=self._config.allow_representation_mismatch,
                status="representation_mismatch",
                expected=required.describe(),
                actual=actual.describe(),
            )
        return GateResult(
            gate=self.gate,
            passed=comparison == "met",
            status="ok" if comparison == "met" else "below_minimum",
            expected=required.describe(),
            actual=actual.describe(),
        )
