"""Hourly rate gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import JobPosting, TutorProfile
from ..eligibility import GateResult


@dataclass
class RateGateConfig:
    """Configuration for rate matching."""

    tolerance_ratio: float = 0.0


class RateGate:
    """Tutor's hourly rate must not exceed the posting's maximum."""

    gate = "rate"

    def __init__(self, *, config: RateGateConfig | None = None) -> None:
        self._config = config or RateGateConfig()

    def check(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> GateResult:
        if posting.max_hourly_rate is None:
            return GateResult(gate=self.gate, passed=True, status="not_specified")
        if tutor.hourly_rate is None:
            return GateResult(
                gate=self.gate,
                passed=True,
                status="insufficient_data",
                expected=posting.max_hourly_rate,
            )

        ceiling = posting.max_hourly_rate * (1 + self._config.tolerance_ratio)
        passes = tutor.hourly_rate <= ceiling
        return GateResult(
            gate=self.gate,
            passed=passes,
            status="ok" if passes else "above_maximum",
            expected={"max_hourly_rate": posting.max_hourly_rate, "currency": posting.currency},
            actual={"hourly_rate": tutor.hourly_rate, "currency": tutor.currency},
        )
