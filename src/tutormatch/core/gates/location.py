"""Location gate for in-person and hybrid postings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import JobPosting, TutorProfile
from ..eligibility import GateResult


@dataclass
class LocationGateConfig:
    """Configuration for location matching."""

    remote_modalities: tuple[str, ...] = ("virtual",)


class LocationGate:
    """Require the tutor's country (and state, when given) to match the posting."""

    gate = "location"

    def __init__(self, *, config: LocationGateConfig | None = None) -> None:
        self._config = config or LocationGateConfig()

    def check(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> GateResult:
        if posting.modality in self._config.remote_modalities:
            return self._result(True, "skipped", expected=posting.modality)

        if not posting.required_country:
            return self._result(True, "not_specified")

        expected = {"country": posting.required_country, "state": posting.required_state}
        actual = {"country": tutor.country, "state": tutor.state}

        if tutor.country != posting.required_country:
            return self._result(False, "country_mismatch", expected=expected, actual=actual)

        if posting.required_state and tutor.state != posting.required_state:
            return self._result(False, "state_mismatch", expected=expected, actual=actual)

        return self._result(True, "ok", expected=expected, actual=actual)

    def _result(self, passed: bool, status: str, *, expected=None, actual=None) -> GateResult:
        return GateResult(
            gate=self.gate,
            passed=passed,
            status=status,
            expected=expected,
            actual=actual,
        )
