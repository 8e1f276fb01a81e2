"""Language gates: the posting's target language and additional requirements."""

from __future__ import annotations

from typing import Sequence

from ...schemas import JobPosting, TutorProfile
from ..eligibility import GateResult
from ..languages import LanguageResolver


class TargetLanguageGate:
    """Tutor must teach the language the posting is for."""

    gate = "target_language"

    def __init__(self, resolver: LanguageResolver) -> None:
        self._resolver = resolver

    def check(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> GateResult:
        target = (posting.target_language or "").strip()
        if not target:
            return GateResult(gate=self.gate, passed=True, status="not_specified")

        matched = _first_match(self._resolver, target, taught_languages)
        if matched is None:
            return GateResult(
                gate=self.gate,
                passed=False,
                status="not_taught",
                expected=target,
                actual=list(taught_languages),
            )
        return GateResult(
            gate=self.gate,
            passed=True,
            status="ok",
            expected=target,
            actual=matched,
        )


class RequiredLanguagesGate:
    """Every additionally required language must be among those taught."""

    gate = "required_languages"

    def __init__(self, resolver: LanguageResolver) -> None:
        self._resolver = resolver

    def check(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> GateResult:
        required = [lang.strip() for lang in posting.required_languages if lang and lang.strip()]
        if not required:
            return GateResult(gate=self.gate, passed=True, status="not_specified")

        missing = [
            lang
            for lang in required
            if _first_match(self._resolver, lang, taught_languages) is None
        ]
        if missing:
            return GateResult(
                gate=self.gate,
                passed=False,
                status="missing_languages",
                expected=missing,
                actual=list(taught_languages),
            )
        return GateResult(
            gate=self.gate,
            passed=True,
            status="ok",
            expected=required,
            actual=list(taught_languages),
        )


def _first_match(
    resolver: LanguageResolver,
    wanted: str,
    taught_languages: Sequence[str],
) -> str | None:
    for taught in taught_languages:
        if resolver.same_language(taught, wanted):
            return taught
    return None
