"""Eligibility evaluation of a tutor against a job posting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Union

from ..schemas import JobPosting, TutorProfile


@dataclass(frozen=True, slots=True)
class GateResult:
    """Outcome of a single gate, with the values it compared."""

    gate: str
    passed: bool
    status: str
    expected: Any = None
    actual: Any = None

    @property
    def skipped(self) -> bool:
        return self.status in ("skipped", "not_specified")

    def describe(self) -> str:
        verdict = "passed" if self.passed else "failed"
        return f"{self.gate} gate {verdict} ({self.status}): expected {self.expected!r}, actual {self.actual!r}"


@dataclass(frozen=True, slots=True)
class Eligible:
    posting_id: str
    tutor_id: str
    gates: tuple[GateResult, ...] = ()

    eligible = True

    @property
    def reason(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Rejected:
    posting_id: str
    tutor_id: str
    failed: GateResult
    gates: tuple[GateResult, ...] = field(default=())

    eligible = False

    @property
    def gate(self) -> str:
        return self.failed.gate

    @property
    def reason(self) -> str:
        return self.failed.describe()


Decision = Union[Eligible, Rejected]


class EligibilityEvaluator:
    """Run the gate sequence in order; the first failing gate rejects."""

    def __init__(self, gates: Iterable[Any]) -> None:
        self._gates = list(gates)

    @property
    def gate_names(self) -> list[str]:
        return [gate.gate for gate in self._gates]

    def evaluate(
        self,
        posting: JobPosting,
        tutor: TutorProfile,
        taught_languages: Sequence[str],
    ) -> Decision:
        taught = tuple(taught_languages)
        results: list[GateResult] = []
        for gate in self._gates:
            result = gate.check(posting, tutor, taught)
            results.append(result)
            if not result.passed:
                return Rejected(
                    posting_id=posting.posting_id,
                    tutor_id=tutor.tutor_id,
                    failed=result,
                    gates=tuple(results),
                )
        return Eligible(
            posting_id=posting.posting_id,
            tutor_id=tutor.tutor_id,
            gates=tuple(results),
        )


__all__ = [
    "Decision",
    "EligibilityEvaluator",
    "Eligible",
    "GateResult",
    "Rejected",
]
