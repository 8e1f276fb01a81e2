"""Matching pipeline assembly and execution."""

from __future__ import annotations

import json
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence, TypeVar

import pendulum
import structlog

from .adapters import PostingProvider, ScheduleProvider, TutorProfileProvider
from .core import EligibilityEvaluator, GateResult, Rejected, ScheduleConflictDetector
from .core.eligibility import Decision
from . import __version__
from .schemas import JobPosting, TutorLanguage, TutorProfile

T = TypeVar("T")


class FetchError(RuntimeError):
    """Raised when a data provider cannot return what the pipeline needs."""

    def __init__(self, resource: str, tutor_id: str | None = None):
        detail = f" for tutor {tutor_id!r}" if tutor_id else ""
        super().__init__(f"Failed to fetch {resource}{detail}")
        self.resource = resource
        self.tutor_id = tutor_id


class MatchingCancelled(RuntimeError):
    """Raised when a caller abandons a matching run."""


class CancellationToken:
    """Cooperative cancellation signal shared with a running pipeline."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, stage: str) -> None:
        if self._event.is_set():
            raise MatchingCancelled(f"Matching cancelled during {stage}")


@dataclass(frozen=True, slots=True)
class PostingDecision:
    posting: JobPosting
    decision: Decision

    @property
    def eligible(self) -> bool:
        return self.decision.eligible


@dataclass(slots=True)
class MatchReport:
    """Per-posting decisions for one tutor, in candidate order."""

    tutor_id: str
    taught_languages: tuple[str, ...]
    decisions: list[PostingDecision] = field(default_factory=list)

    @property
    def compatible(self) -> list[JobPosting]:
        return [item.posting for item in self.decisions if item.eligible]

    @property
    def rejected(self) -> list[PostingDecision]:
        return [item for item in self.decisions if not item.eligible]


def taught_language_set(
    profile: TutorProfile,
    assignments: Iterable[TutorLanguage],
) -> tuple[str, ...]:
    """Union of the profile's taught languages and teaching assignments.

    Spoken-only assignments are excluded. Order is preserved and duplicates
    (compared case-insensitively) are dropped.
    """
    seen: set[str] = set()
    ordered: list[str] = []
    candidates = list(profile.taught_languages)
    candidates.extend(
        entry.language
        for entry in assignments
        if entry.kind == "teaching" and entry.tutor_id == profile.tutor_id
    )
    for language in candidates:
        key = language.strip().lower()
        if key and key not in seen:
            seen.add(key)
            ordered.append(language.strip())
    return tuple(ordered)


class MatchingPipeline:
    """Find the open postings a tutor is eligible for."""

    def __init__(
        self,
        *,
        evaluator: EligibilityEvaluator,
        tutors: TutorProfileProvider,
        postings: PostingProvider,
        schedule: ScheduleProvider | None = None,
        detector: ScheduleConflictDetector | None = None,
        max_workers: int | None = 1,
    ) -> None:
        self._evaluator = evaluator
        self._tutors = tutors
        self._postings = postings
        self._schedule = schedule
        self._detector = detector or ScheduleConflictDetector()
        self._max_workers = max(1, max_workers or 1)
        self._logger = structlog.get_logger(__name__)

    def find_compatible_postings(
        self,
        tutor_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> list[JobPosting]:
        return self.evaluate_postings(tutor_id, cancellation=cancellation).compatible

    def evaluate_postings(
        self,
        tutor_id: str,
        *,
        cancellation: CancellationToken | None = None,
    ) -> MatchReport:
        token = cancellation or CancellationToken()
        token.raise_if_cancelled("fetch")

        profile, assignments, candidates = self._fetch_inputs(tutor_id)
        token.raise_if_cancelled("fetch")

        taught = taught_language_set(profile, assignments)
        open_candidates = []
        for posting in candidates:
            if posting.is_open:
                open_candidates.append(posting)
            else:
                self._logger.debug(
                    "matching.posting_skipped",
                    posting_id=posting.posting_id,
                    status=posting.status,
                )

        decisions = self._evaluate_all(open_candidates, profile, taught, token)
        report = MatchReport(tutor_id=tutor_id, taught_languages=taught, decisions=decisions)

        for item in report.rejected:
            self._logger.debug(
                "matching.rejected",
                tutor_id=tutor_id,
                posting_id=item.posting.posting_id,
                gate=item.decision.gate,
                reason=item.decision.reason,
            )
        self._logger.info(
            "matching.result",
            tutor_id=tutor_id,
            candidates=len(open_candidates),
            compatible=len(report.compatible),
        )
        return report

    def check_booking(
        self,
        tutor_id: str,
        proposed_date: date | str,
        proposed_start: str,
        proposed_duration_minutes: int,
        exclude_block_id: str | None = None,
    ) -> bool:
        """Return True when the proposed class would clash with the tutor's schedule."""
        if self._schedule is None:
            raise RuntimeError("No schedule provider configured")
        blocks = self._fetch("schedule", tutor_id, lambda: self._schedule.list_blocks(tutor_id))
        conflict = self._detector.has_conflict(
            blocks,
            tutor_id,
            proposed_date,
            proposed_start,
            proposed_duration_minutes,
            exclude_block_id,
        )
        self._logger.info(
            "schedule.checked",
            tutor_id=tutor_id,
            proposed_date=str(proposed_date),
            proposed_start=proposed_start,
            duration_minutes=proposed_duration_minutes,
            conflict=conflict,
        )
        return conflict

    def _fetch_inputs(
        self,
        tutor_id: str,
    ) -> tuple[TutorProfile, list[TutorLanguage], list[JobPosting]]:
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="tutormatch-fetch") as pool:
            profile_future = pool.submit(self._tutors.get_tutor, tutor_id)
            languages_future = pool.submit(self._tutors.get_tutor_languages, tutor_id)
            postings_future = pool.submit(self._postings.list_open_postings)

            profile = self._fetch("tutor_profile", tutor_id, profile_future.result)
            assignments = self._fetch("tutor_languages", tutor_id, languages_future.result)
            candidates = self._fetch("postings", tutor_id, postings_future.result)
        return profile, list(assignments), list(candidates)

    def _fetch(self, resource: str, tutor_id: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except Exception as exc:  # noqa: BLE001
            self._logger.error(
                "matching.fetch_failed",
                resource=resource,
                tutor_id=tutor_id,
                error=str(exc),
            )
            raise FetchError(resource, tutor_id) from exc

    def _evaluate_all(
        self,
        postings: Sequence[JobPosting],
        profile: TutorProfile,
        taught: tuple[str, ...],
        token: CancellationToken,
    ) -> list[PostingDecision]:
        if self._max_workers == 1 or len(postings) < 2:
            decisions = []
            for posting in postings:
                token.raise_if_cancelled("evaluation")
                decisions.append(self._evaluate_one(posting, profile, taught))
            return decisions

        def task(posting: JobPosting) -> PostingDecision:
            token.raise_if_cancelled("evaluation")
            return self._evaluate_one(posting, profile, taught)

        with ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="tutormatch-eval",
        ) as pool:
            futures: list[Future[PostingDecision]] = [pool.submit(task, posting) for posting in postings]
            try:
                return [future.result() for future in futures]
            except MatchingCancelled:
                for future in futures:
                    future.cancel()
                raise

    def _evaluate_one(
        self,
        posting: JobPosting,
        profile: TutorProfile,
        taught: tuple[str, ...],
    ) -> PostingDecision:
        try:
            decision = self._evaluator.evaluate(posting, profile, taught)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "matching.evaluation_failed",
                tutor_id=profile.tutor_id,
                posting_id=posting.posting_id,
                error=str(exc),
                exc_info=True,
            )
            decision = Rejected(
                posting_id=posting.posting_id,
                tutor_id=profile.tutor_id,
                failed=GateResult(
                    gate="evaluation_error",
                    passed=False,
                    status="error",
                    actual=type(exc).__name__,
                ),
            )
        return PostingDecision(posting=posting, decision=decision)


def serialize_report(report: MatchReport, *, explain: bool = False) -> list[dict[str, Any]]:
    """Render a report as JSON-compatible dictionaries."""
    items = report.decisions if explain else [item for item in report.decisions if item.eligible]
    rendered: list[dict[str, Any]] = []
    for item in items:
        entry: dict[str, Any] = {"posting": item.posting.model_dump(mode="json")}
        if explain:
            gates = item.decision.gates
            if not gates and isinstance(item.decision, Rejected):
                gates = (item.decision.failed,)
            entry["eligible"] = item.eligible
            entry["reason"] = item.decision.reason
            entry["gates"] = [
                {
                    "gate": result.gate,
                    "passed": result.passed,
                    "status": result.status,
                    "expected": result.expected,
                    "actual": result.actual,
                }
                for result in gates
            ]
        rendered.append(entry)
    return rendered


class OutputWriter:
    """Persist matching results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


def build_output(report: MatchReport, *, explain: bool = False) -> dict[str, Any]:
    """Wrap serialized results with run metadata."""
    results = serialize_report(report, explain=explain)
    return {
        "metadata": {
            "tutor_id": report.tutor_id,
            "taught_languages": list(report.taught_languages),
            "candidate_count": len(report.decisions),
            "compatible_count": len(report.compatible),
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        },
        "results": results,
    }
