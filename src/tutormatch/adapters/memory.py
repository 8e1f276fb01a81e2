"""In-memory data store implementing every provider contract."""

from __future__ import annotations

from typing import Iterable

from ..schemas import JobPosting, LanguageRecord, ScheduledBlock, TutorLanguage, TutorProfile


class InMemoryStore:
    """Provider backed by plain lists, used for embedding and tests."""

    def __init__(
        self,
        *,
        languages: Iterable[LanguageRecord] = (),
        tutors: Iterable[TutorProfile] = (),
        tutor_languages: Iterable[TutorLanguage] = (),
        postings: Iterable[JobPosting] = (),
        blocks: Iterable[ScheduledBlock] = (),
    ) -> None:
        self._languages = list(languages)
        self._tutors = {tutor.tutor_id: tutor for tutor in tutors}
        self._tutor_languages = list(tutor_languages)
        self._postings = list(postings)
        self._blocks = list(blocks)

    def list_languages(self) -> list[LanguageRecord]:
        return list(self._languages)

    def get_tutor(self, tutor_id: str) -> TutorProfile:
        try:
            return self._tutors[tutor_id]
        except KeyError as exc:
            raise KeyError(f"Unknown tutor: {tutor_id!r}") from exc

    def get_tutor_languages(self, tutor_id: str) -> list[TutorLanguage]:
        return [entry for entry in self._tutor_languages if entry.tutor_id == tutor_id]

    def list_open_postings(self) -> list[JobPosting]:
        return [posting for posting in self._postings if posting.is_open]

    def list_blocks(self, tutor_id: str) -> list[ScheduledBlock]:
        return [block for block in self._blocks if block.tutor_id == tutor_id]
