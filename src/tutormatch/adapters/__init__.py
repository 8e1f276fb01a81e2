"""Data provider contracts and implementations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import JobPosting, LanguageRecord, ScheduledBlock, TutorLanguage, TutorProfile
from .jsonfile import JsonFileStore, StoreLoadError
from .memory import InMemoryStore


@runtime_checkable
class TutorProfileProvider(Protocol):
    """Source of tutor profiles and their language assignments."""

    def get_tutor(self, tutor_id: str) -> TutorProfile:
        """Return the tutor profile or raise when it cannot be fetched."""

    def get_tutor_languages(self, tutor_id: str) -> list[TutorLanguage]:
        """Return the tutor's teaching and spoken language entries."""


@runtime_checkable
class PostingProvider(Protocol):
    def list_open_postings(self) -> list[JobPosting]:
        """Return postings already filtered to open/published status."""


@runtime_checkable
class ScheduleProvider(Protocol):
    def list_blocks(self, tutor_id: str) -> list[ScheduledBlock]:
        """Return every block recorded for the tutor, whatever its status."""


@runtime_checkable
class LanguageProvider(Protocol):
    def list_languages(self) -> list[LanguageRecord]:
        """Return the language catalogue."""


__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "LanguageProvider",
    "PostingProvider",
    "ScheduleProvider",
    "StoreLoadError",
    "TutorProfileProvider",
]
