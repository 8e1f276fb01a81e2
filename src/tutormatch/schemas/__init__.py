"""Pydantic schema definitions for the records exchanged with data providers."""

from __future__ import annotations

from .language import LanguageRecord, LevelCEFR, TutorLanguage
from .posting import OPEN_STATUSES, JobPosting, Modality
from .schedule import ACTIVE_STATUSES, ScheduledBlock
from .tutor import TutorProfile

__all__ = [
    "ACTIVE_STATUSES",
    "OPEN_STATUSES",
    "JobPosting",
    "LanguageRecord",
    "LevelCEFR",
    "Modality",
    "ScheduledBlock",
    "TutorLanguage",
    "TutorProfile",
]
