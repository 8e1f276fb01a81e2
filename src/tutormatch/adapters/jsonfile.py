"""JSON document store used by the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from ..schemas import JobPosting, LanguageRecord, ScheduledBlock, TutorLanguage, TutorProfile
from .memory import InMemoryStore

_COLLECTIONS: dict[str, type[BaseModel]] = {
    "languages": LanguageRecord,
    "tutors": TutorProfile,
    "tutor_languages": TutorLanguage,
    "postings": JobPosting,
    "blocks": ScheduledBlock,
}


class StoreLoadError(ValueError):
    """Raised when the data document contains invalid records."""

    def __init__(self, errors: list[str], partial: InMemoryStore | None = None):
        super().__init__("Data store loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Data store loading failed: {self.errors}"


class JsonFileStore(InMemoryStore):
    """Load every collection from a single JSON document.

    The document is an object with optional ``languages``, ``tutors``,
    ``tutor_languages``, ``postings`` and ``blocks`` arrays. Invalid records
    are collected and reported together through :class:`StoreLoadError`.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        collections, errors = self._read(self.path)
        super().__init__(**collections)
        if errors:
            raise StoreLoadError(errors, InMemoryStore(**collections))

    @staticmethod
    def _read(path: Path) -> tuple[dict[str, list[Any]], list[str]]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise StoreLoadError([f"invalid JSON ({exc})"]) from exc
        if not isinstance(data, dict):
            raise StoreLoadError(["document must be a JSON object"])

        collections: dict[str, list[Any]] = {}
        errors: list[str] = []
        for name, model in _COLLECTIONS.items():
            raw_items = data.get(name) or []
            if not isinstance(raw_items, list):
                errors.append(f"{name}: expected a list")
                collections[name] = []
                continue
            parsed: list[Any] = []
            for idx, item in enumerate(raw_items):
                try:
                    parsed.append(model.model_validate(item))
                except ValidationError as exc:
                    errors.append(f"{name}[{idx}]: {exc.error_count()} validation error(s): {_summarize(exc)}")
            collections[name] = parsed
        return collections, errors


def _summarize(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
