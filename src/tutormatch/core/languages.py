"""Language identifier resolution.

Source data names languages inconsistently: ISO codes in some records,
English or Spanish display names in others, and the occasional typo. Every
language comparison in the engine goes through :class:`LanguageResolver` so
the forgiving lookup rules live in one place.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, Union

from rapidfuzz import fuzz

from ..schemas import LanguageRecord


class _NotFound:
    """Marker returned when an identifier does not resolve."""

    _instance: "_NotFound | None" = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()

Resolution = Union[LanguageRecord, _NotFound]


@dataclass
class LanguageResolverConfig:
    """Tuning knobs for the fuzzy lookup tiers."""

    fuzzy_threshold: float = 85.0
    min_containment_length: int = 3


class LanguageResolver:
    """Resolve free-form language identifiers to catalogue records."""

    def __init__(
        self,
        records: Iterable[LanguageRecord],
        *,
        config: LanguageResolverConfig | None = None,
    ) -> None:
        self._config = config or LanguageResolverConfig()
        self._records: tuple[LanguageRecord, ...] = tuple(records)
        self._by_code: dict[str, LanguageRecord] = {}
        self._by_name: dict[str, LanguageRecord] = {}
        for record in self._records:
            self._by_code.setdefault(record.code, record)
            for name in record.names():
                self._by_name.setdefault(_normalize(name), record)

    @property
    def records(self) -> tuple[LanguageRecord, ...]:
        return self._records

    def resolve(self, identifier: str | None) -> Resolution:
        key = _normalize(identifier)
        if not key:
            return NOT_FOUND

        record = self._by_code.get(key) or self._by_name.get(key)
        if record is not None:
            return record

        record = self._containment_match(key)
        if record is not None:
            return record

        return self._similarity_match(key) or NOT_FOUND

    def same_language(self, left: str | None, right: str | None) -> bool:
        """Return True when both identifiers denote the same language."""
        if left is None or right is None:
            return False
        left_key = _normalize(left)
        right_key = _normalize(right)
        if left.lower() == right.lower() or left_key == right_key:
            return True
        if not left_key or not right_key:
            return False

        left_record = self.resolve(left_key)
        right_record = self.resolve(right_key)

        if left_record and right_record:
            return left_record.code == right_record.code
        if left_record:
            return right_key in self.names_for(left_record)
        if right_record:
            return left_key in self.names_for(right_record)
        return False

    @staticmethod
    def names_for(record: LanguageRecord) -> set[str]:
        """Every normalized identifier that denotes ``record``."""
        return {record.code, *(_normalize(name) for name in record.names())}

    def localized_name(self, identifier: str, locale: str | None = None) -> str:
        record = self.resolve(identifier)
        if not record:
            return identifier
        if locale:
            localized = record.localized_names.get(locale.lower())
            if localized:
                return localized
        return record.name

    def _containment_match(self, key: str) -> LanguageRecord | None:
        if len(key) < self._config.min_containment_length:
            return None

        prefix_hits: list[tuple[int, int, LanguageRecord]] = []
        substring_hits: list[tuple[int, int, LanguageRecord]] = []
        for order, (name, record) in enumerate(self._by_name.items()):
            if name.startswith(key):
                prefix_hits.append((len(name), order, record))
            elif _at_word_start(key, name) or (
                len(name) >= self._config.min_containment_length and _at_word_start(name, key)
            ):
                substring_hits.append((len(name), order, record))

        # shortest name wins, catalogue order breaks ties
        for hits in (prefix_hits, substring_hits):
            if hits:
                return min(hits, key=lambda item: (item[0], item[1]))[2]
        return None

    def _similarity_match(self, key: str) -> LanguageRecord | None:
        best_score = 0.0
        best_record: LanguageRecord | None = None
        for name, record in self._by_name.items():
            score = fuzz.ratio(key, name)
            if score > best_score:
                best_score = score
                best_record = record
        if best_score >= self._config.fuzzy_threshold:
            return best_record
        return None


def _normalize(identifier: str | None) -> str:
    """Lower-case and strip diacritics so ``Inglés`` and ``ingles`` compare equal."""
    if identifier is None:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(identifier).strip().lower())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _at_word_start(needle: str, haystack: str) -> bool:
    return re.search(r"(?<!\w)" + re.escape(needle), haystack) is not None


__all__ = [
    "LanguageResolver",
    "LanguageResolverConfig",
    "NOT_FOUND",
    "Resolution",
]
