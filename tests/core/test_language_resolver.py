from __future__ import annotations

import pytest

from tutormatch.catalog import default_languages
from tutormatch.core import NOT_FOUND, LanguageResolver, LanguageResolverConfig
from tutormatch.schemas import LanguageRecord


def build_resolver(**config) -> LanguageResolver:
    return LanguageResolver(default_languages(), config=LanguageResolverConfig(**config))


@pytest.mark.parametrize("identifier", ["en", "EN", " en ", "English", "english", "Inglés", "INGLÉS"])
def test_resolve_exact_code_and_names(identifier: str):
    record = build_resolver().resolve(identifier)

    assert record
    assert record.code == "en"


def test_resolve_prefix_and_substring_containment():
    resolver = build_resolver()

    assert resolver.resolve("Portu").code == "pt"
    assert resolver.resolve("Mandarin").code == "zh"
    assert resolver.resolve("Chinese").code == "zh"
    assert resolver.resolve("English language").code == "en"


def test_resolve_tolerates_typos():
    resolver = build_resolver()

    assert resolver.resolve("Englsh").code == "en"
    assert resolver.resolve("Frnch").code == "fr"


def test_resolve_returns_not_found_without_raising():
    resolver = build_resolver()

    assert resolver.resolve("Klingon") is NOT_FOUND
    assert resolver.resolve("") is NOT_FOUND
    assert resolver.resolve(None) is NOT_FOUND
    assert not NOT_FOUND


def test_short_identifiers_skip_containment():
    resolver = build_resolver(fuzzy_threshold=101.0)

    assert resolver.resolve("sp") is NOT_FOUND


@pytest.mark.parametrize("identifier", ["en", "English", "Klingon", "xx-custom", ""])
def test_same_language_is_reflexive(identifier: str):
    resolver = build_resolver()

    assert resolver.same_language(identifier, identifier)
    assert resolver.same_language(identifier.upper(), identifier.lower())


def test_same_language_code_against_name():
    resolver = build_resolver()

    assert resolver.same_language("en", "English")
    assert resolver.same_language("Español", "es")
    assert resolver.same_language("Francés", "French")
    assert not resolver.same_language("en", "Spanish")


def test_same_language_neither_side_resolves():
    resolver = build_resolver()

    assert not resolver.same_language("Klingon", "Elvish")
    assert not resolver.same_language(None, "en")


def test_same_language_one_side_unresolved_uses_record_names():
    record = LanguageRecord(code="qu", name="Quechua", localized_names={"es": "Quechua"})
    resolver = LanguageResolver([record], config=LanguageResolverConfig(fuzzy_threshold=101.0))

    assert not resolver.same_language("qu", "Aymara")
    assert resolver.same_language("QU", "quechua")


def test_localized_name_falls_back_to_default():
    resolver = build_resolver()

    assert resolver.localized_name("de", "es") == "Alemán"
    assert resolver.localized_name("de", "fr") == "German"
    assert resolver.localized_name("de") == "German"
    assert resolver.localized_name("Klingon", "es") == "Klingon"


def test_names_for_includes_code_and_localized_names():
    record = build_resolver().resolve("ja")

    assert LanguageResolver.names_for(record) == {"ja", "japanese", "japones"}


def test_resolve_ignores_missing_accents():
    resolver = build_resolver()

    assert resolver.resolve("Aleman").code == "de"
    assert resolver.resolve("ingles").code == "en"
    assert resolver.resolve("ESPANOL").code == "es"
    assert resolver.same_language("Ingles", "en")
    assert resolver.same_language("Inglés", "Ingles")
    assert resolver.same_language("Japones", "Japanese")


def test_containment_matches_from_word_start_only():
    resolver = build_resolver()

    assert resolver.resolve("man").code == "zh"
    assert resolver.resolve("ian") is NOT_FOUND
    assert resolver.resolve("ese") is NOT_FOUND
