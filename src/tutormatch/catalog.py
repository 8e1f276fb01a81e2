"""Default catalogue of teaching languages."""

from __future__ import annotations

from .schemas import LanguageRecord

_SEED: tuple[tuple[str, str, str], ...] = (
    ("es", "Spanish", "Español"),
    ("en", "English", "Inglés"),
    ("fr", "French", "Francés"),
    ("de", "German", "Alemán"),
    ("pt", "Portuguese", "Portugués"),
    ("it", "Italian", "Italiano"),
    ("zh", "Chinese (Mandarin)", "Chino Mandarín"),
    ("ja", "Japanese", "Japonés"),
    ("ko", "Korean", "Coreano"),
    ("ru", "Russian", "Ruso"),
    ("ar", "Arabic", "Árabe"),
    ("nl", "Dutch", "Holandés"),
    ("sv", "Swedish", "Sueco"),
    ("no", "Norwegian", "Noruego"),
    ("da", "Danish", "Danés"),
    ("fi", "Finnish", "Finés"),
    ("pl", "Polish", "Polaco"),
    ("tr", "Turkish", "Turco"),
    ("he", "Hebrew", "Hebreo"),
    ("hi", "Hindi", "Hindi"),
)


def default_languages() -> list[LanguageRecord]:
    """Return the seed language records used when no store provides any."""
    return [
        LanguageRecord(code=code, name=name, localized_names={"en": name, "es": name_es})
        for code, name, name_es in _SEED
    ]


__all__ = ["default_languages"]
