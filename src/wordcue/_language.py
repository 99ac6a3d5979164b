"""Supported languages and their locale tags."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """A language with a bundled stop-word list.

    The value is the ISO-639-1 locale tag used for case folding. Member
    order is the order languages are tried when guessing. CUSTOM has no
    locale and no bundled list.
    """

    ARABIC = "ar"
    ARMENIAN = "hy"
    CATALAN = "ca"
    CROATIAN = "hr"
    CZECH = "cs"
    DUTCH = "nl"
    DANISH = "da"
    ENGLISH = "en"
    ESPERANTO = "eo"
    FARSI = "fa"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ITALIAN = "it"
    LATIN = "la"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVENIAN = "sl"
    SLOVAK = "sk"
    SPANISH = "es"
    SWEDISH = "sv"
    HEBREW = "he"
    TURKISH = "tr"
    CUSTOM = None

    @property
    def locale(self) -> str | None:
        return self.value

    @property
    def resource_name(self) -> str:
        """Name of the word-list resource, e.g. ``"english"``."""
        return self.name.lower()

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Resolve a locale tag such as ``"en"`` or ``"FR"``."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise ValueError(f"unknown language code {code!r}") from None

    @classmethod
    def guessable(cls) -> list[Language]:
        """All languages with a bundled list, in enumeration order."""
        return [lang for lang in cls if lang is not cls.CUSTOM]
