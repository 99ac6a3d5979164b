"""Locale-aware case folding."""

from __future__ import annotations

# Locales whose I/i pairs are dotted/dotless rather than ASCII.
_TURKIC = frozenset({"tr", "az"})
_TURKIC_UPPER = str.maketrans({"I": "ı", "İ": "i"})


def fold_case(word: str, locale: str | None) -> str:
    """Lowercase *word* using the rules of *locale*.

    ``str.lower`` already handles the Greek final sigma; only the Turkic
    dotted/dotless I needs special treatment.
    """
    if locale in _TURKIC:
        return word.translate(_TURKIC_UPPER).lower()
    return word.lower()
