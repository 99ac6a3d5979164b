"""Per-language stop-word sets and the registry that owns them."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from ._casefold import fold_case
from ._language import Language
from ._loader import ResourceLoader, bundled_loader, read_word_list
from ._tokenizer import NON_WORD_RE

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = " \t\n\r\f"


class StopWordSet:
    """Stop words for one language, loaded lazily on first use.

    Membership is tested on the case-folded word. Any single-character
    token counts as a stop word regardless of language.
    """

    __slots__ = ("_language", "_loader", "_words", "_loaded", "_lock")

    def __init__(
        self,
        language: Language,
        loader: ResourceLoader | None = None,
        words: Iterable[str] | None = None,
    ) -> None:
        if words is not None and loader is not None:
            raise ValueError("pass either a loader or explicit words, not both")
        self._language = language
        self._loader = loader or bundled_loader
        self._words: frozenset[str] = frozenset()
        self._loaded = False
        self._lock = threading.Lock()
        if words is not None:
            self._words = frozenset(fold_case(w, language.locale) for w in words)
            self._loaded = True

    @property
    def language(self) -> Language:
        return self._language

    @property
    def locale(self) -> str | None:
        return self._language.locale

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def words(self) -> frozenset[str]:
        self.load()
        return self._words

    def load(self) -> None:
        """Read the word list if it has not been read yet."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            name = self._language.resource_name
            self._words = read_word_list(self._loader, name, self.locale)
            self._loaded = True
        logger.debug(
            "Loaded %d stop words for %s from %r",
            len(self._words), self._language.name, name,
        )

    def is_stop_word(self, word: str) -> bool:
        self.load()
        if len(word) == 1:
            return True
        return fold_case(word, self.locale) in self._words

    def is_stop_word_exact(self, word: str) -> bool:
        """Like is_stop_word, but without case folding."""
        self.load()
        if len(word) == 1:
            return True
        return word in self._words

    def remove(self, text: str | None, delimiters: str | None = None) -> str | None:
        """Strip punctuation, digits and stop words from *text*.

        Non-word characters and digits become spaces first; the result is
        then split on *delimiters* only (default: space, tab, newline,
        carriage return, form feed). Kept tokens are joined with single
        spaces.
        """
        if text is None:
            return None
        if not text:
            return ""
        if not delimiters:
            delimiters = DEFAULT_DELIMITERS

        cleaned = NON_WORD_RE.sub(" ", text)
        self.load()
        kept = [
            token for token in _split_on(cleaned, delimiters)
            if not self.is_stop_word(token)
        ]
        return " ".join(kept).strip()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_stop_word(word)

    def __len__(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        state = f"{len(self._words)} words" if self._loaded else "unloaded"
        return f"StopWordSet({self._language.name}, {state})"


def _split_on(text: str, delimiters: str) -> Iterator[str]:
    """Split on any of the *delimiters* characters, dropping empty tokens."""
    start = 0
    for i, ch in enumerate(text):
        if ch in delimiters:
            if i > start:
                yield text[start:i]
            start = i + 1
    if start < len(text):
        yield text[start:]


class StopWordRegistry:
    """One StopWordSet per Language, all reading through the same loader."""

    __slots__ = ("_loader", "_sets")

    def __init__(
        self,
        loader: ResourceLoader | None = None,
        custom_words: Iterable[str] | None = None,
    ) -> None:
        self._loader = loader or bundled_loader
        self._sets: dict[Language, StopWordSet] = {}
        for lang in Language:
            if lang is Language.CUSTOM and custom_words is not None:
                self._sets[lang] = StopWordSet(lang, words=custom_words)
            else:
                self._sets[lang] = StopWordSet(lang, self._loader)

    def get(self, language: Language) -> StopWordSet:
        return self._sets[language]

    def __getitem__(self, language: Language) -> StopWordSet:
        return self._sets[language]

    def __iter__(self) -> Iterator[StopWordSet]:
        return iter(self._sets.values())

    def __len__(self) -> int:
        return len(self._sets)


_default_registry: StopWordRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> StopWordRegistry:
    """Process-wide registry backed by the bundled word lists."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = StopWordRegistry()
    return _default_registry


def stop_words(language: Language) -> StopWordSet:
    """Stop-word set for *language* from the default registry."""
    return default_registry()[language]
