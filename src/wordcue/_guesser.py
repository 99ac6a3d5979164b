"""Language guessing by stop-word overlap."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ._counter import WordCounter
from ._language import Language
from ._stop_words import StopWordRegistry, default_registry

logger = logging.getLogger(__name__)

DEFAULT_GUESS_WORDS = 50


def score_languages(
    words: Iterable[str], *, registry: StopWordRegistry | None = None
) -> dict[Language, int]:
    """Count, per language, how many of *words* are its stop words."""
    if registry is None:
        registry = default_registry()
    words = list(words)
    scores: dict[Language, int] = {}
    for lang in Language.guessable():
        stop = registry[lang]
        scores[lang] = sum(1 for w in words if stop.is_stop_word(w))
    return scores


def guess(
    source: str | WordCounter | Iterable[str],
    *,
    top_n: int = DEFAULT_GUESS_WORDS,
    registry: StopWordRegistry | None = None,
) -> Language | None:
    """Guess the language of a text, a word counter, or a word list.

    Text and counters are reduced to their *top_n* most frequent words.
    The language with the most stop words among the candidates wins; on a
    tie the one listed first in Language wins. Returns None when no
    language matches any word.

    Note: the first call loads every bundled word list.
    """
    if isinstance(source, str):
        source = WordCounter.from_text(source)
    if isinstance(source, WordCounter):
        words = source.most_frequent(top_n)
    else:
        words = list(source)

    winner: Language | None = None
    best = 0
    for lang, score in score_languages(words, registry=registry).items():
        if score > best:
            winner, best = lang, score

    logger.debug(
        "Guessed %s from %d words (score %d)",
        winner.name if winner else "nothing", len(words), best,
    )
    return winner
