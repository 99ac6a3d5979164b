"""Wordcue: stop-word removal and stop-word based language guessing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._casefold import fold_case
from ._counter import WordCounter
from ._errors import WordcueError, WordcueResourceError
from ._guesser import DEFAULT_GUESS_WORDS, guess, score_languages
from ._language import Language
from ._loader import (
    bundled_loader,
    directory_loader,
    mapping_loader,
    parse_word_list,
)
from ._stop_words import (
    DEFAULT_DELIMITERS,
    StopWordRegistry,
    StopWordSet,
    default_registry,
    stop_words,
)
from ._tokenizer import iter_words

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "DEFAULT_DELIMITERS",
    "DEFAULT_GUESS_WORDS",
    "Language",
    "StopWordRegistry",
    "StopWordSet",
    "WordCounter",
    "WordcueError",
    "WordcueResourceError",
    "bundled_loader",
    "default_registry",
    "directory_loader",
    "fold_case",
    "guess",
    "iter_words",
    "mapping_loader",
    "parse_word_list",
    "score_languages",
    "stop_words",
]


def load(
    data_dir: Path | str | None = None,
    custom_words: Iterable[str] | None = None,
) -> StopWordRegistry:
    """Build a registry of stop-word sets.

    Args:
        data_dir: Directory holding one word list per language. If None,
            uses the bundled lists.
        custom_words: Words for Language.CUSTOM, if any.
    """
    loader = bundled_loader if data_dir is None else directory_loader(data_dir)
    return StopWordRegistry(loader, custom_words=custom_words)
