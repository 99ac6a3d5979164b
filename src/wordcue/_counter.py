"""Word frequency table."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from ._tokenizer import iter_words


class WordCounter:
    """Occurrence counts for a stream of tokens.

    Tokens are counted as given (no case folding). Ties in frequency keep
    the order in which tokens were first seen.
    """

    __slots__ = ("_counts",)

    def __init__(self, tokens: Iterable[str]) -> None:
        # Counter keeps first-insertion order and most_common() sorts
        # stably, which gives the first-seen tie-break.
        self._counts: Counter[str] = Counter(tokens)

    @classmethod
    def from_text(cls, text: str | None) -> WordCounter:
        return cls(iter_words(text))

    def most_frequent(self, n: int) -> list[str]:
        """Up to *n* distinct tokens, most frequent first."""
        if n <= 0:
            return []
        return [word for word, _ in self._counts.most_common(n)]

    def all_by_frequency(self) -> list[str]:
        return [word for word, _ in self._counts.most_common()]

    def count(self, word: str) -> int:
        return self._counts[word]

    @property
    def total(self) -> int:
        """Number of tokens counted, repeats included."""
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __repr__(self) -> str:
        return f"WordCounter(distinct={len(self)}, total={self.total})"
