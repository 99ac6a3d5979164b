"""Word tokenizer and the non-word stripping pattern shared with removal."""

from __future__ import annotations

import re
from collections.abc import Iterator

# Combining marks (Latin, Cyrillic, Hebrew, Arabic, Devanagari) and the
# zero-width (non-)joiners. ``\w`` does not match them, but they belong to
# the word they follow.
_COMBINING = (
    r"\u0300-\u036f\u0483-\u0489"
    r"\u0591-\u05bd\u05bf\u05c1\u05c2\u05c4\u05c5\u05c7"
    r"\u0610-\u061a\u064b-\u065f\u0670"
    r"\u06d6-\u06dc\u06df-\u06e4\u06e7\u06e8\u06ea-\u06ed"
    r"\u0900-\u0903\u093a-\u093c\u093e-\u094f\u0951-\u0957\u0962\u0963"
    r"\u200c\u200d"
)

_WORD_CHAR = rf"[\w{_COMBINING}]"
_JOINER = r"[-.:/'\u2019\u2032\u00a0~]"

_WORD_RE = re.compile(rf"{_WORD_CHAR}+(?:{_JOINER}+{_WORD_CHAR}+)*")

# Runs of punctuation, symbols, whitespace and digits.
NON_WORD_RE = re.compile(rf"(?:(?![{_COMBINING}])[\W\d])+")


def iter_words(text: str | None) -> Iterator[str]:
    """Yield word tokens from *text* in order.

    Runs of letters, digits and combining marks form a word; an inner
    hyphen, apostrophe, period, colon, slash or tilde joins two runs, so
    ``don't``, ``e-mail`` and ``U.S.A`` come out whole.
    """
    if not text:
        return
    for m in _WORD_RE.finditer(text):
        yield m.group()
