"""Tests for the word tokenizer."""

import types

from wordcue import iter_words


def test_is_lazy():
    assert isinstance(iter_words("a b"), types.GeneratorType)


def test_simple_sentence():
    words = list(iter_words("The quick brown fox, jumps!"))
    assert words == ["The", "quick", "brown", "fox", "jumps"]


def test_empty_and_none():
    assert list(iter_words("")) == []
    assert list(iter_words(None)) == []
    assert list(iter_words(" ... !! ")) == []


def test_joiners_keep_words_whole():
    words = list(iter_words("I don't use e-mail in the U.S.A. anymore"))
    assert words == ["I", "don't", "use", "e-mail", "in", "the", "U.S.A", "anymore"]


def test_curly_apostrophe():
    assert list(iter_words("it’s fine")) == ["it’s", "fine"]


def test_trailing_joiner_is_dropped():
    assert list(iter_words("well- said.")) == ["well", "said"]


def test_digits_are_words():
    assert list(iter_words("room 101 is 3.5m wide")) == ["room", "101", "is", "3.5m", "wide"]


def test_non_latin_scripts():
    assert list(iter_words("Привет, мир!")) == ["Привет", "мир"]
    assert list(iter_words("Καλημέρα κόσμε")) == ["Καλημέρα", "κόσμε"]


def test_combining_marks_stay_in_word():
    # Devanagari vowel signs are combining marks, not letters.
    assert list(iter_words("मैं हिंदी बोलता हूँ")) == ["मैं", "हिंदी", "बोलता", "हूँ"]
    # Decomposed e + combining acute accent.
    assert list(iter_words("café noir")) == ["café", "noir"]
