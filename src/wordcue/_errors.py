"""Wordcue error types."""


class WordcueError(Exception):
    """Base error for all wordcue failures."""


class WordcueResourceError(WordcueError):
    """A stop-word list or data directory could not be read."""
