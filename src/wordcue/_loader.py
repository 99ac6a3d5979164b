"""Word-list resource loaders and the word-list parser."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from importlib import resources
from pathlib import Path

from ._casefold import fold_case
from ._errors import WordcueResourceError

# Resource name (e.g. "english") -> UTF-8 text of the word list.
# A missing resource raises OSError.
ResourceLoader = Callable[[str], str]


def _default_data_dir() -> Path:
    return Path(str(resources.files("wordcue") / "data"))


def bundled_loader(name: str) -> str:
    """Read a word list shipped inside the package."""
    return (resources.files("wordcue") / "data" / name).read_text(encoding="utf-8")


def directory_loader(data_dir: Path | str) -> ResourceLoader:
    """Return a loader reading ``<data_dir>/<name>`` as UTF-8."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise WordcueResourceError(f"word-list directory not found: {data_dir}")

    def load(name: str) -> str:
        with open(data_dir / name, encoding="utf-8") as f:
            return f.read()

    return load


def mapping_loader(lists: Mapping[str, str]) -> ResourceLoader:
    """Return a loader serving word lists from an in-memory mapping."""

    def load(name: str) -> str:
        try:
            return lists[name]
        except KeyError:
            raise FileNotFoundError(f"no word list named {name!r}") from None

    return load


def parse_word_list(text: str, locale: str | None) -> frozenset[str]:
    """Parse Snowball-style word-list text into a set of folded words.

    Everything from the first ``|`` on a line is a comment. Remaining
    content is split on whitespace.
    """
    words: set[str] = set()
    for line in text.splitlines():
        line = line.split("|", 1)[0].strip()
        if not line:
            continue
        for w in line.split():
            words.add(fold_case(w, locale))
    return frozenset(words)


def read_word_list(
    loader: ResourceLoader, name: str, locale: str | None
) -> frozenset[str]:
    """Load and parse one word list, raising WordcueResourceError on failure."""
    try:
        text = loader(name)
    except OSError as e:
        raise WordcueResourceError(f"cannot read word list {name!r}: {e}") from e
    except UnicodeDecodeError as e:
        raise WordcueResourceError(f"word list {name!r} is not valid UTF-8") from e
    return parse_word_list(text, locale)
