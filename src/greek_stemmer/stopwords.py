"""Greek stopword list: whole words that bypass stemming.

Words are expected in the stemmer's input form (lowercase, no diacritics,
final sigma folded to σ). The bundled default lives in
``greek_stemmer/resources/stopwords.txt``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Sequence, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_STOPWORD_RESOURCE = "stopwords.txt"

StopwordSource = Union[str, Path, Iterable[str], None]


@dataclass(frozen=True)
class StopwordSet:
    """Immutable set of stopwords.

    Attributes:
        words: Stopwords in stemmer input form
    """
    words: FrozenSet[str]

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def contains(self, buffer: Sequence[str], length: int) -> bool:
        """Exact-match test of the token ``buffer[:length]``."""
        return "".join(buffer[:length]) in self.words


def parse_wordlist(lines: Iterable[str]) -> FrozenSet[str]:
    """Collect words from newline-delimited text, skipping blanks and ``#`` comments."""
    words = set()
    for line in lines:
        line = line.strip()
        if line and not line.startswith("#"):
            words.add(line)
    return frozenset(words)


def _read_default_lines() -> list:
    text = resources.files("greek_stemmer").joinpath(
        "resources", DEFAULT_STOPWORD_RESOURCE
    ).read_text(encoding="utf-8")
    return text.splitlines()


def build_stopword_set(source: StopwordSource = None) -> StopwordSet:
    """Build a stopword set from the bundled list, a file, or an iterable of lines.

    Args:
        source: ``None`` for the bundled default, a path to a UTF-8 word list
            (one word per line), or an iterable of lines

    Returns:
        StopwordSet instance

    Raises:
        ConfigurationError: If the word list file is missing or unreadable
    """
    if source is None:
        return StopwordSet(words=parse_wordlist(_read_default_lines()))

    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise ConfigurationError(f"Stopwords file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return StopwordSet(words=parse_wordlist(f))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Unable to read stopwords file {path}: {e}") from e

    return StopwordSet(words=parse_wordlist(source))


@lru_cache(maxsize=None)
def default_stopwords() -> StopwordSet:
    """The bundled stopword set, built once and shared."""
    return build_stopword_set(None)


def load_stopwords(path: Optional[Union[str, Path]] = None) -> StopwordSet:
    """Load stopwords from ``path``, falling back to the bundled default.

    A configured file that cannot be read is reported with a warning and the
    default set is returned instead.
    """
    if path is None:
        return default_stopwords()
    try:
        return build_stopword_set(path)
    except ConfigurationError as e:
        logger.warning("%s; using the bundled stopword list", e)
        return default_stopwords()
