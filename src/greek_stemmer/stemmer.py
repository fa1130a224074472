"""Greek stemmer: stopword guard followed by the ordered suffix-rule cascade.

Input is expected to be lowercase Greek with diacritics removed and final
sigma folded to σ (see ``normalize.fold_greek_token``).
"""

from __future__ import annotations

from collections.abc import MutableSequence
from functools import lru_cache
from typing import Optional

from .errors import InvalidBufferError
from .rules import SHORT_RULES, rule22, rule23
from .stopwords import StopwordSet, default_stopwords

MIN_STEM_LENGTH = 3


class GreekStemmer:
    """Suffix-stripping stemmer for Modern Greek.

    Stateless apart from its read-only stopword set, so one instance can be
    shared between threads.
    """

    def __init__(self, stopwords: Optional[StopwordSet] = None) -> None:
        self.stopwords = stopwords if stopwords is not None else default_stopwords()

    def stem(self, buffer: MutableSequence, length: int) -> int:
        """Stem ``buffer[:length]`` in place and return the stem length.

        Args:
            buffer: Mutable sequence of single letters; positions up to
                ``length`` may be overwritten
            length: Number of valid letters in ``buffer``

        Returns:
            New length, ``0 <= result <= length``. Letters past the result are
            unspecified.

        Raises:
            InvalidBufferError: If the buffer is not writable or shorter than ``length``
        """
        if not isinstance(buffer, MutableSequence):
            raise InvalidBufferError(
                f"buffer must be a mutable sequence of letters, got {type(buffer).__name__}"
            )
        if length < 0 or length > len(buffer):
            raise InvalidBufferError(
                f"length {length} outside buffer of capacity {len(buffer)}"
            )

        if length < MIN_STEM_LENGTH or self.stopwords.contains(buffer, length):
            return length

        before = length
        for rule in SHORT_RULES:
            length = rule(buffer, length)

        if length == before:
            length = rule22(buffer, length)

        return rule23(buffer, length)

    def stem_word(self, word: str) -> str:
        """Convenience wrapper: stem a single prepared word given as ``str``."""
        buffer = list(word)
        return "".join(buffer[: self.stem(buffer, len(buffer))])


@lru_cache(maxsize=1)
def get_stemmer() -> GreekStemmer:
    """Shared stemmer using the bundled stopword list."""
    return GreekStemmer()


# Built at import so concurrent callers never race on construction.
get_stemmer()


def stem(buffer: MutableSequence, length: int) -> int:
    return get_stemmer().stem(buffer, length)


def stem_word(word: str) -> str:
    return get_stemmer().stem_word(word)
