"""Token-stream side of the stemmer.

Splits text into tokens, folds them to stemmer input form and runs each token
through the stemmer once. Tokens marked as keywords pass through unstemmed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Set

from .normalize import fold_greek_text, fold_greek_token, normalize_text_nfc
from .stemmer import GreekStemmer, get_stemmer

_WORD_RE = re.compile(r"[^\W\d_]+", re.UNICODE)


@dataclass(frozen=True)
class Token:
    """A single term in the stream.

    Attributes:
        term: Token text
        keyword: True if the token must not be stemmed
    """
    term: str
    keyword: bool = False


def tokenize_greek(text: str) -> List[str]:
    """Split text into letter-only words; digits and punctuation separate tokens."""
    return _WORD_RE.findall(normalize_text_nfc(text))


class GreekStemFilter:
    """Applies the stemmer to every non-keyword token of a stream."""

    def __init__(self, stemmer: Optional[GreekStemmer] = None) -> None:
        self.stemmer = stemmer if stemmer is not None else get_stemmer()

    def filter(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.keyword:
                yield token
                continue
            buffer = list(token.term)
            length = self.stemmer.stem(buffer, len(buffer))
            yield replace(token, term="".join(buffer[:length]))


def analyze(
    text: str,
    stemmer: Optional[GreekStemmer] = None,
    keywords: Optional[Set[str]] = None,
) -> List[str]:
    """Tokenize, fold and stem ``text``; return the resulting terms in order.

    Args:
        text: Raw Greek text
        stemmer: Stemmer to use (default: shared stemmer with bundled stopwords)
        keywords: Folded words to keep unstemmed

    Returns:
        List of stems, one per token
    """
    keywords = {fold_greek_token(k) for k in keywords or ()}
    # folding first keeps letters with combining marks inside one token
    tokens = (Token(term=t, keyword=t in keywords) for t in tokenize_greek(fold_greek_text(text)))
    return [t.term for t in GreekStemFilter(stemmer).filter(tokens)]
