"""Rule-based stemmer for Modern Greek search indexing.

Input tokens are expected lowercase, without diacritics and with final sigma
folded to σ; ``normalize.fold_greek_token`` prepares raw words.
"""

from .errors import ConfigurationError, InvalidBufferError, StemmerError
from .stemmer import GreekStemmer, stem, stem_word
from .stopwords import StopwordSet, build_stopword_set, load_stopwords

__version__ = "0.1.0"

__all__ = [
    "GreekStemmer",
    "stem",
    "stem_word",
    "StopwordSet",
    "build_stopword_set",
    "load_stopwords",
    "StemmerError",
    "InvalidBufferError",
    "ConfigurationError",
]
