"""Stemming sample corpus: ``word,stem`` pairs kept in a UTF-8 text file.

The corpus pins the stemmer's observable behaviour. ``update_samples``
regenerates the stems after an intentional rule change; ``check_samples``
lists the words whose stem no longer matches.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import ConfigurationError
from .stemmer import GreekStemmer, get_stemmer


@dataclass
class StemmingSample:
    word: str
    stem: str


@dataclass
class SampleMismatch:
    """A sample whose recorded stem differs from the current stemmer output."""
    word: str
    expected: str
    actual: str


def read_samples(path: str | Path) -> List[StemmingSample]:
    """Read ``word,stem`` lines; a line with only a word has an empty stem.

    Raises:
        ConfigurationError: If the file doesn't exist
        ValueError: If a line has more than two fields
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Samples file not found: {path}")

    samples: List[StemmingSample] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            if not row or not row[0].strip() or row[0].startswith("#"):
                continue
            if len(row) > 2:
                raise ValueError(f"{path}:{lineno}: expected 'word,stem', got {row}")
            word = row[0].strip()
            stem = row[1].strip() if len(row) == 2 else ""
            samples.append(StemmingSample(word=word, stem=stem))
    return samples


def write_samples(path: str | Path, samples: Iterable[StemmingSample]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        for s in samples:
            writer.writerow([s.word, s.stem])


def check_samples(
    samples: Iterable[StemmingSample], stemmer: Optional[GreekStemmer] = None
) -> List[SampleMismatch]:
    stemmer = stemmer or get_stemmer()
    mismatches = []
    for s in samples:
        actual = stemmer.stem_word(s.word)
        if actual != s.stem:
            mismatches.append(SampleMismatch(word=s.word, expected=s.stem, actual=actual))
    return mismatches


def update_samples(
    path: str | Path, stemmer: Optional[GreekStemmer] = None
) -> List[StemmingSample]:
    """Re-stem every word in the samples file and rewrite it in place."""
    stemmer = stemmer or get_stemmer()
    updated = [
        StemmingSample(word=s.word, stem=stemmer.stem_word(s.word))
        for s in read_samples(path)
    ]
    write_samples(path, updated)
    return updated
