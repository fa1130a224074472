"""Reporting utilities for sample checks."""

from __future__ import annotations

import csv
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List

from .samples import SampleMismatch


def mismatches_to_rows(mismatches: Iterable[SampleMismatch]) -> List[dict]:
    return [asdict(m) for m in mismatches]


def write_mismatches_csv(path: str | Path, mismatches: Iterable[SampleMismatch]) -> None:
    """Write mismatches as CSV with a ``word,expected,actual`` header."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["word", "expected", "actual"])
        writer.writeheader()
        writer.writerows(mismatches_to_rows(mismatches))


def print_summary(total: int, mismatches: Iterable[SampleMismatch], limit: int = 20) -> None:
    """Print a sample-check summary and the first ``limit`` mismatches."""
    mismatches = list(mismatches)
    passed = total - len(mismatches)
    pct = (passed / total * 100) if total > 0 else 0

    print("Stemming Samples Summary:")
    print(f"  Total samples: {total}")
    print(f"  Matching:      {passed} ({pct:.1f}%)")
    print(f"  Mismatching:   {len(mismatches)}")
    for m in mismatches[:limit]:
        print(f"    {m.word}: expected '{m.expected}', got '{m.actual}'")
    if len(mismatches) > limit:
        print(f"    ... {len(mismatches) - limit} more")
