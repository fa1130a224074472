"""Preparation of raw Greek text into stemmer input form.

The stemmer expects each token lowercased, with accents, diaeresis and
breathing marks removed and final sigma (ς) folded to σ. This module does that
folding for the analysis chain and the CLI.
"""

from __future__ import annotations

import re
import unicodedata as ud

_WS_RE = re.compile(r"\s+")


def normalize_text_nfc(text: str) -> str:
    """Apply Unicode NFC to input text (safe for None-like inputs)."""
    if text is None:
        return ""
    return ud.normalize("NFC", str(text))


def strip_accents(text: str) -> str:
    """Remove combining marks by NFD decomposition then recompose without marks."""
    decomposed = ud.normalize("NFD", normalize_text_nfc(text))
    stripped = "".join(ch for ch in decomposed if ud.category(ch) != "Mn")
    return ud.normalize("NFC", stripped)


def fold_final_sigma(text: str) -> str:
    return text.replace("ς", "σ")


def fold_greek_token(token: str) -> str:
    """Lowercase, strip diacritics and fold final sigma for a single token."""
    if not token:
        return ""
    t = normalize_text_nfc(token).lower()
    t = strip_accents(t)
    return fold_final_sigma(t)


def fold_greek_text(text: str) -> str:
    """Fold a whole text and collapse whitespace."""
    if not text:
        return ""
    return _WS_RE.sub(" ", fold_greek_token(text)).strip()
