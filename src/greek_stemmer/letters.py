"""Character classification and suffix matching over token buffers.

A token buffer is a mutable sequence of single Greek letters together with a
length cursor; only ``buffer[:length]`` is the live stem.
"""

from __future__ import annotations

from typing import Iterable, Sequence

VOWELS = frozenset("αεηιουω")
VOWELS_NO_UPSILON = frozenset("αεηιοω")


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def is_vowel_no_upsilon(ch: str) -> bool:
    return ch in VOWELS_NO_UPSILON


def ends_with(buffer: Sequence[str], length: int, suffix: str) -> bool:
    """Return True if the trailing ``len(suffix)`` letters of the stem equal ``suffix``.

    A suffix longer than the stem never matches.
    """
    n = len(suffix)
    if n > length:
        return False
    start = length - n
    for i, ch in enumerate(suffix):
        if buffer[start + i] != ch:
            return False
    return True


def ends_with_any(buffer: Sequence[str], length: int, suffixes: Iterable[str]) -> bool:
    return any(ends_with(buffer, length, s) for s in suffixes)


def ends_with_vowel(buffer: Sequence[str], length: int) -> bool:
    return length > 0 and is_vowel(buffer[length - 1])


def ends_with_vowel_no_upsilon(buffer: Sequence[str], length: int) -> bool:
    return length > 0 and is_vowel_no_upsilon(buffer[length - 1])
