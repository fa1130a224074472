"""Suffix-stripping rules of the Greek stemmer.

Every rule takes a token buffer and the current stem length and returns the new
length. Rules only ever shorten the stem, then may re-extend it up to (never
past) the length they received. Truncation is a plain length decrement, so a
full restore needs no writes; a substitution writes the letters it restores.

Suffix tiers are ``(guard, suffixes, strip)`` tuples: the tier applies when
``length > guard`` and the stem ends with one of ``suffixes``, removing
``strip`` letters. Tiers are listed longest suffix first and the first match
wins.

Based on "Development of a Stemmer for the Greek Language" (G. Ntais) as
shipped with Lucene, with additional handling of the ιο, ια, ιασ, ιεσ, ιοσ,
ιουσ, ιοι, εασ and εα endings.
"""

from __future__ import annotations

from typing import List, MutableSequence, Sequence, Tuple

from .exception_tables import (
    EXC4,
    EXC5,
    EXC6,
    EXC7,
    EXC8A,
    EXC8B,
    EXC9,
    EXC12A,
    EXC12B,
    EXC13,
    EXC14,
    EXC15A,
    EXC15B,
    EXC16,
    EXC17,
    EXC18,
    EXC19,
    EXC20A,
    EXC20B,
    EXC23A,
    EXC23B,
    in_table,
)
from .letters import ends_with, ends_with_any, ends_with_vowel, ends_with_vowel_no_upsilon

Tier = Tuple[int, Tuple[str, ...], int]
Buffer = MutableSequence[str]


def truncate(buffer: Sequence[str], length: int, tiers: Sequence[Tier]) -> int:
    """Apply the first matching tier and return the shortened length (or ``length``)."""
    for guard, suffixes, strip in tiers:
        if length > guard and ends_with_any(buffer, length, suffixes):
            return length - strip
    return length


def write(buffer: Buffer, length: int, letters: str) -> int:
    """Grow the stem by ``letters`` written at ``buffer[length:]``; return the new length."""
    for i, ch in enumerate(letters):
        buffer[length + i] = ch
    return length + len(letters)


# Irregular noun paradigms (status, fact, meat, raw material, ...).
RULE0_TIERS: List[Tier] = [
    (9, ("καθεστωτοσ", "καθεστωτων"), 4),
    (8, ("γεγονοτοσ", "γεγονοτων"), 4),
    (8, ("καθεστωτα",), 3),
    (7, ("τατογιου", "τατογιων"), 4),
    (7, ("γεγονοτα",), 3),
    (7, ("καθεστωσ",), 2),
    (6, ("σκαγιου", "σκαγιων", "κρεατοσ", "κρεατων", "περατοσ", "περατων",
         "τερατοσ", "τερατων"), 4),
    (6, ("τατογια",), 3),
    (6, ("γεγονοσ",), 2),
    (5, ("φαγιου", "φαγιων", "σογιου", "σογιων"), 4),
    (5, ("σκαγια", "κρεατα", "περατα", "τερατα"), 3),
    (4, ("φαγια", "σογια", "φωτοσ", "φωτων"), 3),
    (4, ("κρεασ", "περασ", "τερασ"), 2),
    (3, ("φωτα",), 2),
    (2, ("φωσ",), 1),
    (2, ("ευα",), 1),
]


def rule0(buffer: Buffer, length: int) -> int:
    return truncate(buffer, length, RULE0_TIERS)


# Stems that keep -αδ- dropped (μαμαδεσ -> μαμ); every other stem gets it back.
RULE1_DROP = (
    "οκ", "μαμ", "μαν", "μπαμπ", "πατερ", "γιαγι", "νταντ", "κυρ", "θει",
    "πεθερ", "μουσαμ", "παρ", "ψαρ", "τζουρ", "ταμπουρ", "καπλαμ",
)


def rule1(buffer: Buffer, length: int) -> int:
    if length > 4 and ends_with_any(buffer, length, ("αδεσ", "αδων")):
        length -= 4
        if not ends_with_any(buffer, length, RULE1_DROP):
            length += 2  # -αδ
    return length


RULE2_KEEP = ("οπ", "ιπ", "εμπ", "υπ", "γηπ", "δαπ", "κρασπ", "μιλ")


def rule2(buffer: Buffer, length: int) -> int:
    if length > 4 and ends_with_any(buffer, length, ("εδεσ", "εδων")):
        length -= 4
        if ends_with_any(buffer, length, RULE2_KEEP):
            length += 2  # -εδ
    return length


RULE3_KEEP = (
    "αρκ", "καλιακ", "πεταλ", "λιχ", "πλεξ", "σκ", "σ", "φλ", "φρ", "βελ",
    "λουλ", "χν", "σπ", "τραγ", "φε",
)


def rule3(buffer: Buffer, length: int) -> int:
    if length > 5 and ends_with_any(buffer, length, ("ουδεσ", "ουδων")):
        length -= 5
        if ends_with_any(buffer, length, RULE3_KEEP):
            length += 3  # -ουδ
    return length


RULE4_TIERS: List[Tier] = [
    (3, ("εωσ", "εων", "εασ"), 3),
    (2, ("εα",), 2),
]


def rule4(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE4_TIERS)
    if stripped != length and in_table(buffer, stripped, EXC4):
        stripped += 1  # -ε
    return stripped


RULE5A_TIERS: List[Tier] = [
    (9, ("ειουσ",), 5),
    (8, ("ειοσ", "ειοι", "ειασ", "ειεσ", "ειου", "ειων"), 4),
    (7, ("ειο", "εια"), 3),
]


def rule5a(buffer: Buffer, length: int) -> int:
    return truncate(buffer, length, RULE5A_TIERS)


RULE5B_TIERS: List[Tier] = [
    (4, ("ιουσ",), 4),
    (3, ("ιασ", "ιεσ", "ιοσ", "ιου", "ιοι", "ιον", "ιων"), 3),
    (2, ("ιο", "ια"), 2),
]


def rule5b(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE5B_TIERS)
    if stripped == length:
        return length

    if length - stripped == 2 and ends_with_any(buffer, stripped, ("ρολογ", "κατωγ")):
        # ρολογια -> ρολοι, κατωγια -> κατωι
        buffer[stripped - 1] = "ι"
        return stripped

    if ends_with_vowel(buffer, stripped) or in_table(buffer, stripped, EXC5) or stripped < 2:
        stripped += 1  # -ι
    elif ends_with(buffer, stripped, "παλ"):
        stripped = write(buffer, stripped, "αι")
    return stripped


RULE6_TIERS: List[Tier] = [
    (5, ("ικουσ", "ικεισ"), 5),
    (4, ("ικου", "ικων", "ικωσ", "ικοσ", "ικον", "ικοι", "ικησ", "ικεσ"), 4),
    (3, ("ικα", "ικο", "ικη"), 3),
]


def rule6(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE6_TIERS)
    if stripped != length and (
        ends_with_vowel(buffer, stripped)
        or in_table(buffer, stripped, EXC6)
        or ends_with(buffer, stripped, "φοιν")
    ):
        stripped += 2  # -ικ
    return stripped


RULE7_TIERS: List[Tier] = [
    (7, ("ηθηκαμε",), 7),
    (6, ("ουσαμε",), 6),
    (5, ("αγαμε", "ησαμε", "ηκαμε"), 5),
]


def rule7(buffer: Buffer, length: int) -> int:
    if length == 5 and ends_with(buffer, length, "αγαμε"):
        return length - 1

    length = truncate(buffer, length, RULE7_TIERS)

    if length > 3 and ends_with(buffer, length, "αμε"):
        length -= 3
        if in_table(buffer, length, EXC7):
            length += 2  # -αμ
    return length


RULE8_TIERS: List[Tier] = [
    (8, ("ιουντανε",), 8),
    (7, ("ιοντανε", "ουντανε", "ηθηκανε"), 7),
    (6, ("ιοτανε", "οντανε", "ουσανε"), 6),
    (5, ("αγανε", "ησανε", "οτανε", "ηκανε"), 5),
]


def rule8(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE8_TIERS)
    if stripped != length and in_table(buffer, stripped, EXC8A):
        # at least five letters were removed, so four fit
        stripped = write(buffer, stripped, "αγαν")
    length = stripped

    if length > 3 and ends_with(buffer, length, "ανε"):
        length -= 3
        if ends_with_vowel_no_upsilon(buffer, length) or in_table(buffer, length, EXC8B):
            length += 2  # -αν
    return length


RULE9_KEEP = (
    "οδ", "αιρ", "φορ", "ταθ", "διαθ", "σχ", "ενδ", "ευρ", "τιθ", "υπερθ",
    "ραθ", "ενθ", "ροθ", "σθ", "πυρ", "αιν", "συνδ", "συν", "συνθ", "χωρ",
    "πον", "βρ", "καθ", "ευθ", "εκθ", "νετ", "ρον", "αρκ", "βαρ", "βολ",
    "ωφελ",
)


def rule9(buffer: Buffer, length: int) -> int:
    if length > 5 and ends_with(buffer, length, "ησετε"):
        length -= 5

    if length > 3 and ends_with(buffer, length, "ετε"):
        length -= 3
        if (
            in_table(buffer, length, EXC9)
            or ends_with_vowel_no_upsilon(buffer, length)
            or ends_with_any(buffer, length, RULE9_KEEP)
        ):
            length += 2  # -ετ
    return length


def rule10(buffer: Buffer, length: int) -> int:
    if length > 5 and ends_with_any(buffer, length, ("οντασ", "ωντασ")):
        length -= 5
        if length == 3 and ends_with(buffer, length, "αρχ"):
            length = write(buffer, length, "οντ")
        if ends_with(buffer, length, "κρε"):
            length = write(buffer, length, "ωντ")
    return length


def rule11(buffer: Buffer, length: int) -> int:
    # -ιομαστε is tested first, so βαριομαστε -> βαρ rather than βαρι
    if length > 7 and ends_with(buffer, length, "ιομαστε"):
        length -= 7
        if length == 2 and ends_with(buffer, length, "ον"):
            length = write(buffer, length, "ομαστ")
    elif length > 6 and ends_with(buffer, length, "ομαστε"):
        length -= 6
        if length == 2 and ends_with(buffer, length, "ον"):
            length += 5  # -ομαστ
    return length


def rule12(buffer: Buffer, length: int) -> int:
    if length > 5 and ends_with(buffer, length, "ιεστε"):
        length -= 5
        if in_table(buffer, length, EXC12A):
            length += 4  # -ιεστ

    if length > 4 and ends_with(buffer, length, "εστε"):
        length -= 4
        if in_table(buffer, length, EXC12B):
            length += 3  # -εστ
    return length


RULE13_TIERS: List[Tier] = [
    (6, ("ηθηκεσ",), 6),
    (5, ("ηθηκα", "ηθηκε"), 5),
]

RULE13_STEM_TIERS: List[Tier] = [
    (4, ("ηκεσ",), 4),
    (3, ("ηκα", "ηκε"), 3),
]

RULE13_KEEP = ("σκωλ", "σκουλ", "ναρθ", "σφ", "οθ", "πιθ")


def rule13(buffer: Buffer, length: int) -> int:
    length = truncate(buffer, length, RULE13_TIERS)

    stripped = truncate(buffer, length, RULE13_STEM_TIERS)
    if stripped != length and (
        in_table(buffer, stripped, EXC13) or ends_with_any(buffer, stripped, RULE13_KEEP)
    ):
        stripped += 2  # -ηκ
    return stripped


RULE14_TIERS: List[Tier] = [
    (5, ("ουσεσ",), 5),
    (4, ("ουσα", "ουσε"), 4),
]

RULE14_KEEP = (
    "ποδαρ", "βλεπ", "πανταχ", "φρυδ", "μαντιλ", "μαλλ", "κυματ", "λαχ",
    "ληγ", "φαγ", "ομ", "πρωτ",
)


def rule14(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE14_TIERS)
    if stripped != length and (
        in_table(buffer, stripped, EXC14)
        or ends_with_vowel(buffer, stripped)
        or ends_with_any(buffer, stripped, RULE14_KEEP)
    ):
        stripped += 3  # -ουσ
    return stripped


RULE15_TIERS: List[Tier] = [
    (4, ("αγεσ",), 4),
    (3, ("αγα", "αγε"), 3),
]

RULE15_KEEP = ("οφ", "πελ", "χορτ", "λλ", "σφ", "ρπ", "φρ", "πρ", "λοχ", "σμην")


def rule15(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE15_TIERS)
    if stripped == length:
        return length

    keep = in_table(buffer, stripped, EXC15A) or ends_with_any(buffer, stripped, RULE15_KEEP)
    veto = in_table(buffer, stripped, EXC15B) or ends_with(buffer, stripped, "κολλ")
    if keep and not veto:
        stripped += 2  # -αγ
    return stripped


RULE16_TIERS: List[Tier] = [
    (4, ("ησου",), 4),
    (3, ("ησε", "ησα"), 3),
]


def rule16(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE16_TIERS)
    if stripped != length and in_table(buffer, stripped, EXC16):
        stripped += 2  # -ησ
    return stripped


def rule17(buffer: Buffer, length: int) -> int:
    if length > 4 and ends_with(buffer, length, "ηστε"):
        length -= 4
        if in_table(buffer, length, EXC17):
            length += 3  # -ηστ
    return length


RULE18_TIERS: List[Tier] = [
    (6, ("ησουνε", "ηθουνε"), 6),
    (4, ("ουνε",), 4),
]


def rule18(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE18_TIERS)
    if stripped != length and in_table(buffer, stripped, EXC18):
        stripped = write(buffer, stripped, "ουν")
    return stripped


RULE19_TIERS: List[Tier] = [
    (6, ("ησουμε", "ηθουμε"), 6),
    (4, ("ουμε",), 4),
]


def rule19(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE19_TIERS)
    if stripped != length and in_table(buffer, stripped, EXC19):
        stripped = write(buffer, stripped, "ουμ")
    return stripped


# The leading μ of -ματ- stays with the stem, hence strip < len(suffix).
RULE20_TIERS: List[Tier] = [
    (6, ("ματουσ",), 5),
    (5, ("ματων", "ματοσ", "ματωσ", "ματου", "ματησ", "ματεσ", "ματοι"), 4),
    (4, ("ματα", "ματο", "ματη"), 3),
]


def rule20(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE20_TIERS)
    if stripped == length:
        return length

    if in_table(buffer, stripped, EXC20A):
        stripped = write(buffer, stripped, "α")
    elif in_table(buffer, stripped, EXC20B):
        stripped += 2  # -ατ
    return stripped


def rule21(buffer: Buffer, length: int) -> int:
    if length > 3 and ends_with(buffer, length, "ουα"):
        return length - 1
    return length


# The "long list": generic inflectional endings, tried only when no other rule fired.
RULE22_TIERS: List[Tier] = [
    (9, ("ιοντουσαν",), 9),
    (8, ("ιομασταν", "ιοσασταν", "ιουμαστε", "οντουσαν"), 8),
    (7, ("ιεμαστε", "ιεσαστε", "ιομουνα", "ιοσαστε", "ιοσουνα", "ιουνται",
         "ιουνταν", "ηθηκατε", "ομασταν", "οσασταν", "ουμαστε"), 7),
    (6, ("ιομουν", "ιονταν", "ιοσουν", "ηθειτε", "ηθηκαν", "ομουνα", "οσαστε",
         "οσουνα", "ουνται", "ουνταν", "ουσατε"), 6),
    (5, ("αγατε", "ιεμαι", "ιεται", "ιεσαι", "ιοταν", "ιουμα", "ηθεισ",
         "ηθουν", "ηκατε", "ησατε", "ησουν", "ομουν", "ονται", "ονταν",
         "οσουν", "ουμαι", "ουσαν"), 5),
    (4, ("αγαν", "αμαι", "ασαι", "αται", "ειτε", "εσαι", "εται", "ηδεσ",
         "ηδων", "ηθει", "ηκαν", "ησαν", "ησει", "ησεσ", "ομαι", "οταν"), 4),
    (3, ("αει", "εισ", "ηθω", "ησω", "ουν", "οισ", "ουσ"), 3),
    (2, ("αν", "ασ", "αω", "ει", "εσ", "ησ", "οι", "οσ", "ου", "υα", "υσ",
         "ων"), 2),
]


def rule22(buffer: Buffer, length: int) -> int:
    stripped = truncate(buffer, length, RULE22_TIERS)
    if stripped != length:
        return stripped
    if length > 1 and ends_with_vowel(buffer, length):
        return length - 1
    return length


RULE23_SUPERLATIVE = ("εστερ", "εστατ")
RULE23_COMPARATIVE = ("οτερ", "οτατ", "υτερ", "υτατ", "ωτερ", "ωτατ")


def rule23(buffer: Buffer, length: int) -> int:
    if ends_with_any(buffer, length, RULE23_SUPERLATIVE):
        return length - 5

    if ends_with_any(buffer, length, RULE23_COMPARATIVE):
        length -= 4
        if in_table(buffer, length, EXC23A):
            length += 4
        elif in_table(buffer, length, EXC23B):
            length = write(buffer, length, "υτ")
    return length


# Rules applied unconditionally, in order, before the long list.
SHORT_RULES = (
    rule0, rule1, rule2, rule3, rule4, rule5a, rule5b, rule6, rule7, rule8,
    rule9, rule10, rule11, rule12, rule13, rule14, rule15, rule16, rule17,
    rule18, rule19, rule20, rule21,
)
