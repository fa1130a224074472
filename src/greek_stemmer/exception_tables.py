"""Exception tables consulted by the suffix rules.

Each table is a set of stems compared for exact equality against the whole
remaining stem ``buffer[:length]`` after a rule has tentatively removed a
suffix. Membership either vetoes the removal or triggers a substitution,
depending on the rule. Tables are built once at import and never mutated.

Examples of the classes the tables cover:

- rule 4 (εασ, εα): παρεα - παρεασ - παρεεσ, στερεα - στερεασ - στερεεσ
- rule 5 (ιο, ια, ιοσ, ...): ηλιοσ - ηλοσ, αγριοσ - αγροσ, χωρα - χωριο,
  αγιοσ - αγων, φωτο - φωτια, νοτα - νοτια, δημοσ - δημιοσ, σπανιοσ - σπανοσ
"""

from __future__ import annotations

from typing import FrozenSet, Sequence

EXC4: FrozenSet[str] = frozenset([
    "θ", "δ", "ελ", "γαλ", "ν", "π", "ιδ", "παρ", "στερ", "ορφ", "ανδρ", "αντρ",
])

EXC5: FrozenSet[str] = frozenset([
    "αγ", "αγγελ", "αγρ", "αερ", "αθλ", "ακουσ", "αξ", "ασ", "β", "βιβλ",
    "βυτ", "γ", "γιαγ", "γων", "δ", "δαν", "δηλ", "δημ", "δοκιμ", "ελ",
    "ζαχαρ", "ηλ", "ηπ", "ιδ", "ισκ", "ιστ", "ιον", "ιων", "κιμωλ", "κολον",
    "κορ", "κτηρ", "κυρ", "λαγ", "λογ", "μαγ", "μπαν", "μπετον", "μπρ",
    "ναυτ", "νοτ", "οπαλ", "οξ", "ορ", "οσ", "παναγ", "πατρ", "πηλ", "πην",
    "πλαισ", "ποντ", "ραδ", "ροδ", "σκ", "σκορπ", "σουν", "σπαν", "σταδ",
    "συρ", "τηλ", "τιμ", "τοκ", "τοπ", "τροχ", "χωρ", "φιλ", "φωτ", "χ",
    "χιλ", "χρωμ",
])

EXC6: FrozenSet[str] = frozenset([
    "αδ", "αλ", "αμαν", "αμερ", "αμμοχαλ", "ανηθ", "αντιδ", "απλ", "αττ",
    "αφρ", "βασ", "βρωμ", "γεν", "γερ", "δ", "δικαν", "δυτ", "ειδ", "ενδ",
    "εξωδ", "ηθ", "θετ", "καλλιν", "καλπ", "καταδ", "κουζιν", "κρ", "κωδ",
    "λογ", "μ", "μερ", "μοναδ", "μουλ", "μουσ", "μπαγιατ", "μπαν", "μπολ",
    "μποσ", "μυστ", "ν", "νιτ", "ξικ", "οπτ", "παν", "πετσ", "πικαντ",
    "πιτσ", "πλαστ", "πλιατσ", "ποντ", "ποστελν", "πρωτοδ", "σερτ",
    "σημαντ", "στατ", "συναδ", "συνομηλ", "τελ", "τεχν", "τροπ", "τσαμ",
    "υποδ", "φ", "φιλον", "φυλοδ", "φυσ", "χασ",
])

EXC7: FrozenSet[str] = frozenset([
    "αναπ", "αποθ", "αποκ", "αποστ", "βουβ", "ξεθ", "ουλ", "πεθ", "πικρ",
    "ποτ", "σιχ", "χ",
])

# stems that take the -αγαν form after a long -ανε ending is removed
EXC8A: FrozenSet[str] = frozenset(["τρ", "τσ"])

EXC8B: FrozenSet[str] = frozenset([
    "βετερ", "βουλκ", "βραχμ", "γ", "δραδουμ", "θ", "καλπουζ", "καστελ",
    "κορμορ", "λαοπλ", "μωαμεθ", "μ", "μουσουλμ", "ν", "ουλ", "π", "πελεκ",
    "πλ", "πολισ", "πορτολ", "σαρακατσ", "σουλτ", "τσαρλατ", "ορφ", "τσιγγ",
    "τσοπ", "φωτοστεφ", "χ", "ψυχοπλ", "αγ", "γαλ", "γερ", "δεκ", "διπλ",
    "αμερικαν", "ουρ", "πιθ", "πουριτ", "σ", "ζωντ", "ικ", "καστ", "κοπ",
    "λιχ", "λουθηρ", "μαιντ", "μελ", "σιγ", "σπ", "στεγ", "τραγ", "τσαγ",
    "φ", "ερ", "αδαπ", "αθιγγ", "αμηχ", "ανικ", "ανοργ", "απηγ", "απιθ",
    "ατσιγγ", "βασ", "βασκ", "βαθυγαλ", "βιομηχ", "βραχυκ", "διατ", "διαφ",
    "ενοργ", "θυσ", "καπνοβιομηχ", "καταγαλ", "κλιβ", "κοιλαρφ", "λιβ",
    "μεγλοβιομηχ", "μικροβιομηχ", "νταβ", "ξηροκλιβ", "ολιγοδαμ", "ολογαλ",
    "πενταρφ", "περηφ", "περιτρ", "πλατ", "πολυδαπ", "πολυμηχ", "στεφ",
    "ταβ", "τετ", "υπερηφ", "υποκοπ", "χαμηλοδαπ", "ψηλοταβ",
])

EXC9: FrozenSet[str] = frozenset([
    "αβαρ", "βεν", "εναρ", "αβρ", "αδ", "αθ", "αν", "απλ", "βαρον", "ντρ",
    "σκ", "κοπ", "μπορ", "νιφ", "παγ", "παρακαλ", "σερπ", "σκελ", "συρφ",
    "τοκ", "υ", "δ", "εμ", "θαρρ", "θ",
])

EXC12A: FrozenSet[str] = frozenset(["π", "απ", "συμπ", "ασυμπ", "ακαταπ", "αμεταμφ"])

EXC12B: FrozenSet[str] = frozenset([
    "αλ", "αρ", "εκτελ", "ζ", "μ", "ξ", "παρακαλ", "προ", "νισ",
])

EXC13: FrozenSet[str] = frozenset(["διαθ", "θ", "παρακαταθ", "προσθ", "συνθ"])

EXC14: FrozenSet[str] = frozenset([
    "φαρμακ", "χαδ", "αγκ", "αναρρ", "βρομ", "εκλιπ", "λαμπιδ", "λεχ", "μ",
    "πατ", "ρ", "λ", "μεδ", "μεσαζ", "υποτειν", "αμ", "αιθ", "ανηκ",
    "δεσποζ", "ενδιαφερ", "δε", "δευτερευ", "καθαρευ", "πλε", "τσα",
])

EXC15A: FrozenSet[str] = frozenset([
    "αβαστ", "πολυφ", "αδηφ", "παμφ", "ρ", "ασπ", "αφ", "αμαλ", "αμαλλι",
    "ανυστ", "απερ", "ασπαρ", "αχαρ", "δερβεν", "δροσοπ", "ξεφ", "νεοπ",
    "νομοτ", "ολοπ", "ομοτ", "προστ", "προσωποπ", "συμπ", "συντ", "τ",
    "υποτ", "χαρ", "αειπ", "αιμοστ", "ανυπ", "αποτ", "αρτιπ", "διατ", "εν",
    "επιτ", "κροκαλοπ", "σιδηροπ", "λ", "ναυ", "ουλαμ", "ουρ", "π", "τρ",
    "μ",
])

# vetoes a rule 15 restore even when EXC15A (or its suffix list) matched
EXC15B: FrozenSet[str] = frozenset(["ψοφ", "ναυλοχ"])

EXC16: FrozenSet[str] = frozenset([
    "ν", "χερσον", "δωδεκαν", "ερημον", "μεγαλον", "επταν", "ι",
])

EXC17: FrozenSet[str] = frozenset([
    "ασβ", "σβ", "αχρ", "χρ", "απλ", "αειμν", "δυσχρ", "ευχρ", "κοινοχρ",
    "παλιμψ",
])

EXC18: FrozenSet[str] = frozenset([
    "ν", "ρ", "σπι", "στραβομουτσ", "κακομουτσ", "εξων",
])

EXC19: FrozenSet[str] = frozenset([
    "παρασουσ", "φ", "χ", "ωριοπλ", "αζ", "αλλοσουσ", "ασουσ",
])

EXC20A: FrozenSet[str] = frozenset(["γραμμ"])
EXC20B: FrozenSet[str] = frozenset(["γεμ", "σταμ"])

EXC23A: FrozenSet[str] = frozenset(["εξ", "εσ", "κατ", "αν", "κ", "μ", "πρ"])
EXC23B: FrozenSet[str] = frozenset(["κα", "μ", "λε", "ελε", "δε"])


def in_table(buffer: Sequence[str], length: int, table: FrozenSet[str]) -> bool:
    """Exact-match test of the current stem ``buffer[:length]`` against ``table``."""
    return "".join(buffer[:length]) in table
