# -*- coding: utf-8 -*-
"""
Rule tables for the Greek Porter stemmer (G. Ntais, 2006).

Each sub-step is a ``Rule``: a group of endings, an optional ``keep``
predicate that vetoes the strip, and ordered ``(condition, fragment)`` pairs
re-appended to the prefix when their condition holds. All predicates look at
the prefix left after the ending is removed.
"""
from __future__ import annotations

from typing import Callable, NamedTuple

Condition = Callable[[str], bool]

ALPHABET = frozenset("ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ")
VOWELS = frozenset("ΑΕΗΙΟΥΩ")


# =======================
# Conditions
# =======================
def exact(*words: str) -> Condition:
    pool = frozenset(words)
    return lambda prefix: prefix in pool


def ends_with(*tails: str) -> Condition:
    return lambda prefix: prefix.endswith(tails)


def ends_in_vowel(prefix: str) -> bool:
    return bool(prefix) and prefix[-1] in VOWELS


def shorter_than(n: int) -> Condition:
    return lambda prefix: len(prefix) < n


def any_of(*conds: Condition) -> Condition:
    return lambda prefix: any(c(prefix) for c in conds)


def all_of(*conds: Condition) -> Condition:
    return lambda prefix: all(c(prefix) for c in conds)


def negate(cond: Condition) -> Condition:
    return lambda prefix: not cond(prefix)


def always(prefix: str) -> bool:
    return True


# =======================
# Rule record
# =======================
class Rule(NamedTuple):
    name: str
    suffixes: tuple[str, ...]
    appends: tuple[tuple[Condition, str], ...] = ()
    keep: Condition | None = None


def _rule(name: str, suffixes: str, *appends: tuple[Condition, str], keep: Condition | None = None) -> Rule:
    # Longest first so the first hit is the one a lazy-prefix regex would pick.
    ordered = tuple(sorted((s for s in suffixes.split("|") if s), key=len, reverse=True))
    return Rule(name, ordered, tuple(appends), keep)


# =======================
# Step 2
# =======================
STEP_2A = _rule(
    "2a", "ΑΔΕΣ|ΑΔΩΝ",
    (negate(ends_with(
        "ΟΚ", "ΜΑΜ", "ΜΑΝ", "ΜΠΑΜΠ", "ΠΑΤΕΡ", "ΓΙΑΓΙ", "ΝΤΑΝΤ", "ΚΥΡ", "ΘΕΙ",
        "ΠΕΘΕΡ", "ΜΟΥΣΑΜ", "ΚΑΠΛΑΜ", "ΠΑΡ", "ΨΑΡ", "ΤΖΟΥΡ", "ΤΑΜΠΟΥΡ",
        "ΓΑΛΑΤ", "ΦΑΦΛΑΤ",
    )), "ΑΔ"),
)

STEP_2B = _rule(
    "2b", "ΕΔΕΣ|ΕΔΩΝ",
    (ends_with("ΟΠ", "ΙΠ", "ΕΜΠ", "ΥΠ", "ΓΗΠ", "ΔΑΠ", "ΚΡΑΣΠ", "ΜΙΛ"), "ΕΔ"),
)

STEP_2C = _rule(
    "2c", "ΟΥΔΕΣ|ΟΥΔΩΝ",
    (ends_with(
        "ΑΡΚ", "ΚΑΛΙΑΚ", "ΠΕΤΑΛ", "ΛΙΧ", "ΠΛΕΞ", "ΣΚ", "Σ", "ΦΛ", "ΦΡ", "ΒΕΛ",
        "ΛΟΥΛ", "ΧΝ", "ΣΠ", "ΤΡΑΓ", "ΦΕ",
    ), "ΟΥΔ"),
)

STEP_2D = _rule(
    "2d", "ΕΩΣ|ΕΩΝ|ΕΑΣ|ΕΑ",
    (exact("Θ", "Δ", "ΕΛ", "ΓΑΛ", "Ν", "Π", "ΙΔ", "ΠΑΡ", "ΣΤΕΡ", "ΟΡΦ", "ΑΝΔΡ", "ΑΝΤΡ"), "Ε"),
)

# =======================
# Step 3
# =======================
STEP_3A = _rule(
    "3a", "ΕΙΟ|ΕΙΟΣ|ΕΙΟΙ|ΕΙΑ|ΕΙΑΣ|ΕΙΕΣ|ΕΙΟΥ|ΕΙΟΥΣ|ΕΙΩΝ",
    keep=negate(lambda prefix: len(prefix) > 4),
)

STEP_3B = _rule(
    "3b", "ΙΟΥΣ|ΙΑΣ|ΙΕΣ|ΙΟΣ|ΙΟΥ|ΙΟΙ|ΙΩΝ|ΙΟΝ|ΙΑ|ΙΟ",
    (any_of(ends_in_vowel, shorter_than(2), exact(
        "ΑΓ", "ΑΓΓΕΛ", "ΑΓΡ", "ΑΕΡ", "ΑΘΛ", "ΑΚΟΥΣ", "ΑΞ", "ΑΣ", "Β", "ΒΙΒΛ",
        "ΒΥΤ", "Γ", "ΓΙΑΓ", "ΓΩΝ", "Δ", "ΔΑΝ", "ΔΗΛ", "ΔΗΜ", "ΔΟΚΙΜ", "ΕΛ",
        "ΖΑΧΑΡ", "ΗΛ", "ΗΠ", "ΙΔ", "ΙΣΚ", "ΙΣΤ", "ΙΟΝ", "ΙΩΝ", "ΚΙΜΩΛ",
        "ΚΟΛΟΝ", "ΚΟΡ", "ΚΤΗΡ", "ΚΥΡ", "ΛΑΓ", "ΛΟΓ", "ΜΑΓ", "ΜΠΑΝ", "ΜΠΡ",
        "ΝΑΥΤ", "ΝΟΤ", "ΟΠΑΛ", "ΟΞ", "ΟΡ", "ΟΣ", "ΠΑΝΑΓ", "ΠΑΤΡ", "ΠΗΛ", "ΠΗΝ",
        "ΠΛΑΙΣ", "ΠΟΝΤ", "ΡΑΔ", "ΡΟΔ", "ΣΚ", "ΣΚΟΡΠ", "ΣΟΥΝ", "ΣΠΑΝ", "ΣΤΑΔ",
        "ΣΥΡ", "ΤΗΛ", "ΤΙΜ", "ΤΟΚ", "ΤΟΠ", "ΤΡΟΧ", "ΦΙΛ", "ΦΩΤ", "Χ", "ΧΙΛ",
        "ΧΡΩΜ", "ΧΩΡ",
    )), "Ι"),
    (exact("ΠΑΛ"), "ΑΙ"),
)

# =======================
# Step 4
# =======================
STEP_4 = _rule(
    "4", "ΙΚΟΣ|ΙΚΟΝ|ΙΚΕΙΣ|ΙΚΟΙ|ΙΚΕΣ|ΙΚΟΥΣ|ΙΚΗ|ΙΚΗΣ|ΙΚΟ|ΙΚΑ|ΙΚΟΥ|ΙΚΩΝ|ΙΚΩΣ",
    (any_of(ends_in_vowel, exact(
        "ΑΔ", "ΑΛ", "ΑΜΑΝ", "ΑΜΕΡ", "ΑΜΜΟΧΑΛ", "ΑΝΗΘ", "ΑΝΤΙΔ", "ΑΠΛ", "ΑΤΤ",
        "ΑΦΡ", "ΒΑΣ", "ΒΡΩΜ", "ΓΕΝ", "ΓΕΡ", "Δ", "ΔΙΚΑΝ", "ΔΥΤ", "ΕΙΔ", "ΕΝΔ",
        "ΕΞΩΔ", "ΗΘ", "ΘΕΤ", "ΚΑΛΛΙΝ", "ΚΑΛΠ", "ΚΑΤΑΔ", "ΚΟΥΖΙΝ", "ΚΡ", "ΚΩΔ",
        "ΛΟΓ", "Μ", "ΜΕΡ", "ΜΟΝΑΔ", "ΜΟΥΛ", "ΜΟΥΣ", "ΜΠΑΓΙΑΤ", "ΜΠΑΝ", "ΜΠΟΛ",
        "ΜΠΟΣ", "ΜΥΣΤ", "Ν", "ΝΙΤ", "ΞΙΚ", "ΟΠΤ", "ΠΑΝ", "ΠΕΤΣ", "ΠΙΚΑΝΤ",
        "ΠΙΤΣ", "ΠΛΑΣΤ", "ΠΛΙΑΤΣ", "ΠΟΝΤ", "ΠΟΣΤΕΛΝ", "ΠΡΩΤΟΔ", "ΣΕΡΤ",
        "ΣΗΜΑΝΤ", "ΣΤΑΤ", "ΣΥΝΑΔ", "ΣΥΝΟΜΗΛ", "ΤΕΛ", "ΤΕΧΝ", "ΤΡΟΠ", "ΤΣΑΜ",
        "ΥΠΟΔ", "Φ", "ΦΙΛΟΝ", "ΦΥΛΟΔ", "ΦΥΣ", "ΧΑΣ",
    ), ends_with("ΦΟΙΝ")), "ΙΚ"),
)

# =======================
# Step 5
# =======================
# 5a also rewrites the bare word ΑΓΑΜΕ before these run (see stemmer).
STEP_5A_WHOLE = {"ΑΓΑΜΕ": "ΑΓΑΜ"}

STEP_5A1 = _rule("5a", "ΑΓΑΜΕ|ΗΣΑΜΕ|ΟΥΣΑΜΕ|ΗΚΑΜΕ|ΗΘΗΚΑΜΕ")

STEP_5A2 = _rule(
    "5a", "ΑΜΕ",
    (exact("ΑΝΑΠ", "ΑΠΟΘ", "ΑΠΟΚ", "ΑΠΟΣΤ", "ΒΟΥΒ", "ΞΕΘ", "ΟΥΛ", "ΠΕΘ", "ΠΙΚΡ", "ΠΟΤ", "ΣΙΧ", "Χ"), "ΑΜ"),
)

STEP_5B1 = _rule(
    "5b", "ΑΓΑΝΕ|ΗΣΑΝΕ|ΟΥΣΑΝΕ|ΙΟΝΤΑΝΕ|ΙΟΤΑΝΕ|ΙΟΥΝΤΑΝΕ|ΟΝΤΑΝΕ|ΟΤΑΝΕ|ΟΥΝΤΑΝΕ|ΗΚΑΝΕ|ΗΘΗΚΑΝΕ",
    (exact("ΤΡ", "ΤΣ"), "ΑΓΑΝ"),
)

STEP_5B2 = _rule(
    "5b", "ΑΝΕ",
    (any_of(ends_in_vowel, exact(
        "ΒΕΤΕΡ", "ΒΟΥΛΚ", "ΒΡΑΧΜ", "Γ", "ΔΡΑΔΟΥΜ", "Θ", "ΚΑΛΠΟΥΖ", "ΚΑΣΤΕΛ",
        "ΚΟΡΜΟΡ", "ΛΑΟΠΛ", "ΜΩΑΜΕΘ", "Μ", "ΜΟΥΣΟΥΛΜΑΝ", "ΟΥΛ", "Π", "ΠΕΛΕΚ",
        "ΠΛ", "ΠΟΛΙΣ", "ΠΟΡΤΟΛ", "ΣΑΡΑΚΑΤΣ", "ΣΟΥΛΤ", "ΤΣΑΡΛΑΤ", "ΟΡΦ",
        "ΤΣΙΓΓ", "ΤΣΟΠ", "ΦΩΤΟΣΤΕΦ", "Χ", "ΨΥΧΟΠΛ", "ΑΓ", "ΟΡΦ", "ΓΑΛ", "ΓΕΡ",
        "ΔΕΚ", "ΔΙΠΛ", "ΑΜΕΡΙΚΑΝ", "ΟΥΡ", "ΠΙΘ", "ΠΟΥΡΙΤ", "Σ", "ΖΩΝΤ", "ΙΚ",
        "ΚΑΣΤ", "ΚΟΠ", "ΛΙΧ", "ΛΟΥΘΗΡ", "ΜΑΙΝΤ", "ΜΕΛ", "ΣΙΓ", "ΣΠ", "ΣΤΕΓ",
        "ΤΡΑΓ", "ΤΣΑΓ", "Φ", "ΕΡ", "ΑΔΑΠ", "ΑΘΙΓΓ", "ΑΜΗΧ", "ΑΝΙΚ", "ΑΝΟΡΓ",
        "ΑΠΗΓ", "ΑΠΙΘ", "ΑΤΣΙΓΓ", "ΒΑΣ", "ΒΑΣΚ", "ΒΑΘΥΓΑΛ", "ΒΙΟΜΗΧ",
        "ΒΡΑΧΥΚ", "ΔΙΑΤ", "ΔΙΑΦ", "ΕΝΟΡΓ", "ΘΥΣ", "ΚΑΠΝΟΒΙΟΜΗΧ", "ΚΑΤΑΓΑΛ",
        "ΚΛΙΒ", "ΚΟΙΛΑΡΦ", "ΛΙΒ", "ΜΕΓΛΟΒΙΟΜΗΧ", "ΜΙΚΡΟΒΙΟΜΗΧ", "ΝΤΑΒ",
        "ΞΗΡΟΚΛΙΒ", "ΟΛΙΓΟΔΑΜ", "ΟΛΟΓΑΛ", "ΠΕΝΤΑΡΦ", "ΠΕΡΗΦ", "ΠΕΡΙΤΡ",
        "ΠΛΑΤ", "ΠΟΛΥΔΑΠ", "ΠΟΛΥΜΗΧ", "ΣΤΕΦ", "ΤΑΒ", "ΤΕΤ", "ΥΠΕΡΗΦ",
        "ΥΠΟΚΟΠ", "ΧΑΜΗΛΟΔΑΠ", "ΨΗΛΟΤΑΒ",
    )), "ΑΝ"),
)

STEP_5C1 = _rule("5c", "ΗΣΕΤΕ")

STEP_5C2 = _rule(
    "5c", "ΕΤΕ",
    (any_of(ends_in_vowel, ends_with(
        "ΟΔ", "ΑΙΡ", "ΦΟΡ", "ΤΑΘ", "ΔΙΑΘ", "ΣΧ", "ΕΝΔ", "ΕΥΡ", "ΤΙΘ", "ΥΠΕΡΘ",
        "ΡΑΘ", "ΕΝΘ", "ΡΟΘ", "ΣΘ", "ΠΥΡ", "ΑΙΝ", "ΣΥΝΔ", "ΣΥΝ", "ΣΥΝΘ", "ΧΩΡ",
        "ΠΟΝ", "ΒΡ", "ΚΑΘ", "ΕΥΘ", "ΕΚΘ", "ΝΕΤ", "ΡΟΝ", "ΑΡΚ", "ΒΑΡ", "ΒΟΛ",
        "ΩΦΕΛ",
    ), exact(
        "ΑΒΑΡ", "ΒΕΝ", "ΕΝΑΡ", "ΑΒΡ", "ΑΔ", "ΑΘ", "ΑΝ", "ΑΠΛ", "ΒΑΡΟΝ", "ΝΤΡ",
        "ΣΚ", "ΚΟΠ", "ΜΠΟΡ", "ΝΙΦ", "ΠΑΓ", "ΠΑΡΑΚΑΛ", "ΣΕΡΠ", "ΣΚΕΛ", "ΣΥΡΦ",
        "ΤΟΚ", "Υ", "Δ", "ΕΜ", "ΘΑΡΡ", "Θ",
    )), "ΕΤ"),
)

STEP_5D = _rule(
    "5d", "ΟΝΤΑΣ|ΩΝΤΑΣ",
    (exact("ΑΡΧ"), "ΟΝΤ"),
    (ends_with("ΚΡΕ"), "ΩΝΤ"),
)

STEP_5E = _rule(
    "5e", "ΟΜΑΣΤΕ|ΙΟΜΑΣΤΕ",
    (exact("ΟΝ"), "ΟΜΑΣΤ"),
)

STEP_5F1 = _rule(
    "5f", "ΙΕΣΤΕ",
    (exact("Π", "ΑΠ", "ΣΥΜΠ", "ΑΣΥΜΠ", "ΑΚΑΤΑΠ", "ΑΜΕΤΑΜΦ"), "ΙΕΣΤ"),
)

STEP_5F2 = _rule(
    "5f", "ΕΣΤΕ",
    (exact("ΑΛ", "ΑΡ", "ΕΚΤΕΛ", "Ζ", "Μ", "Ξ", "ΠΑΡΑΚΑΛ", "ΠΡΟ", "ΝΙΣ"), "ΕΣΤ"),
)

STEP_5G1 = _rule("5g", "ΗΘΗΚΑ|ΗΘΗΚΕΣ|ΗΘΗΚΕ")

STEP_5G2 = _rule(
    "5g", "ΗΚΑ|ΗΚΕΣ|ΗΚΕ",
    (any_of(
        ends_with("ΣΚΩΛ", "ΣΚΟΥΛ", "ΝΑΡΘ", "ΣΦ", "ΟΘ", "ΠΙΘ"),
        exact("ΔΙΑΘ", "Θ", "ΠΑΡΑΚΑΤΑΘ", "ΠΡΟΣΘ", "ΣΥΝΘ"),
    ), "ΗΚ"),
)

STEP_5H = _rule(
    "5h", "ΟΥΣΑ|ΟΥΣΕΣ|ΟΥΣΕ",
    (any_of(ends_in_vowel, exact(
        "ΦΑΡΜΑΚ", "ΧΑΔ", "ΑΓΚ", "ΑΝΑΡΡ", "ΒΡΟΜ", "ΕΚΛΙΠ", "ΛΑΜΠΙΔ", "ΛΕΧ", "Μ",
        "ΠΑΤ", "Ρ", "Λ", "ΜΕΔ", "ΜΕΣΑΖ", "ΥΠΟΤΕΙΝ", "ΑΜ", "ΑΙΘ", "ΑΝΗΚ",
        "ΔΕΣΠΟΖ", "ΕΝΔΙΑΦΕΡ",
    ), ends_with(
        "ΠΟΔΑΡ", "ΒΛΕΠ", "ΠΑΝΤΑΧ", "ΦΡΥΔ", "ΜΑΝΤΙΛ", "ΜΑΛΛ", "ΚΥΜΑΤ", "ΛΑΧ",
        "ΛΗΓ", "ΦΑΓ", "ΟΜ", "ΠΡΩΤ",
    )), "ΟΥΣ"),
)

STEP_5I = _rule(
    "5i", "ΑΓΑ|ΑΓΕΣ|ΑΓΕ",
    (any_of(
        exact(
            "ΑΒΑΣΤ", "ΠΟΛΥΦ", "ΑΔΗΦ", "ΠΑΜΦ", "Ρ", "ΑΣΠ", "ΑΦ", "ΑΜΑΛ", "ΑΜΑΛΛΙ",
            "ΑΝΥΣΤ", "ΑΠΕΡ", "ΑΣΠΑΡ", "ΑΧΑΡ", "ΔΕΡΒΕΝ", "ΔΡΟΣΟΠ", "ΞΕΦ", "ΝΕΟΠ",
            "ΝΟΜΟΤ", "ΟΛΟΠ", "ΟΜΟΤ", "ΠΡΟΣΤ", "ΠΡΟΣΩΠΟΠ", "ΣΥΜΠ", "ΣΥΝΤ", "Τ",
            "ΥΠΟΤ", "ΧΑΡ", "ΑΕΙΠ", "ΑΙΜΟΣΤ", "ΑΝΥΠ", "ΑΠΟΤ", "ΑΡΤΙΠ", "ΔΙΑΤ",
            "ΕΝ", "ΕΠΙΤ", "ΚΡΟΚΑΛΟΠ", "ΣΙΔΗΡΟΠ", "Λ", "ΝΑΥ", "ΟΥΛΑΜ", "ΟΥΡ", "Π",
            "ΤΡ", "Μ",
        ),
        all_of(
            ends_with("ΟΦ", "ΠΕΛ", "ΧΟΡΤ", "ΛΛ", "ΣΦ", "ΡΠ", "ΦΡ", "ΠΡ", "ΛΟΧ", "ΣΜΗΝ"),
            negate(exact("ΨΟΦ", "ΝΑΥΛΟΧ")),
        ),
        ends_with("ΚΟΛΛ"),
    ), "ΑΓ"),
)

STEP_5J = _rule(
    "5j", "ΗΣΕ|ΗΣΟΥ|ΗΣΑ",
    (exact("Ν", "ΧΕΡΣΟΝ", "ΔΩΔΕΚΑΝ", "ΕΡΗΜΟΝ", "ΜΕΓΑΛΟΝ", "ΕΠΤΑΝ", "Ι"), "ΗΣ"),
)

STEP_5K = _rule(
    "5k", "ΗΣΤΕ",
    (exact("ΑΣΒ", "ΣΒ", "ΑΧΡ", "ΧΡ", "ΑΠΛ", "ΑΕΙΜΝ", "ΔΥΣΧΡ", "ΕΥΧΡ", "ΚΟΙΝΟΧΡ", "ΠΑΛΙΜΨ"), "ΗΣΤ"),
)

STEP_5L = _rule(
    "5l", "ΟΥΝΕ|ΗΣΟΥΝΕ|ΗΘΟΥΝΕ",
    (exact("Ν", "Ρ", "ΣΠΙ", "ΣΤΡΑΒΟΜΟΥΤΣ", "ΚΑΚΟΜΟΥΤΣ", "ΕΞΩΝ"), "ΟΥΝ"),
)

STEP_5M = _rule(
    "5m", "ΟΥΜΕ|ΗΣΟΥΜΕ|ΗΘΟΥΜΕ",
    (exact("ΠΑΡΑΣΟΥΣ", "Φ", "Χ", "ΩΡΙΟΠΛ", "ΑΖ", "ΑΛΛΟΣΟΥΣ", "ΑΣΟΥΣ"), "ΟΥΜ"),
)

# =======================
# Step 6
# =======================
STEP_6A = _rule(
    "6a", "ΜΑΤΟΙ|ΜΑΤΟΥΣ|ΜΑΤΟ|ΜΑΤΑ|ΜΑΤΩΣ|ΜΑΤΩΝ|ΜΑΤΟΣ|ΜΑΤΕΣ|ΜΑΤΗ|ΜΑΤΗΣ|ΜΑΤΟΥ",
    (always, "Μ"),
    (exact("ΓΡΑΜ"), "Α"),
    (exact("ΓΕ", "ΣΤΑ"), "ΑΤ"),
)

STEP_6B = _rule("6b", "ΟΥΑ", (always, "ΟΥ"))

# =======================
# Long words
# =======================
LONG_WORD = _rule(
    "long",
    "Α|ΑΓΑΤΕ|ΑΓΑΝ|ΑΕΙ|ΑΜΑΙ|ΑΝ|ΑΣ|ΑΣΑΙ|ΑΤΑΙ|ΑΩ|Ε|ΕΙ|ΕΙΣ|ΕΙΤΕ|ΕΣΑΙ|ΕΣ|ΕΤΑΙ|Ι|"
    "ΙΕΜΑΙ|ΙΕΜΑΣΤΕ|ΙΕΤΑΙ|ΙΕΣΑΙ|ΙΕΣΑΣΤΕ|ΙΟΜΑΣΤΑΝ|ΙΟΜΟΥΝ|ΙΟΜΟΥΝΑ|ΙΟΝΤΑΝ|"
    "ΙΟΝΤΟΥΣΑΝ|ΙΟΣΑΣΤΑΝ|ΙΟΣΑΣΤΕ|ΙΟΣΟΥΝ|ΙΟΣΟΥΝΑ|ΙΟΤΑΝ|ΙΟΥΜΑ|ΙΟΥΜΑΣΤΕ|"
    "ΙΟΥΝΤΑΙ|ΙΟΥΝΤΑΝ|Η|ΗΔΕΣ|ΗΔΩΝ|ΗΘΕΙ|ΗΘΕΙΣ|ΗΘΕΙΤΕ|ΗΘΗΚΑΤΕ|ΗΘΗΚΑΝ|ΗΘΟΥΝ|"
    "ΗΘΩ|ΗΚΑΤΕ|ΗΚΑΝ|ΗΣ|ΗΣΑΝ|ΗΣΑΤΕ|ΗΣΕΙ|ΗΣΕΣ|ΗΣΟΥΝ|ΗΣΩ|Ο|ΟΙ|ΟΜΑΙ|ΟΜΑΣΤΑΝ|"
    "ΟΜΟΥΝ|ΟΜΟΥΝΑ|ΟΝΤΑΙ|ΟΝΤΑΝ|ΟΝΤΟΥΣΑΝ|ΟΣ|ΟΣΑΣΤΑΝ|ΟΣΑΣΤΕ|ΟΣΟΥΝ|ΟΣΟΥΝΑ|"
    "ΟΤΑΝ|ΟΥ|ΟΥΜΑΙ|ΟΥΜΑΣΤΕ|ΟΥΝ|ΟΥΝΤΑΙ|ΟΥΝΤΑΝ|ΟΥΣ|ΟΥΣΑΝ|ΟΥΣΑΤΕ|Υ|ΥΑ|ΥΣ|Ω|"
    "ΩΝ|ΟΙΣ",
)

# =======================
# Step 7
# =======================
STEP_7 = _rule(
    "7", "ΕΣΤΕΡ|ΕΣΤΑΤ|ΟΤΕΡ|ΟΤΑΤ|ΥΤΕΡ|ΥΤΑΤ|ΩΤΕΡ|ΩΤΑΤ",
    (exact("ΚΑ", "Μ", "ΕΛΕ", "ΛΕ", "ΔΕ"), "ΥΤ"),
    keep=exact("ΕΞ", "ΕΣ", "ΑΝ", "ΚΑΤ", "Κ", "ΠΡ"),
)

# Order matters: each rule sees the previous rule's output.
PIPELINE: tuple[Rule, ...] = (
    STEP_2A, STEP_2B, STEP_2C, STEP_2D,
    STEP_3A, STEP_3B,
    STEP_4,
    STEP_5A1, STEP_5A2,
    STEP_5B1, STEP_5B2,
    STEP_5C1, STEP_5C2,
    STEP_5D,
    STEP_5E,
    STEP_5F1, STEP_5F2,
    STEP_5G1, STEP_5G2,
    STEP_5H,
    STEP_5I,
    STEP_5J,
    STEP_5K,
    STEP_5L,
    STEP_5M,
    STEP_6A, STEP_6B,
)
