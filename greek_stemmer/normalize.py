# -*- coding: utf-8 -*-
from __future__ import annotations

import unicodedata

from greek_stemmer.rules import ALPHABET


def normalize(text: str) -> str:
    """
    Fold text to the form the rules are written in: accents and other
    combining marks removed, composed, uppercased ('αγάπης' -> 'ΑΓΑΠΗΣ').
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped).upper()


def is_greek(word: str) -> bool:
    return bool(word) and all(ch in ALPHABET for ch in word)


def log_codepoints(word: str) -> str:
    return " ".join(hex(ord(c)) for c in word)
