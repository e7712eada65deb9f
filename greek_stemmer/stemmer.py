# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, Mapping

from greek_stemmer import rules
from greek_stemmer.config import StemmerConfig, load_config
from greek_stemmer.normalize import is_greek, log_codepoints, normalize
from greek_stemmer.rules import Rule

# =======================
# Debug configuration
# =======================
DEBUG = os.environ.get("GREEK_STEMMER_DEBUG", "").lower() in {"1", "true", "yes", "on"}
LOG_CODEPOINTS = False  # True -> log hex codepoints of words
MIN_WORD_LENGTH = 3

logger = logging.getLogger("greek_stemmer")
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    fmt = "%(levelname)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
logger.setLevel(logging.DEBUG if DEBUG else logging.INFO)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


# =======================
# Suffix matching
# =======================
def split_suffix(word: str, suffixes: tuple[str, ...]) -> tuple[str, str] | None:
    """
    Split off the longest ending in ``suffixes`` that leaves a non-empty
    prefix. ``suffixes`` must be sorted longest first.
    """
    for sfx in suffixes:
        if len(word) > len(sfx) and word.endswith(sfx):
            return word[: -len(sfx)], sfx
    return None


def apply_rule(word: str, rule: Rule) -> str:
    hit = split_suffix(word, rule.suffixes)
    if hit is None:
        return word
    prefix, sfx = hit

    out = word if rule.keep is not None and rule.keep(prefix) else prefix
    for cond, fragment in rule.appends:
        if cond(prefix):
            out += fragment

    if out != word:
        logger.debug(f"  [{rule.name}] '{word}' -> '{out}' (suffix '{sfx}')")
    return out


def resolve_exception(word: str, exceptions: Mapping[str, str]) -> str:
    """
    Replace the exceptional tail of ``word``. The shortest matching key wins
    and the key may cover the whole word.
    """
    for form in sorted(exceptions, key=len):
        if word.endswith(form):
            out = word[: -len(form)] + exceptions[form]
            logger.debug(f"  [1] '{word}' -> '{out}' (exception '{form}')")
            return out
    return word


# =======================
# Main stemmer
# =======================
def stem_greek_word(word: str, config: StemmerConfig) -> str:
    w = normalize(word)
    logger.debug("=" * 60)
    logger.debug(f"WORD '{word}' -> normalized '{w}'")
    if LOG_CODEPOINTS:
        logger.debug(f"word codepoints: {log_codepoints(w)}")

    if len(w) < MIN_WORD_LENGTH:
        logger.debug(f"Early return: '{w}' is shorter than {MIN_WORD_LENGTH}")
        return w
    if not is_greek(w):
        logger.debug(f"Early return: '{w}' is not Greek")
        return w
    if w in config.protected_words:
        logger.debug(f"Early return: '{w}' is protected")
        return w

    stemmed = resolve_exception(w, config.exceptions)

    for rule in rules.PIPELINE:
        if rule is rules.STEP_5A1 and stemmed in rules.STEP_5A_WHOLE:
            stemmed = rules.STEP_5A_WHOLE[stemmed]
        stemmed = apply_rule(stemmed, rule)

    # Only words nothing has touched get the generic endings stripped.
    if len(stemmed) == len(w):
        stemmed = apply_rule(stemmed, rules.LONG_WORD)

    stemmed = apply_rule(stemmed, rules.STEP_7)

    logger.debug(f"RESULT: '{word}' -> '{stemmed}'")
    return stemmed


class GreekStemmer:
    """Stemmer bound to one configuration; safe to share between threads."""

    def __init__(self, config: StemmerConfig | None = None):
        self.config = config if config is not None else load_config()

    def stem(self, word: str) -> str:
        return stem_greek_word(word, self.config)

    def stem_words(self, words: Iterable[str]) -> list[str]:
        return [self.stem(w) for w in words]
