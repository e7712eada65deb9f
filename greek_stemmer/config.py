# -*- coding: utf-8 -*-
"""
Stemmer configuration: the exceptions table and the protected words.

The resource is a JSON object::

    {"exceptions": {"ΚΡΕΑΤΑ": "ΚΡΕ", ...}, "protectedwords": ["ΑΛΛΑ", ...]}

It is read once and never mutated afterwards.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from greek_stemmer.normalize import normalize

logger = logging.getLogger("greek_stemmer.config")

CONFIG_FILE_ENV = "GREEK_STEMMER_CONFIG_PATH"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "data" / "stemmer_config.json"


class StemmerConfigError(ValueError):
    """Raised when the configuration is missing or malformed."""


class StemmerConfig:
    __slots__ = ("exceptions", "protected_words")

    def __init__(self, exceptions: Mapping[str, str], protected_words):
        if not exceptions:
            raise StemmerConfigError("exceptions table is empty")
        table = {}
        for form, replacement in exceptions.items():
            if not isinstance(form, str) or not isinstance(replacement, str) or not form:
                raise StemmerConfigError(f"bad exception entry: {form!r} -> {replacement!r}")
            table[normalize(form)] = normalize(replacement)
        words = set()
        for w in protected_words:
            if not isinstance(w, str):
                raise StemmerConfigError(f"bad protected word: {w!r}")
            words.add(normalize(w))
        object.__setattr__(self, "exceptions", MappingProxyType(table))
        object.__setattr__(self, "protected_words", frozenset(words))

    def __setattr__(self, name, value):
        raise AttributeError("StemmerConfig is read-only")

    def __repr__(self):
        return (
            f"StemmerConfig(exceptions={len(self.exceptions)}, "
            f"protected_words={len(self.protected_words)})"
        )

    @classmethod
    def from_dict(cls, data: Any) -> "StemmerConfig":
        if not isinstance(data, dict):
            raise StemmerConfigError("config must be a JSON object")
        missing = [k for k in ("exceptions", "protectedwords") if k not in data]
        if missing:
            raise StemmerConfigError(f"config lacks {', '.join(missing)}")
        exceptions = data["exceptions"]
        protected = data["protectedwords"]
        if not isinstance(exceptions, dict):
            raise StemmerConfigError("'exceptions' must be an object")
        if not isinstance(protected, list):
            raise StemmerConfigError("'protectedwords' must be a list")
        return cls(exceptions, protected)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    path_str = os.environ.get(CONFIG_FILE_ENV)
    return Path(path_str) if path_str else DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> StemmerConfig:
    """Load and validate the config; any problem is fatal."""
    p = resolve_config_path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: '{p}'")
        raise StemmerConfigError(f"config file not found: {p}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON from config file '{p}': {e}")
        raise StemmerConfigError(f"invalid JSON in {p}: {e}") from e

    try:
        config = StemmerConfig.from_dict(data)
    except StemmerConfigError as e:
        logger.error(f"Rejected config '{p}': {e}")
        raise

    logger.info(
        f"Loaded {len(config.exceptions)} exceptions and "
        f"{len(config.protected_words)} protected words from '{p}'"
    )
    return config
