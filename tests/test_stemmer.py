# -*- coding: utf-8 -*-
import json
import unittest
from pathlib import Path

from greek_stemmer.config import load_config
from greek_stemmer.normalize import normalize
from greek_stemmer.stemmer import GreekStemmer, stem_greek_word

TESTDATA_PATH = Path(__file__).resolve().parent.parent / "data" / "processed" / "testdata.json"

with TESTDATA_PATH.open("r", encoding="utf-8") as f:
    ALL_CASES = list(json.load(f).items())

CONFIG = load_config()


class TestGreekStemmer(unittest.TestCase):
    pass


def _make_case_test(word: str, expected: str):
    def test(self):
        result = stem_greek_word(word, CONFIG)
        self.assertEqual(result, expected, f"{word} -> {result} (expected: {expected})")
    return test


for i, (word, expected) in enumerate(ALL_CASES):
    name = f"test_{i:04d}_{word}"
    safe_name = "".join(ch if (ch.isalnum() or ch == "_") else "_" for ch in name)
    setattr(TestGreekStemmer, safe_name, _make_case_test(word, expected))


class TestStemmerProperties(unittest.TestCase):
    def setUp(self):
        self.stemmer = GreekStemmer(CONFIG)

    def test_deterministic(self):
        for word, _ in ALL_CASES:
            self.assertEqual(self.stemmer.stem(word), self.stemmer.stem(word))

    def test_short_and_foreign_words_only_normalized(self):
        for word in ["το", "α", "", "HELLO123", "ΑΒC", "αβγ1", "λόγος-λόγοι", "abc"]:
            self.assertEqual(self.stemmer.stem(word), normalize(word), word)

    def test_protected_words_fixed_point(self):
        for word in CONFIG.protected_words:
            self.assertEqual(self.stemmer.stem(word), word)

    def test_protected_word_blocks_rules(self):
        # Unprotected, the long-word step would strip the final vowel.
        self.assertEqual(self.stemmer.stem("αλλά"), "ΑΛΛΑ")
        self.assertEqual(self.stemmer.stem("ΓΡΑΜΜΑ"), "ΓΡΑΜΜΑ")

    def test_growth_is_bounded(self):
        # ΟΜΑΣΤ is the longest fragment any rule re-appends.
        for word, _ in ALL_CASES:
            self.assertLessEqual(len(self.stemmer.stem(word)), len(normalize(word)) + len("ΟΜΑΣΤ"))

    def test_accent_and_case_invariance(self):
        variants = ["αγάπης", "ΑΓΑΠΗΣ", "αγαπης", "ΑγΑπΗς", "Αγάπης"]
        self.assertEqual({self.stemmer.stem(v) for v in variants}, {"ΑΓΑΠ"})

    def test_decomposed_input(self):
        decomposed = "\u03b4\u03c1\u03bf\u0301\u03bc\u03bf\u03c2"  # δρόμος, NFD
        self.assertEqual(self.stemmer.stem(decomposed), "ΔΡΟΜ")

    def test_stem_words(self):
        self.assertEqual(
            self.stemmer.stem_words(["δρόμος", "δρόμοι", "το"]),
            ["ΔΡΟΜ", "ΔΡΟΜ", "ΤΟ"],
        )

    def test_fixture_exception_cases_match_exception_list(self):
        cases = dict(ALL_CASES)
        for word in ["κρέατα", "φώτα", "καθεστώτος", "φαγιά", "ΕΥΑ"]:
            self.assertEqual(cases[word], CONFIG.exceptions[normalize(word)], word)
            self.assertEqual(self.stemmer.stem(word), cases[word], word)

    def test_default_config_is_loaded(self):
        stemmer = GreekStemmer()
        self.assertEqual(stemmer.stem("κρέατα"), "ΚΡΕ")


if __name__ == "__main__":
    unittest.main()
