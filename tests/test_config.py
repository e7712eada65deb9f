# -*- coding: utf-8 -*-
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from greek_stemmer import config as config_module
from greek_stemmer.config import (
    CONFIG_FILE_ENV,
    DEFAULT_CONFIG_PATH,
    StemmerConfig,
    StemmerConfigError,
    load_config,
    resolve_config_path,
)
from greek_stemmer.stemmer import stem_greek_word


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, content) -> Path:
        p = Path(self.tmp.name) / "config.json"
        if not isinstance(content, str):
            content = json.dumps(content, ensure_ascii=False)
        p.write_text(content, encoding="utf-8")
        return p

    def test_default_resource(self):
        config = load_config(DEFAULT_CONFIG_PATH)
        self.assertEqual(config.exceptions["ΚΡΕΑΤΑ"], "ΚΡΕ")
        self.assertIn("ΑΛΛΑ", config.protected_words)

    def test_default_resource_ships_inside_package(self):
        package_dir = Path(config_module.__file__).resolve().parent
        self.assertEqual(DEFAULT_CONFIG_PATH, package_dir / "data" / "stemmer_config.json")
        self.assertTrue(DEFAULT_CONFIG_PATH.is_file())
        with mock.patch.dict(os.environ, clear=True):
            self.assertEqual(resolve_config_path(), DEFAULT_CONFIG_PATH)
            self.assertEqual(load_config().exceptions["ΦΩΤΑ"], "ΦΩ")

    def test_entries_are_normalized(self):
        p = self._write({"exceptions": {"κρέατα": "κρε"}, "protectedwords": ["αλλά"]})
        config = load_config(p)
        self.assertEqual(dict(config.exceptions), {"ΚΡΕΑΤΑ": "ΚΡΕ"})
        self.assertEqual(config.protected_words, frozenset({"ΑΛΛΑ"}))

    def test_env_var_overrides_default(self):
        p = self._write({"exceptions": {"ΕΥΑ": "ΕΥ"}, "protectedwords": []})
        with mock.patch.dict(os.environ, {CONFIG_FILE_ENV: str(p)}):
            self.assertEqual(resolve_config_path(), p)
            self.assertEqual(len(load_config().exceptions), 1)

    def test_explicit_path_wins(self):
        with mock.patch.dict(os.environ, {CONFIG_FILE_ENV: "/nowhere.json"}):
            self.assertEqual(resolve_config_path("x.json"), Path("x.json"))

    def test_missing_file(self):
        with self.assertRaises(StemmerConfigError):
            load_config(Path(self.tmp.name) / "absent.json")

    def test_invalid_json(self):
        with self.assertRaises(StemmerConfigError):
            load_config(self._write("{not json"))

    def test_missing_sections(self):
        for data in ({"protectedwords": []}, {"exceptions": {"ΕΥΑ": "ΕΥ"}}, [], "text"):
            with self.subTest(data=data), self.assertRaises(StemmerConfigError):
                load_config(self._write(data))

    def test_empty_exceptions_rejected(self):
        with self.assertRaises(StemmerConfigError):
            load_config(self._write({"exceptions": {}, "protectedwords": []}))

    def test_bad_entries_rejected(self):
        bad = [
            {"exceptions": {"ΕΥΑ": 1}, "protectedwords": []},
            {"exceptions": {"ΕΥΑ": "ΕΥ"}, "protectedwords": [3]},
            {"exceptions": ["ΕΥΑ"], "protectedwords": []},
            {"exceptions": {"ΕΥΑ": "ΕΥ"}, "protectedwords": "ΑΛΛΑ"},
        ]
        for data in bad:
            with self.subTest(data=data), self.assertRaises(StemmerConfigError):
                load_config(self._write(data))


class TestStemmerConfig(unittest.TestCase):
    def test_read_only(self):
        config = StemmerConfig({"ΕΥΑ": "ΕΥ"}, ["ΑΛΛΑ"])
        with self.assertRaises(AttributeError):
            config.exceptions = {}
        with self.assertRaises(TypeError):
            config.exceptions["ΝΕΟ"] = "Ν"

    def test_custom_config_drives_stemming(self):
        config = StemmerConfig({"ΚΑΡΕΚΛΕΣ": "ΚΑΡΕΚΛ"}, ["ΔΡΟΜΟΣ"])
        self.assertEqual(stem_greek_word("δρόμος", config), "ΔΡΟΜΟΣ")
        self.assertEqual(stem_greek_word("καρέκλες", config), "ΚΑΡΕΚΛ")


if __name__ == "__main__":
    unittest.main()
