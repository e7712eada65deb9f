# -*- coding: utf-8 -*-
import contextlib
import io
import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from greek_stemmer.cli import main
from greek_stemmer.stemmer import set_debug


def _run(argv, stdin=""):
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("sys.stdin", io.StringIO(stdin)), \
         contextlib.redirect_stdout(out), \
         contextlib.redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_words_from_arguments(self):
        code, out, _ = _run(["αγάπης", "γράμματα", "το"])
        self.assertEqual(code, 0)
        self.assertEqual(out.split(), ["ΑΓΑΠ", "ΓΡΑΜΜΑ", "ΤΟ"])

    def test_words_from_stdin(self):
        code, out, _ = _run([], stdin="δρόμος δρόμοι\nάνθρωπος\n")
        self.assertEqual(code, 0)
        self.assertEqual(out.split(), ["ΔΡΟΜ", "ΔΡΟΜ", "ΑΝΘΡΩΠ"])

    def test_debug_trace_stays_off_stdout(self):
        self.addCleanup(set_debug, False)
        code, out, _ = _run(["--debug", "λεμονάδες"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "ΛΕΜΟΝΑΔ\n")
        handlers = logging.getLogger("greek_stemmer").handlers
        self.assertTrue(handlers)
        self.assertNotIn(sys.__stdout__, [getattr(h, "stream", None) for h in handlers])

    def test_explicit_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            p = Path(tmp) / "config.json"
            p.write_text(json.dumps({"exceptions": {"ΕΥΑ": "ΕΥ"}, "protectedwords": ["ΔΡΟΜΟΣ"]}), encoding="utf-8")
            code, out, _ = _run(["--config", str(p), "δρόμος"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "ΔΡΟΜΟΣ")

    def test_bad_config_exits_with_error(self):
        code, out, err = _run(["--config", "/nonexistent/stemmer_config.json", "δρόμος"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error", err)


if __name__ == "__main__":
    unittest.main()
