import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

import wildcard_lookup
from wildcardtrie import Dictionary, format_matches, interactive_lookup, run_lookup


def _dictionary(words):
    tmpdir = tempfile.TemporaryDirectory()
    path = os.path.join(tmpdir.name, "words")
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(words) + "\n")
    d = Dictionary(path)
    tmpdir.cleanup()
    return d


class TestFormatMatches(unittest.TestCase):
    def test_header_and_sorted_words(self):
        out = format_matches("****", {"fund", "farm"})
        self.assertEqual(out, "2 words match **** in provided dict:\nfarm\nfund")

    def test_no_matches(self):
        self.assertEqual(format_matches("zz", set()), "0 words match zz in provided dict:")


class TestRunLookup(unittest.TestCase):
    def test_prints_matches(self):
        d = _dictionary(["potato", "potted", "tomato"])
        buf = io.StringIO()
        with redirect_stdout(buf):
            matches = run_lookup(d, "pot*to")
        self.assertEqual(matches, {"potato"})
        self.assertIn("1 words match pot*to in provided dict:\npotato", buf.getvalue())

    def test_prints_elapsed_time(self):
        d = _dictionary(["potato"])
        buf = io.StringIO()
        with redirect_stdout(buf):
            run_lookup(d, "pot*to")
        self.assertRegex(buf.getvalue(), r"Searched in \d+\.\d{4}s\.")


class TestInteractive(unittest.TestCase):
    def _run(self, inputs):
        d = _dictionary(["fun", "fund", "farm"])
        buf = io.StringIO()
        with mock.patch("builtins.input", side_effect=inputs), redirect_stdout(buf):
            interactive_lookup(d)
        return buf.getvalue()

    def test_commands(self):
        out = self._run(["word f*n", "prefix fund", "f***", "", "help", "quit"])
        self.assertIn("f*n: word", out)
        self.assertIn("fund: not a prefix", out)
        self.assertIn("2 words match f*** in provided dict:\nfarm\nfund", out)

    def test_eof_exits(self):
        out = self._run(EOFError())
        self.assertIn("3 words loaded", out)


class TestMain(unittest.TestCase):
    def test_single_lookup(self):
        with tempfile.TemporaryDirectory() as tmp:
            words = os.path.join(tmp, "words")
            with open(words, "w", encoding="utf-8") as f:
                f.write("potato\ntomato\n")
            buf = io.StringIO()
            with redirect_stdout(buf):
                wildcard_lookup.main(["--dict", words, "*o*a*o"])
        self.assertIn("2 words match *o*a*o in provided dict:\npotato\ntomato", buf.getvalue())

    def test_bad_wildcard_exits(self):
        with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                wildcard_lookup.main(["--wildcard", "??", "x"])


if __name__ == "__main__":
    unittest.main()
