import unittest
from unittest.mock import patch
import os
import sys
import tempfile
from pathlib import Path

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import encoding_detector

class TestEncodingDetector(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_ascii_file_is_certain(self):
        path = self.root / "plain.cfg"
        path.write_bytes(b"ModelName hiyori\n")
        guess = encoding_detector.best_encoding(path)
        self.assertEqual(guess.name, "ascii")
        self.assertEqual(guess.confidence, 100)

    def test_bom_is_detected(self):
        path = self.root / "bom.cfg"
        path.write_bytes("name ひより\n".encode("utf-8-sig"))
        text, guess = encoding_detector.read_text(path)
        self.assertEqual(guess.name, "utf-8-sig")
        self.assertEqual(text, "name ひより\n")

    def test_candidates_are_sorted(self):
        path = self.root / "jp.cfg"
        path.write_bytes(("表示名 ひよりちゃん モデル\n" * 10).encode("utf-8"))
        guesses = encoding_detector.detect_encodings(path)
        confidences = [g.confidence for g in guesses]
        self.assertEqual(confidences, sorted(confidences, reverse=True))
        self.assertTrue(all(0 <= c <= 100 for c in confidences))

    @patch("console_output.warn")
    def test_short_utf8_text_is_preferred(self, mock_warn):
        path = self.root / "short.cfg"
        path.write_bytes("name hiyori\nlabel ひより\n".encode("utf-8"))
        text, guess = encoding_detector.read_text(path)
        self.assertEqual(guess.name, "utf-8")
        self.assertEqual(text, "name hiyori\nlabel ひより\n")
        mock_warn.assert_not_called()

    @patch("console_output.warn")
    def test_unsure_guess_is_reported(self, mock_warn):
        path = self.root / "sjis.cfg"
        path.write_bytes("name hiyori\nlabel ひより\n".encode("shift_jis"))
        text, guess = encoding_detector.read_text(path)
        if guess.confidence < encoding_detector.LOW_CONFIDENCE:
            mock_warn.assert_called_once()
            self.assertIn("sjis.cfg", mock_warn.call_args[0][0])
        else:
            self.assertEqual(text, "name hiyori\nlabel ひより\n")

    def test_empty_file_falls_back_to_utf8(self):
        path = self.root / "empty.cfg"
        path.write_bytes(b"")
        guess = encoding_detector.best_encoding(path)
        self.assertEqual(guess.name, "utf-8")
        self.assertEqual(guess.confidence, 0)

    def test_missing_file_raises(self):
        with self.assertRaises(OSError):
            encoding_detector.detect_encodings(self.root / "nope.cfg")

if __name__ == "__main__":
    unittest.main()
