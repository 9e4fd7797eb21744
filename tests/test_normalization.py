"""
Unit tests for word normalization and tokenization (core/normalization.py, core/tokenizer.py).
Run: python -m pytest tests/test_normalization.py -v
"""
import unittest

from core.normalization import WORD_PUNCTUATION, clean_word, normalize_transcript, normalize_whitespace
from core.tokenizer import PassageWord, tokenize_passage, tokenize_transcript


class TestCleanWord(unittest.TestCase):
    """Per-word punctuation stripping and lower-casing."""

    def test_strips_punctuation_and_case(self):
        self.assertEqual(clean_word("Puppy!"), "puppy")
        self.assertEqual(clean_word('"Hello,"'), "hello")
        self.assertEqual(clean_word("well-known;"), "wellknown")

    def test_apostrophe_removed(self):
        self.assertEqual(clean_word("don't"), "dont")

    def test_empty(self):
        self.assertEqual(clean_word(""), "")
        self.assertEqual(clean_word(None), "")
        self.assertEqual(clean_word("?!"), "")

    def test_every_listed_mark_stripped(self):
        for mark in WORD_PUNCTUATION:
            self.assertEqual(clean_word("a%sb" % mark), "ab")
        self.assertEqual(clean_word("a:b"), "a:b")


class TestNormalizeText(unittest.TestCase):
    """Whitespace and case normalization of whole texts."""

    def test_whitespace_collapsed(self):
        self.assertEqual(normalize_whitespace("  Max \t ran\n\ndown  "), "Max ran down")

    def test_transcript_lowercased(self):
        self.assertEqual(normalize_transcript("  Max  RAN down. "), "max ran down.")

    def test_none(self):
        self.assertEqual(normalize_whitespace(None), "")
        self.assertEqual(normalize_transcript(None), "")


class TestTokenizePassage(unittest.TestCase):
    """Passage words and their character offsets."""

    def test_positions_accumulate(self):
        words = tokenize_passage("Max was a pup.")
        self.assertEqual(
            words,
            [
                PassageWord("Max", 0, 3),
                PassageWord("was", 4, 7),
                PassageWord("a", 8, 9),
                PassageWord("pup.", 10, 14),
            ],
        )

    def test_case_and_punctuation_kept(self):
        words = tokenize_passage("The Dog, barked!")
        self.assertEqual([w.text for w in words], ["The", "Dog,", "barked!"])

    def test_irregular_whitespace(self):
        words = tokenize_passage("  Max  was\na pup ")
        self.assertEqual([w.text for w in words], ["Max", "was", "a", "pup"])
        self.assertEqual([w.position for w in words], [0, 4, 8, 10])

    def test_empty(self):
        self.assertEqual(tokenize_passage(""), [])
        self.assertEqual(tokenize_passage("   "), [])
        self.assertEqual(tokenize_passage(None), [])

    def test_offsets_slice_normalized_text(self):
        text = "Max was a little brown puppy"
        for w in tokenize_passage(text):
            self.assertEqual(text[w.position:w.end_position], w.text)


class TestTokenizeTranscript(unittest.TestCase):
    """Transcript splitting."""

    def test_normalized_split(self):
        self.assertEqual(tokenize_transcript("  Max WAS   a "), ["max", "was", "a"])

    def test_empty(self):
        self.assertEqual(tokenize_transcript(""), [])
        self.assertEqual(tokenize_transcript(" \n "), [])
        self.assertEqual(tokenize_transcript(None), [])


if __name__ == "__main__":
    unittest.main()
