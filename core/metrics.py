"""
Edit-distance metrics: Levenshtein distance, word similarity, and word error rate.
Similarity thresholds downstream are tuned against the exact distance
(rapidfuzz's Levenshtein is exact, unit cost), so no fuzzy ratios here.
"""
from typing import Sequence

from rapidfuzz.distance import Levenshtein

from .normalization import clean_word, normalize_transcript


def levenshtein_distance(a: Sequence, b: Sequence) -> int:
    """
    Unit-cost Levenshtein distance (substitution, insertion, deletion).
    Works on strings (characters) and on word lists alike.
    """
    return Levenshtein.distance(a, b)


def word_similarity(spoken: str, expected: str) -> float:
    """
    1 - levenshtein / max(len) in [0, 1]. Two empty strings count as identical
    (1.0) instead of dividing by zero.
    """
    longest = max(len(spoken), len(expected))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(spoken, expected) / longest


def format_similarity(similarity: float) -> str:
    """Two-decimal string form stored on ReadingError ("0.60")."""
    return "%.2f" % similarity


def wer(reference: str, hypothesis: str) -> float:
    """
    Word Error Rate: word-level edit distance / number of reference words.
    Words are compared after clean_word, same as the detector.
    Returns value in [0, +inf); 0 = perfect match.
    """
    ref_words = [clean_word(w) for w in normalize_transcript(reference).split()]
    hyp_words = [clean_word(w) for w in normalize_transcript(hypothesis or "").split()]
    if not ref_words:
        return 0.0 if not hyp_words else 1.0
    return levenshtein_distance(ref_words, hyp_words) / len(ref_words)
