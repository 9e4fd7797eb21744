"""
Reading-attempt scoring on top of the detected errors.
- wcpm: words correct per minute = (total_words - errors) / minutes
- accuracy_score: % of passage words read without error
- review: one item per error with the prompt and a ±30 character window of the passage

analyze_reading() bundles everything for the host; the error list itself comes
from core.reading_errors.detect_errors_and_insertions.
"""
import math
from typing import Any, Dict, List, Optional, Sequence

from .normalization import normalize_whitespace
from .reading_errors import (
    HESITATION,
    MISPRONUNCIATION,
    OMISSION,
    ReadingError,
    detect_errors_and_insertions,
)
from .tokenizer import tokenize_passage

# Readings shorter than this (6 s) are scored as if they took 6 s.
MIN_READING_MINUTES = 0.1
REVIEW_CONTEXT_RADIUS = 30

_REVIEW_PROMPTS = {
    MISPRONUNCIATION: "You mispronounced:",
    HESITATION: "You hesitated on:",
    OMISSION: "You skipped:",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def words_correct_per_minute(total_words: int, error_count: int, elapsed_seconds: float) -> int:
    """round((total_words - error_count) / minutes), minutes floored at MIN_READING_MINUTES."""
    if elapsed_seconds < 0:
        raise ValueError("elapsed_seconds must be >= 0, got %r" % elapsed_seconds)
    correct_words = max(0, total_words - error_count)
    minutes = max(MIN_READING_MINUTES, elapsed_seconds / 60.0)
    return _round_half_up(correct_words / minutes)


def score_change(current_wcpm: int, previous_wcpm: Optional[int]) -> Optional[Dict[str, Any]]:
    """Difference from the previous attempt; None on the first attempt."""
    if previous_wcpm is None:
        return None
    delta = current_wcpm - previous_wcpm
    return {"previous_wcpm": previous_wcpm, "delta": delta, "improved": delta > 0}


def error_context(passage: str, position: int, radius: int = REVIEW_CONTEXT_RADIUS) -> str:
    """
    Slice of the passage around an error: [position - radius, position + radius),
    clamped to the text. position is an offset from tokenize_passage, so it indexes the
    whitespace-normalized passage.
    """
    if radius < 0:
        raise ValueError("radius must be >= 0, got %r" % radius)
    text = normalize_whitespace(passage)
    start = max(0, position - radius)
    end = min(len(text), position + radius)
    return text[start:end]


def review_prompt(error_type: str) -> str:
    return _REVIEW_PROMPTS.get(error_type, "Try reading this word again:")


def build_review_items(
    passage: str,
    errors: Sequence[ReadingError],
    radius: int = REVIEW_CONTEXT_RADIUS,
) -> List[Dict[str, Any]]:
    """Review flow entries, in error order."""
    items: List[Dict[str, Any]] = []
    for err in errors:
        item = err.to_dict()
        item["prompt"] = review_prompt(err.error_type)
        item["context"] = error_context(passage, err.position_in_text, radius)
        items.append(item)
    return items


def analyze_reading(
    original_text: str,
    transcribed_text: str,
    elapsed_seconds: Optional[float] = None,
    previous_wcpm: Optional[int] = None,
    context_radius: int = REVIEW_CONTEXT_RADIUS,
) -> Dict[str, Any]:
    """
    Full result for one reading attempt. wcpm and score_change are only filled in
    when elapsed_seconds is known.
    """
    errors, extra_words = detect_errors_and_insertions(original_text, transcribed_text)
    total_words = len(tokenize_passage(original_text))
    error_count = len(errors)

    accuracy_score = ((total_words - error_count) / total_words * 100) if total_words else 0.0

    wcpm: Optional[int] = None
    change: Optional[Dict[str, Any]] = None
    if elapsed_seconds is not None:
        wcpm = words_correct_per_minute(total_words, error_count, elapsed_seconds)
        change = score_change(wcpm, previous_wcpm)

    return {
        "transcribed_text": transcribed_text,
        "errors": [e.to_dict() for e in errors],
        "extra_words": extra_words,
        "total_words": total_words,
        "error_count": error_count,
        "accuracy_score": round(accuracy_score, 2),
        "wcpm": wcpm,
        "score_change": change,
        "review": build_review_items(original_text, errors, context_radius),
    }
