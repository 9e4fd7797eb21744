"""
Error pattern analysis over many reading attempts: which error types dominate,
which words keep tripping the reader up, and errors per 100 words read.
Accepts ReadingError objects or their stored dict form.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union

from core.normalization import clean_word
from core.reading_errors import ReadingError

logger = logging.getLogger(__name__)

# errors per 100 words above which a reader is flagged in the logs
HIGH_ERROR_RATE = 25.0
COMMON_WORDS_LIMIT = 10

ErrorLike = Union[ReadingError, Dict[str, Any]]


@dataclass
class ErrorPatternReport:
    """Distribution of error types, most common error words, and error rate."""
    n_errors: int = 0
    total_words: int = 0
    error_types: List[Dict[str, Any]] = field(default_factory=list)         # [{"error_type", "count"}]
    common_error_words: List[Dict[str, Any]] = field(default_factory=list)  # top N [{"word", "count"}]

    @property
    def error_rate(self) -> float:
        if not self.total_words:
            return 0.0
        return self.n_errors / self.total_words * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_errors": self.n_errors,
            "total_words": self.total_words,
            "error_types": self.error_types,
            "common_error_words": self.common_error_words,
            "error_rate": "%.2f" % self.error_rate,
        }


def _field(err: ErrorLike, name: str) -> Any:
    if isinstance(err, ReadingError):
        return getattr(err, name)
    return err.get(name)


def _count_desc(values: Iterable[str]) -> List[tuple]:
    """(value, count) sorted by count desc; ties keep first-seen order."""
    counts: Dict[str, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    # sorted() is stable and dicts keep insertion order
    return sorted(counts.items(), key=lambda kv: -kv[1])


def analyze_error_patterns(
    errors: Iterable[ErrorLike],
    total_words: int = 0,
    top_n: int = COMMON_WORDS_LIMIT,
) -> ErrorPatternReport:
    """
    errors: ReadingError or {"error_type": ..., "word": ...} dicts, from any number of sessions.
    total_words: words read across those sessions (for error_rate).
    Words are grouped case- and punctuation-insensitively; errors without a word
    still count towards the type distribution.
    """
    if total_words < 0:
        raise ValueError("total_words must be >= 0, got %r" % total_words)
    items = list(errors)
    report = ErrorPatternReport(n_errors=len(items), total_words=total_words)
    if not items:
        return report

    report.error_types = [
        {"error_type": t, "count": c}
        for t, c in _count_desc(str(_field(e, "error_type")) for e in items)
    ]
    words = [clean_word(_field(e, "word")) for e in items]
    report.common_error_words = [
        {"word": w, "count": c} for w, c in _count_desc(w for w in words if w)
    ][:top_n]

    if report.error_rate > HIGH_ERROR_RATE:
        logger.warning(
            "High error rate: %.2f errors per 100 words (%d errors, %d words)",
            report.error_rate, report.n_errors, report.total_words,
        )
    return report
