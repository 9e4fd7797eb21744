import re
from typing import Optional

# Punctuation ignored when comparing a passage word with a spoken word.
WORD_PUNCTUATION = ".,!?;'\"-"

_PUNCTUATION_RE = re.compile("[%s]" % re.escape(WORD_PUNCTUATION))
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: Optional[str]) -> str:
    """Trim and collapse runs of whitespace (spaces, tabs, newlines) to a single space."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_transcript(text: Optional[str]) -> str:
    """
    Normalize recognizer output for word comparison: lower-case, trimmed,
    whitespace collapsed. Punctuation is kept; it is stripped per word by clean_word.
    """
    return normalize_whitespace(text).lower()


def clean_word(word: Optional[str]) -> str:
    """Strip .,!?;'"- and lower-case. "Puppy!" -> "puppy", "don't" -> "dont"."""
    if not word:
        return ""
    return _PUNCTUATION_RE.sub("", word).lower()
