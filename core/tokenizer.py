"""
Word tokenization for passages and transcripts.

Passage words keep their character offsets so errors can point back into the
text shown to the reader; transcript words only need their order.
"""
from dataclasses import dataclass
from typing import List, Optional

from .normalization import normalize_transcript, normalize_whitespace


@dataclass(frozen=True)
class PassageWord:
    """One passage word with its [position, end_position) span in the passage."""
    text: str
    position: int
    end_position: int


def tokenize_passage(text: Optional[str]) -> List[PassageWord]:
    """
    Split a passage on single spaces after whitespace normalization.
    Case and punctuation are preserved: PassageWord.text (and so ReadingError.word)
    keeps the reader-facing spelling, never lower-cased.
    Offsets accumulate len(word) + 1 per word, so they index into normalize_whitespace(text).
    """
    normalized = normalize_whitespace(text)
    if not normalized:
        return []
    words: List[PassageWord] = []
    position = 0
    for word in normalized.split(" "):
        words.append(PassageWord(text=word, position=position, end_position=position + len(word)))
        position += len(word) + 1
    return words


def tokenize_transcript(text: Optional[str]) -> List[str]:
    """Lower-case, trim, collapse whitespace, split on space. Empty input -> []."""
    normalized = normalize_transcript(text)
    if not normalized:
        return []
    return normalized.split(" ")
