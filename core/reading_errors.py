"""
Reading-error detection: compare what the child said with the passage.

- omission: passage word with no spoken counterpart
- hesitation: spoken word close to the passage word (similarity > 0.7)
- mispronunciation: spoken word further off (similarity <= 0.7)

Extra spoken words (insertions) are logged but never reported as errors.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from alignment.lcs_alignment import (
    align_words,
    pair_substitutions,
    unaligned_transcript_indices,
)
from .metrics import format_similarity, word_similarity
from .normalization import clean_word
from .tokenizer import tokenize_passage, tokenize_transcript

logger = logging.getLogger(__name__)

OMISSION = "omission"
MISPRONUNCIATION = "mispronunciation"
HESITATION = "hesitation"

# similarity > threshold -> hesitation, otherwise mispronunciation
HESITATION_SIMILARITY_THRESHOLD = 0.7


@dataclass(frozen=True)
class ReadingError:
    id: int
    word: str
    position_in_text: int
    error_type: str
    actual: str = ""
    similarity: str = "0.00"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "position_in_text": self.position_in_text,
            "error_type": self.error_type,
            "actual": self.actual,
            "similarity": self.similarity,
        }


def classify_similarity(similarity: float) -> str:
    """hesitation above the threshold (strictly), mispronunciation otherwise."""
    return HESITATION if similarity > HESITATION_SIMILARITY_THRESHOLD else MISPRONUNCIATION


def detect_errors_and_insertions(
    original_text: str,
    transcribed_text: Optional[str],
) -> Tuple[List[ReadingError], List[str]]:
    """
    One alignment pass yielding both the error list and the extra spoken words.
    Errors follow the passage left to right (position_in_text is non-decreasing).
    Empty passage -> no errors. Empty transcript -> one omission per passage word.
    """
    passage = tokenize_passage(original_text)
    original_words = [w.text for w in passage]
    transcribed_words = tokenize_transcript(transcribed_text)
    logger.debug("Original word count: %d, transcribed word count: %d", len(original_words), len(transcribed_words))

    alignment = align_words(original_words, transcribed_words)
    substitutions = pair_substitutions(original_words, transcribed_words, alignment)
    logger.debug("Alignment: %d matched, %d substituted", len(alignment), len(substitutions))

    spoken_for: Dict[int, int] = {p.original_index: p.transcribed_index for p in alignment}
    spoken_for.update({p.original_index: p.transcribed_index for p in substitutions})

    errors: List[ReadingError] = []
    for i, word in enumerate(passage):
        if i not in spoken_for:
            errors.append(ReadingError(
                id=len(errors) + 1,
                word=word.text,
                position_in_text=word.position,
                error_type=OMISSION,
                actual="",
                similarity=format_similarity(0.0),
            ))
            logger.info("Omission detected: %r", word.text)
            continue

        spoken = transcribed_words[spoken_for[i]]
        clean_original = clean_word(word.text)
        clean_spoken = clean_word(spoken)
        if clean_original == clean_spoken:
            continue

        similarity = word_similarity(clean_spoken, clean_original)
        error_type = classify_similarity(similarity)
        errors.append(ReadingError(
            id=len(errors) + 1,
            word=word.text,
            position_in_text=word.position,
            error_type=error_type,
            actual=spoken,
            similarity=format_similarity(similarity),
        ))
        logger.info("Error detected: %r vs %r (%s)", word.text, spoken, error_type)

    used = list(alignment) + list(substitutions)
    insertions = [transcribed_words[j] for j in unaligned_transcript_indices(used, len(transcribed_words))]
    if insertions:
        logger.info("Insertions detected: %s", ", ".join(insertions))

    logger.debug("Total errors detected: %d", len(errors))
    return errors, insertions


def detect_reading_errors(original_text: str, transcribed_text: Optional[str]) -> List[ReadingError]:
    """
    Align the transcript against the passage and list one ReadingError per problem word.
    Extra spoken words are logged, not returned.
    """
    errors, _ = detect_errors_and_insertions(original_text, transcribed_text)
    return errors


def find_insertions(original_text: str, transcribed_text: Optional[str]) -> List[str]:
    """Spoken words with no passage counterpart, in transcript order (not penalized)."""
    _, insertions = detect_errors_and_insertions(original_text, transcribed_text)
    return insertions
