"""
Word-level LCS alignment between a passage and a transcript.

Builds the longest-common-subsequence table over the two word sequences and
walks it back into an ordered list of (original_index, transcribed_index) pairs.
Words are compared after core.normalization.clean_word (punctuation stripped,
lower-cased). Unmatched words between two anchors are then paired up as
substitutions; transcript words left over after that are insertions.
"""
from typing import List, NamedTuple, Sequence, Set, Tuple

from core.metrics import word_similarity
from core.normalization import clean_word


class AlignedPair(NamedTuple):
    original_index: int
    transcribed_index: int


def _clean_all(words: Sequence[str]) -> List[str]:
    return [clean_word(w) for w in words]


def build_lcs_table(original: Sequence[str], transcribed: Sequence[str]) -> List[List[int]]:
    """
    (m+1) x (n+1) table; dp[i][j] = LCS length of original[:i] and transcribed[:j].
    O(m*n) time and space, fine for passages of a few hundred words.
    """
    orig = _clean_all(original)
    trans = _clean_all(transcribed)
    m, n = len(orig), len(trans)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if orig[i - 1] == trans[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp


def backtrack_alignment(
    dp: List[List[int]],
    original: Sequence[str],
    transcribed: Sequence[str],
) -> List[AlignedPair]:
    """
    Walk dp from (m, n) towards the origin and return matched pairs in increasing order.
    Off a match, step to (i-1, j) only when dp[i-1][j] is strictly greater; ties step
    to (i, j-1). Same input, same alignment.
    """
    orig = _clean_all(original)
    trans = _clean_all(transcribed)
    pairs: List[AlignedPair] = []
    i, j = len(orig), len(trans)
    while i > 0 and j > 0:
        if orig[i - 1] == trans[j - 1]:
            pairs.append(AlignedPair(i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    pairs.reverse()
    return pairs


def align_words(original: Sequence[str], transcribed: Sequence[str]) -> List[AlignedPair]:
    """LCS alignment of two word sequences. Either side empty -> []."""
    if not original or not transcribed:
        return []
    dp = build_lcs_table(original, transcribed)
    return backtrack_alignment(dp, original, transcribed)


def unaligned_transcript_indices(alignment: Sequence[AlignedPair], transcribed_length: int) -> List[int]:
    """Transcript positions not matched to any passage word (extra words spoken)."""
    used: Set[int] = {p.transcribed_index for p in alignment}
    return [j for j in range(transcribed_length) if j not in used]


def _pair_gap(
    orig_idx: List[int],
    trans_idx: List[int],
    orig: List[str],
    trans: List[str],
) -> List[AlignedPair]:
    """
    Order-preserving pairing of the unmatched words inside one gap.
    Scores are (pair count, total similarity) compared as tuples: the pair count is
    maximal (min of both sides) and, among those pairings, total similarity is highest.
    """
    a, b = len(orig_idx), len(trans_idx)
    if a == 0 or b == 0:
        return []

    # one similarity per (passage, transcript) word pair, shared by fill and walk
    sims = [[word_similarity(trans[tj], orig[oi]) for tj in trans_idx] for oi in orig_idx]

    def diagonal(i: int, j: int) -> Tuple[int, float]:
        count, total = score[i - 1][j - 1]
        return count + 1, total + sims[i - 1][j - 1]

    score: List[List[Tuple[int, float]]] = [[(0, 0.0)] * (b + 1) for _ in range(a + 1)]
    for i in range(1, a + 1):
        for j in range(1, b + 1):
            score[i][j] = max(diagonal(i, j), score[i - 1][j], score[i][j - 1])

    pairs: List[AlignedPair] = []
    i, j = a, b
    while i > 0 and j > 0:
        if score[i][j] == diagonal(i, j):
            pairs.append(AlignedPair(orig_idx[i - 1], trans_idx[j - 1]))
            i -= 1
            j -= 1
        elif score[i - 1][j] > score[i][j - 1]:
            i -= 1
        else:
            j -= 1
    pairs.reverse()
    return pairs


def pair_substitutions(
    original: Sequence[str],
    transcribed: Sequence[str],
    alignment: Sequence[AlignedPair],
) -> List[AlignedPair]:
    """
    Pair passage words the LCS left unmatched with transcript words spoken in the
    same gap (between the same two matched anchors). "He saw many" read as
    "He sawed many" pairs saw/sawed instead of reporting saw as skipped.
    Returned pairs never cross the LCS anchors and are in increasing order.
    """
    orig = _clean_all(original)
    trans = _clean_all(transcribed)
    pairs: List[AlignedPair] = []
    prev_i, prev_j = -1, -1
    anchors = list(alignment) + [AlignedPair(len(orig), len(trans))]
    for anchor in anchors:
        gap_orig = list(range(prev_i + 1, anchor.original_index))
        gap_trans = list(range(prev_j + 1, anchor.transcribed_index))
        pairs.extend(_pair_gap(gap_orig, gap_trans, orig, trans))
        prev_i, prev_j = anchor.original_index, anchor.transcribed_index
    return pairs
