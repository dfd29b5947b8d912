# darwin_palette/search/fuzzy.py
"""Edit-distance primitives used by ranking and suggestions.

Scores follow the convention "0.0 is a perfect match, 1.0 is no match":
a field score is the share of pattern characters that needed an edit,
plus a small penalty for how far into the field the match starts.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from darwin_palette.config.defaults import DEFAULT_PROXIMITY_DISTANCE


@dataclass(frozen=True)
class Alignment:
    """Best approximate occurrence of a pattern inside a text."""

    errors: int
    start: int
    end: int


def fold(text: str) -> str:
    """Lower-case and strip accents, one output char per input char.

    Keeping the length lets match offsets on folded text index the
    original text directly.
    """
    out = []
    for ch in text:
        # "İ" lowers to "i" plus a combining dot
        lowered = ch.lower()[:1] or ch
        base = "".join(
            c for c in unicodedata.normalize("NFKD", lowered) if not unicodedata.combining(c)
        )
        out.append(base if len(base) == 1 else lowered)
    return "".join(out)


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def best_alignment(pattern: str, text: str) -> Alignment:
    """Find the substring of ``text`` closest to ``pattern`` in edit distance.

    Semi-global alignment: skipping text before and after the match is
    free, every insertion, deletion or substitution inside it costs one.
    Ties go to the earliest start, then the earliest end.
    """
    m, n = len(pattern), len(text)
    if m == 0:
        return Alignment(0, 0, 0)
    if n == 0:
        return Alignment(m, 0, 0)

    # Row i holds the cost of aligning pattern[:i] so that it ends at text[j]
    prev_cost = [0] * (n + 1)
    prev_start = list(range(n + 1))

    for i in range(1, m + 1):
        cost = [i] + [0] * n
        start = [0] + [0] * n
        pc = pattern[i - 1]
        for j in range(1, n + 1):
            best = prev_cost[j - 1] + (pc != text[j - 1])
            best_start = prev_start[j - 1]

            skip_pattern = prev_cost[j] + 1
            if skip_pattern < best:
                best, best_start = skip_pattern, prev_start[j]

            skip_text = cost[j - 1] + 1
            if skip_text < best:
                best, best_start = skip_text, start[j - 1]

            cost[j] = best
            start[j] = best_start
        prev_cost, prev_start = cost, start

    best_j = 0
    for j in range(1, n + 1):
        if (prev_cost[j], prev_start[j]) < (prev_cost[best_j], prev_start[best_j]):
            best_j = j
    return Alignment(prev_cost[best_j], prev_start[best_j], best_j)


def field_score(
    pattern: str,
    text: str,
    distance: int = DEFAULT_PROXIMITY_DISTANCE,
) -> tuple[float, Alignment]:
    """Score ``pattern`` against one (already folded) field value.

    Returns (score, alignment); score is clipped to [0, 1].
    """
    alignment = best_alignment(pattern, text)
    accuracy = alignment.errors / len(pattern) if pattern else 0.0
    proximity = alignment.start / distance if distance > 0 else 0.0
    return min(1.0, accuracy + proximity), alignment


def highlight_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Non-overlapping (start, end) spans where ``query`` occurs literally.

    Case- and accent-insensitive. Punctuation in the query is matched as
    literal text.
    """
    needle = fold(query.strip())
    if not needle:
        return []
    haystack = fold(text)
    spans: list[tuple[int, int]] = []
    pos = haystack.find(needle)
    while pos != -1:
        spans.append((pos, pos + len(needle)))
        pos = haystack.find(needle, pos + len(needle))
    return spans
