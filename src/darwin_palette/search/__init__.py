"""Fuzzy matching and ranking."""

from darwin_palette.search.engine import SearchEngine, search
from darwin_palette.search.fuzzy import (
    best_alignment,
    field_score,
    fold,
    highlight_spans,
    levenshtein_distance,
)
from darwin_palette.search.models import FieldMatch, RankedResult, SearchOptions

__all__ = [
    "FieldMatch",
    "RankedResult",
    "SearchEngine",
    "SearchOptions",
    "best_alignment",
    "field_score",
    "fold",
    "highlight_spans",
    "levenshtein_distance",
    "search",
]
