# darwin_palette/search/models.py
"""Result and option models for ranked search."""

from __future__ import annotations

from dataclasses import dataclass

from darwin_palette.config.defaults import (
    DEFAULT_MAX_EMPTY_QUERY_RESULTS,
    DEFAULT_MAX_RESULTS,
    DEFAULT_THRESHOLD,
)
from darwin_palette.config.enums import ItemCategory
from darwin_palette.corpus.models import SearchableItem


@dataclass(frozen=True)
class FieldMatch:
    """Where the query matched inside one field value."""

    field: str
    value: str
    score: float
    start: int
    end: int


@dataclass(frozen=True)
class RankedResult:
    """A matched item; lower ``score`` is better."""

    item: SearchableItem
    score: float
    matches: tuple[FieldMatch, ...] = ()

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def title(self) -> str:
        return self.item.title

    @property
    def category(self) -> ItemCategory:
        return self.item.category


@dataclass(frozen=True)
class SearchOptions:
    """Per-call knobs for ``SearchEngine.search``."""

    limit: int = DEFAULT_MAX_RESULTS
    empty_limit: int = DEFAULT_MAX_EMPTY_QUERY_RESULTS
    threshold: float = DEFAULT_THRESHOLD
    categories: frozenset[ItemCategory] | None = None
    include_disabled: bool = False
