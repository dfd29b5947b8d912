# darwin_palette/search/engine.py
"""Fuzzy matching and ranking over the corpus.

An empty query returns the always-visible items (actions and pages) in
corpus order. Any other query is matched, case- and accent-insensitively,
against three weighted fields:

- title (weight 3)
- subtitle (weight 2)
- keywords (weight 2, best keyword wins)

A field only counts when its score is within the threshold; an item is a
hit when at least one field counts. The item score is the weighted
geometric combination of its counting field scores, so lower is better
and matching more fields helps. Equal scores are ordered by item
priority (high first), then by corpus order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from darwin_palette.config.defaults import (
    DEFAULT_PROXIMITY_DISTANCE,
    MIN_FIELD_SCORE,
    WEIGHT_KEYWORDS,
    WEIGHT_SUBTITLE,
    WEIGHT_TITLE,
)
from darwin_palette.config.enums import ALWAYS_VISIBLE_CATEGORIES, ItemPriority
from darwin_palette.corpus.models import SearchableItem
from darwin_palette.search.fuzzy import field_score, fold
from darwin_palette.search.models import FieldMatch, RankedResult, SearchOptions

logger = logging.getLogger(__name__)

PRIORITY_ORDER: dict[ItemPriority, int] = {
    ItemPriority.HIGH: 0,
    ItemPriority.NORMAL: 1,
    ItemPriority.LOW: 2,
}


@dataclass(frozen=True)
class _IndexedItem:
    """An item with its match fields pre-folded."""

    item: SearchableItem
    title: str
    subtitle: str
    keywords: tuple[str, ...]


class SearchEngine:
    """Ranks a fixed corpus against queries.

    Build one engine per corpus; the folded field index is computed once
    and the last result is memoized so repeated identical calls return
    the same list.
    """

    def __init__(
        self,
        items: Sequence[SearchableItem],
        distance: int = DEFAULT_PROXIMITY_DISTANCE,
        title_weight: float = WEIGHT_TITLE,
        subtitle_weight: float = WEIGHT_SUBTITLE,
        keyword_weight: float = WEIGHT_KEYWORDS,
    ) -> None:
        self.items = items
        self.distance = distance
        total = title_weight + subtitle_weight + keyword_weight
        self._weights = {
            "title": title_weight / total,
            "subtitle": subtitle_weight / total,
            "keywords": keyword_weight / total,
        }
        self._index = [
            _IndexedItem(
                item=item,
                title=fold(item.title),
                subtitle=fold(item.subtitle or ""),
                keywords=tuple(fold(k) for k in item.keywords),
            )
            for item in items
        ]
        self._last_key: tuple[str, SearchOptions] | None = None
        self._last_results: list[RankedResult] = []

    def search(
        self, query: str, options: SearchOptions | None = None
    ) -> list[RankedResult]:
        """Rank the corpus for ``query``; see the module docstring."""
        options = options or SearchOptions()
        key = (query, options)
        if key == self._last_key:
            return self._last_results

        if not query.strip():
            results = self._empty_query(options)
        else:
            results = self._rank(fold(query.strip()), options)

        self._last_key = key
        self._last_results = results
        logger.debug(f"search({query!r}) -> {len(results)} results")
        return results

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _eligible(self, item: SearchableItem, options: SearchOptions) -> bool:
        if not item.enabled and not options.include_disabled:
            return False
        if options.categories is not None and item.category not in options.categories:
            return False
        return True

    def _empty_query(self, options: SearchOptions) -> list[RankedResult]:
        results: list[RankedResult] = []
        for entry in self._index:
            if len(results) >= options.empty_limit:
                break
            item = entry.item
            if item.category in ALWAYS_VISIBLE_CATEGORIES and self._eligible(
                item, options
            ):
                results.append(RankedResult(item=item, score=0.0))
        return results

    def _rank(self, pattern: str, options: SearchOptions) -> list[RankedResult]:
        hits: list[RankedResult] = []
        for entry in self._index:
            if not self._eligible(entry.item, options):
                continue
            scored = self._score(entry, pattern, options.threshold)
            if scored is not None:
                hits.append(scored)

        # list.sort is stable, so full ties keep corpus order
        hits.sort(key=lambda r: (r.score, PRIORITY_ORDER[r.item.priority]))
        return hits[: options.limit]

    def _score(
        self, entry: _IndexedItem, pattern: str, threshold: float
    ) -> RankedResult | None:
        matches: list[FieldMatch] = []
        total = 1.0

        def _consider(name: str, folded: str, original: str) -> FieldMatch | None:
            if not folded:
                return None
            score, alignment = field_score(pattern, folded, self.distance)
            if score > threshold:
                return None
            return FieldMatch(
                field=name,
                value=original,
                score=score,
                start=alignment.start,
                end=alignment.end,
            )

        item = entry.item
        title_match = _consider("title", entry.title, item.title)
        if title_match:
            matches.append(title_match)
        subtitle_match = _consider("subtitle", entry.subtitle, item.subtitle or "")
        if subtitle_match:
            matches.append(subtitle_match)

        keyword_match: FieldMatch | None = None
        for folded, original in zip(entry.keywords, item.keywords):
            candidate = _consider("keywords", folded, original)
            if candidate and (keyword_match is None or candidate.score < keyword_match.score):
                keyword_match = candidate
                if candidate.score == 0.0:
                    break
        if keyword_match:
            matches.append(keyword_match)

        if not matches:
            return None

        for match in matches:
            total *= max(match.score, MIN_FIELD_SCORE) ** self._weights[match.field]
        return RankedResult(item=item, score=total, matches=tuple(matches))


def search(
    items: Sequence[SearchableItem],
    query: str,
    options: SearchOptions | None = None,
) -> list[RankedResult]:
    """One-shot search; build a ``SearchEngine`` to reuse the index."""
    return SearchEngine(items).search(query, options)
