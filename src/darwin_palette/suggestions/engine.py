# darwin_palette/suggestions/engine.py
"""Smart Suggestion Engine: typo correction, related topics, trending terms.

Advisory only. Acting on a suggestion means replacing the query with the
suggestion text, which runs a normal ranked search; nothing here ever
short-circuits the ranking engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from darwin_palette.config.defaults import (
    DEFAULT_AUTOCOMPLETE_THRESHOLD,
    DEFAULT_MAX_AUTOCOMPLETE,
    DEFAULT_MAX_RECENT_MATCHES,
    DEFAULT_MAX_RELATED,
    DEFAULT_MAX_TRENDING,
    MIN_SUGGESTION_QUERY_LENGTH,
)
from darwin_palette.config.enums import SuggestionType
from darwin_palette.corpus.models import SearchableItem
from darwin_palette.protocols import (
    CorrectionProvider,
    RelatedTopicsProvider,
    TrendingProvider,
)
from darwin_palette.search.engine import SearchEngine
from darwin_palette.search.fuzzy import fold
from darwin_palette.search.models import SearchOptions
from darwin_palette.suggestions.providers import (
    StaticCorrectionProvider,
    StaticRelatedTopicsProvider,
    StaticTrendingProvider,
    call_provider,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestions:
    """What the palette shows next to the ranked results."""

    correction: str | None = None
    related_topics: tuple[str, ...] = ()
    trending: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.correction or self.related_topics or self.trending)


@dataclass(frozen=True)
class SmartSuggestion:
    """One entry of the ranked suggestion list (higher score first)."""

    id: str
    type: SuggestionType
    text: str
    score: float
    display_text: str | None = None


@dataclass(frozen=True)
class SmartSuggestionResult:
    suggestions: tuple[SmartSuggestion, ...] = ()
    did_you_mean: str | None = None
    related_topics: tuple[str, ...] = ()
    trending: tuple[str, ...] = ()


@dataclass
class SuggestionEngine:
    """Combines the three suggestion providers behind one ``suggest`` call.

    Trending terms are fetched once per stretch of short queries and reused
    until the query grows past the suggestion minimum.
    """

    correction_provider: CorrectionProvider = field(
        default_factory=StaticCorrectionProvider
    )
    related_provider: RelatedTopicsProvider = field(
        default_factory=StaticRelatedTopicsProvider
    )
    trending_provider: TrendingProvider = field(default_factory=StaticTrendingProvider)
    max_trending: int = DEFAULT_MAX_TRENDING
    max_related: int = DEFAULT_MAX_RELATED
    min_query_length: int = MIN_SUGGESTION_QUERY_LENGTH
    _trending_cache: tuple[str, ...] | None = field(default=None, init=False, repr=False)

    def suggest(self, query: str) -> Suggestions:
        """Suggestions for ``query``.

        Short queries (fewer than two characters after trimming) get only
        trending terms. Longer queries get an optional correction and
        related topics, never trending terms.
        """
        normalized = query.strip()
        if len(normalized) < self.min_query_length:
            return Suggestions(trending=self.trending())

        self._trending_cache = None
        return Suggestions(
            correction=self.correction(normalized),
            related_topics=self.related(normalized),
        )

    def trending(self) -> tuple[str, ...]:
        if self._trending_cache is None:
            result = call_provider("trending", self.trending_provider.get_trending)
            terms = _clean_terms(result.value_or([]))
            self._trending_cache = tuple(terms[: self.max_trending])
        return self._trending_cache

    def correction(self, query: str) -> str | None:
        """A correction distinct from the query itself, or None."""
        result = call_provider(
            "correction", self.correction_provider.get_correction, query
        )
        candidate = result.value_or("")
        if not isinstance(candidate, str) or not candidate.strip():
            return None
        if candidate.strip().lower() == query.strip().lower():
            return None
        return candidate

    def related(self, query: str) -> tuple[str, ...]:
        result = call_provider("related", self.related_provider.get_related, query)
        terms = _clean_terms(result.value_or([]))
        return tuple(terms[: self.max_related])

    def reset(self) -> None:
        """Drop the cached trending terms."""
        self._trending_cache = None

    def smart_suggestions(
        self,
        query: str,
        items: Sequence[SearchableItem] | SearchEngine,
        recent: Sequence[str] = (),
    ) -> SmartSuggestionResult:
        """Ranked suggestion list mixing correction, autocomplete and recents.

        Autocomplete entries come from a looser fuzzy search over ``items``;
        their confidence is ``1 - score``. Recent terms containing the query
        are added with decreasing confidence from 0.9.
        """
        suggestions: list[SmartSuggestion] = []
        normalized = query.strip()

        did_you_mean = self.correction(normalized) if normalized else None
        if did_you_mean:
            suggestions.append(
                SmartSuggestion(
                    id=f"correction-{did_you_mean}",
                    type=SuggestionType.CORRECTION,
                    text=did_you_mean,
                    score=1.0,
                    display_text=f"Did you mean: {did_you_mean}?",
                )
            )

        if len(normalized) >= self.min_query_length:
            engine = items if isinstance(items, SearchEngine) else SearchEngine(items)
            options = SearchOptions(
                limit=DEFAULT_MAX_AUTOCOMPLETE,
                threshold=DEFAULT_AUTOCOMPLETE_THRESHOLD,
            )
            for index, ranked in enumerate(engine.search(normalized, options)):
                suggestions.append(
                    SmartSuggestion(
                        id=f"autocomplete-{index}",
                        type=SuggestionType.AUTOCOMPLETE,
                        text=ranked.item.title,
                        score=1.0 - ranked.score,
                    )
                )

        folded_query = fold(normalized)
        matching_recent = [
            term for term in recent if folded_query in fold(term) and term != normalized
        ]
        for index, term in enumerate(matching_recent[:DEFAULT_MAX_RECENT_MATCHES]):
            suggestions.append(
                SmartSuggestion(
                    id=f"recent-{index}",
                    type=SuggestionType.RECENT,
                    text=term,
                    score=0.9 - index * 0.1,
                )
            )

        # sorted() is stable: equal confidence keeps insertion order
        ordered = sorted(suggestions, key=lambda s: s.score, reverse=True)
        trending = self.trending() if len(normalized) < 3 else ()
        related = self.related(normalized) if normalized else ()

        return SmartSuggestionResult(
            suggestions=tuple(ordered),
            did_you_mean=did_you_mean,
            related_topics=related,
            trending=trending,
        )


def _clean_terms(terms: object) -> list[str]:
    """Keep non-blank strings, first occurrence wins."""
    if not isinstance(terms, (list, tuple)):
        return []
    cleaned: list[str] = []
    for term in terms:
        if isinstance(term, str) and term.strip() and term not in cleaned:
            cleaned.append(term)
    return cleaned
