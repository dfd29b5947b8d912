"""Smart suggestions: corrections, related topics and trending terms."""

from darwin_palette.suggestions.engine import (
    SmartSuggestion,
    SmartSuggestionResult,
    SuggestionEngine,
    Suggestions,
)
from darwin_palette.suggestions.providers import (
    MEDICAL_CORRECTIONS,
    RELATED_TOPICS,
    TRENDING_SEARCHES,
    ProviderResult,
    StaticCorrectionProvider,
    StaticRelatedTopicsProvider,
    StaticTrendingProvider,
    call_provider,
)

__all__ = [
    "MEDICAL_CORRECTIONS",
    "RELATED_TOPICS",
    "TRENDING_SEARCHES",
    "ProviderResult",
    "SmartSuggestion",
    "SmartSuggestionResult",
    "StaticCorrectionProvider",
    "StaticRelatedTopicsProvider",
    "StaticTrendingProvider",
    "SuggestionEngine",
    "Suggestions",
    "call_provider",
]
