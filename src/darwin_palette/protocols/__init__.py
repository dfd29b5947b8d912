"""Protocol definitions for external collaborators."""

from darwin_palette.protocols.interfaces import (
    CatalogSource,
    CorrectionProvider,
    KeyValueStore,
    Navigator,
    RelatedTopicsProvider,
    TrendingProvider,
)

__all__ = [
    "CatalogSource",
    "CorrectionProvider",
    "KeyValueStore",
    "Navigator",
    "RelatedTopicsProvider",
    "TrendingProvider",
]
