"""Protocol definitions for everything the palette consumes from outside.

Catalogs, persistence, navigation and suggestion sources are supplied by
the integrator; the engine only talks to them through these interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from darwin_palette.config.enums import ItemCategory


@runtime_checkable
class CatalogSource(Protocol):
    """A content catalog feeding the corpus.

    ``list_items`` must be synchronous (or pre-resolved) by the time the
    corpus is built. Records may be mappings, catalog record models or
    ready-made ``SearchableItem`` instances.
    """

    kind: ItemCategory

    def list_items(self) -> Sequence[Any]:
        """Return the catalog's records."""
        ...


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal persistent string store."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...


@runtime_checkable
class Navigator(Protocol):
    """Executes navigation to an application path."""

    def navigate(self, path: str) -> None:
        """Navigate to ``path``."""
        ...


@runtime_checkable
class TrendingProvider(Protocol):
    """Static or slowly-changing source of trending search terms."""

    def get_trending(self) -> list[str]:
        """Return trending terms, most relevant first."""
        ...


@runtime_checkable
class RelatedTopicsProvider(Protocol):
    """Association table from a query to thematically related terms."""

    def get_related(self, query: str) -> list[str]:
        """Return terms related to ``query``."""
        ...


@runtime_checkable
class CorrectionProvider(Protocol):
    """Typo-correction source."""

    def get_correction(self, query: str) -> str | None:
        """Return the corrected term, or None when nothing is close enough."""
        ...
