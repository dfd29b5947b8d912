# darwin_palette/corpus/builder.py
"""Corpus Builder: assembles the flat list of searchable items.

The build is deterministic and side-effect free. Every call returns a new
list so consumers can memoize on list identity; ``CorpusCache`` keeps the
last list around until one of its dependencies changes.
"""

from __future__ import annotations

import functools
import logging
from typing import Sequence

from darwin_palette.config.defaults import DEFAULT_LOCALE
from darwin_palette.config.enums import ItemCategory
from darwin_palette.corpus.catalogs import map_records, resolve_subtitle
from darwin_palette.corpus.labels import translate
from darwin_palette.corpus.models import (
    ActionContext,
    ActionTarget,
    NavigateTarget,
    SearchableItem,
    StaticEntries,
)
from darwin_palette.protocols import CatalogSource

logger = logging.getLogger(__name__)


def build(
    catalogs: Sequence[CatalogSource],
    static_entries: StaticEntries,
    locale: str = DEFAULT_LOCALE,
    context: ActionContext | None = None,
) -> list[SearchableItem]:
    """Build the corpus: actions, then pages, then each catalog in order.

    Args:
        catalogs: Content catalogs; empty catalogs are fine
        static_entries: Built-in actions and navigation pages
        locale: Locale used to resolve static labels
        context: Context bound into action handlers; its app state also
            drives state-dependent subtitles

    Returns:
        A new list of items with unique ids (later duplicates are dropped)
    """
    context = context or ActionContext()
    items: list[SearchableItem] = []
    seen: set[str] = set()

    def _add(item: SearchableItem) -> None:
        if item.id in seen:
            logger.warning(f"Duplicate corpus id '{item.id}' skipped")
            return
        seen.add(item.id)
        items.append(item)

    for action in static_entries.actions:
        _add(
            SearchableItem(
                id=action.id,
                category=ItemCategory.ACTION,
                title=translate(action.title_key, locale),
                subtitle=resolve_subtitle(action, context.app_state, locale),
                keywords=action.keywords,
                shortcut=action.shortcut,
                target=ActionTarget(perform=functools.partial(action.perform, context)),
            )
        )

    for page in static_entries.pages:
        _add(
            SearchableItem(
                id=page.id,
                category=ItemCategory.PAGE,
                title=translate(page.title_key, locale),
                keywords=page.keywords,
                target=NavigateTarget(path=page.path),
            )
        )

    for catalog in catalogs:
        for item in map_records(catalog.kind, catalog.list_items()):
            _add(item)

    logger.debug(
        f"Corpus built: {len(items)} items "
        f"({len(static_entries.actions)} actions, {len(static_entries.pages)} pages, "
        f"{len(catalogs)} catalogs, locale={locale})"
    )
    return items


class CorpusCache:
    """Rebuilds the corpus only when a dependency changes.

    Dependencies are the catalog objects (and their ``revision`` when they
    expose one), the static entries, the locale and the application state
    snapshot the action subtitles depend on.
    """

    def __init__(self) -> None:
        self._fingerprint: tuple | None = None
        self._items: list[SearchableItem] = []
        self.build_count = 0

    @staticmethod
    def fingerprint(
        catalogs: Sequence[CatalogSource],
        static_entries: StaticEntries,
        locale: str,
        context: ActionContext,
    ) -> tuple:
        catalog_keys = tuple(
            (id(c), c.kind, getattr(c, "revision", 0)) for c in catalogs
        )
        state = context.app_state
        return (
            catalog_keys,
            id(static_entries),
            locale,
            id(context),
            state.theme,
            state.content_mode,
        )

    def is_stale(
        self,
        catalogs: Sequence[CatalogSource],
        static_entries: StaticEntries,
        locale: str,
        context: ActionContext,
    ) -> bool:
        key = self.fingerprint(catalogs, static_entries, locale, context)
        return key != self._fingerprint

    def get(
        self,
        catalogs: Sequence[CatalogSource],
        static_entries: StaticEntries,
        locale: str,
        context: ActionContext,
    ) -> list[SearchableItem]:
        """Return the cached corpus, rebuilding it if any dependency changed."""
        key = self.fingerprint(catalogs, static_entries, locale, context)
        if key != self._fingerprint:
            self._items = build(catalogs, static_entries, locale, context)
            self._fingerprint = key
            self.build_count += 1
        return self._items

    def invalidate(self) -> None:
        """Force the next ``get`` to rebuild."""
        self._fingerprint = None
