# darwin_palette/palette/controller.py
"""
Command palette controller: the selection and keyboard state machine.

States are Closed, Open-Empty (blank query) and Open-Querying. Every query
change re-runs ranked search, regroups the results and clamps the
highlighted index into ``[-1, total - 1]``. The corpus is rebuilt only
when one of its dependencies changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from darwin_palette.config.enums import EnterPolicy, NavKey, PaletteStatus
from darwin_palette.config.models import PaletteConfig
from darwin_palette.corpus.builder import CorpusCache
from darwin_palette.corpus.catalogs import default_static_entries
from darwin_palette.corpus.models import (
    ActionContext,
    ActionTarget,
    NavigateTarget,
    SearchableItem,
    StaticEntries,
)
from darwin_palette.palette.grouping import ResultGroup, group_results, item_at, total_count
from darwin_palette.palette.state import EngineState
from darwin_palette.protocols import CatalogSource, Navigator
from darwin_palette.recent.store import MemoryKeyValueStore, RecentSearchStore
from darwin_palette.search.engine import SearchEngine
from darwin_palette.search.models import RankedResult, SearchOptions
from darwin_palette.suggestions.engine import (
    SmartSuggestionResult,
    SuggestionEngine,
    Suggestions,
)
from darwin_palette.suggestions.providers import StaticCorrectionProvider

logger = logging.getLogger(__name__)


class HistoryNavigator:
    """Navigator that only remembers where it was sent."""

    def __init__(self) -> None:
        self.history: list[str] = []

    def navigate(self, path: str) -> None:
        logger.info(f"Navigate to {path}")
        self.history.append(path)

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None


@dataclass(frozen=True)
class PaletteView:
    """Snapshot of everything a renderer needs."""

    status: PaletteStatus
    query: str
    groups: tuple[ResultGroup, ...] = ()
    selected_index: int = -1
    suggestions: Suggestions = field(default_factory=Suggestions)
    recent: tuple[str, ...] = ()
    is_loading: bool = False
    locale: str = "en"

    @property
    def total_results(self) -> int:
        return total_count(self.groups)

    @property
    def selected_item(self) -> SearchableItem | None:
        return item_at(self.groups, self.selected_index)

    @property
    def has_results(self) -> bool:
        return bool(self.groups)


class CommandPalette:
    """Owns one palette session and dispatches commits."""

    def __init__(
        self,
        catalogs: Sequence[CatalogSource] = (),
        navigator: Navigator | None = None,
        recent_store: RecentSearchStore | None = None,
        suggestion_engine: SuggestionEngine | None = None,
        static_entries: StaticEntries | None = None,
        context: ActionContext | None = None,
        config: PaletteConfig | None = None,
        cache: CorpusCache | None = None,
    ):
        """
        Args:
            catalogs: Content catalogs feeding the corpus
            navigator: Receives paths of committed navigable items
            recent_store: Recent searches (in-memory when omitted)
            suggestion_engine: Correction/related/trending source
            static_entries: Built-in actions and pages
            context: Context bound into action handlers
            config: Limits and policies
            cache: Corpus cache, shareable between palettes
        """
        self.config = config or PaletteConfig()
        self.catalogs = list(catalogs)
        self.navigator: Navigator = navigator or HistoryNavigator()
        self.recent_store = recent_store or RecentSearchStore(
            MemoryKeyValueStore(), max_entries=self.config.max_recent
        )
        self.suggestion_engine = suggestion_engine or SuggestionEngine(
            correction_provider=StaticCorrectionProvider(
                max_distance=self.config.correction_max_distance
            ),
            max_trending=self.config.max_trending,
            max_related=self.config.max_related,
        )
        self.static_entries = static_entries or default_static_entries()
        self.context = context or ActionContext()
        self.cache = cache or CorpusCache()
        self.locale = self.config.locale

        self.state = EngineState()
        self._items: list[SearchableItem] | None = None
        self._engine: SearchEngine | None = None
        self._results: list[RankedResult] = []
        self._groups: list[ResultGroup] = []
        self._suggestions = Suggestions()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def status(self) -> PaletteStatus:
        return self.state.status

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    @property
    def results(self) -> list[RankedResult]:
        return list(self._results)

    @property
    def groups(self) -> list[ResultGroup]:
        return list(self._groups)

    @property
    def suggestions(self) -> Suggestions:
        return self._suggestions

    @property
    def total_results(self) -> int:
        return total_count(self._groups)

    @property
    def selected_item(self) -> SearchableItem | None:
        return item_at(self._groups, self.state.selected_index)

    @property
    def items(self) -> list[SearchableItem]:
        """Current corpus, rebuilt first if a dependency changed."""
        return self.refresh_corpus()

    @property
    def recent_searches(self) -> list[str]:
        return self.recent_store.list()

    def view(self) -> PaletteView:
        recent: tuple[str, ...] = ()
        if self.state.status is PaletteStatus.OPEN_EMPTY:
            recent = tuple(self.recent_store.list())
        return PaletteView(
            status=self.state.status,
            query=self.state.query,
            groups=tuple(self._groups),
            selected_index=self.state.selected_index,
            suggestions=self._suggestions,
            recent=recent,
            is_loading=self.state.is_loading,
            locale=self.locale,
        )

    # ------------------------------------------------------------------
    # Corpus
    # ------------------------------------------------------------------

    def refresh_corpus(self) -> list[SearchableItem]:
        """Rebuild the corpus if stale; ``is_loading`` is set meanwhile."""
        stale = self._items is None or self.cache.is_stale(
            self.catalogs, self.static_entries, self.locale, self.context
        )
        if not stale:
            return self._items

        self.state.is_loading = True
        try:
            items = self.cache.get(
                self.catalogs, self.static_entries, self.locale, self.context
            )
        finally:
            self.state.is_loading = False

        if items is not self._items:
            self._items = items
            self._engine = SearchEngine(items)
        return items

    def invalidate(self) -> None:
        """Drop the cached corpus; an open palette re-searches immediately."""
        self.cache.invalidate()
        self._items = None
        if self.state.is_open:
            self._recompute()

    def set_locale(self, locale: str) -> None:
        self.locale = locale
        if self.state.is_open:
            self._recompute()

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------

    def open(self) -> None:
        if self.state.is_open:
            return
        self.state.reset()
        self.state.is_open = True
        logger.debug("Palette opened")
        self._recompute()

    def close(self) -> None:
        if not self.state.is_open:
            return
        self.state.is_open = False
        self.state.reset()
        self._results = []
        self._groups = []
        self._suggestions = Suggestions()
        self.suggestion_engine.reset()
        logger.debug("Palette closed")

    def toggle(self) -> None:
        if self.state.is_open:
            self.close()
        else:
            self.open()

    def cancel(self) -> None:
        """Escape: close without side effects."""
        self.close()

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> None:
        """Replace the query; opens the palette if it is closed."""
        if not self.state.is_open:
            self.open()
        self.state.query = query
        self._recompute()

    def apply_suggestion(self, text: str) -> None:
        """Replace the query with a suggestion (correction, topic, recent)."""
        self.set_query(text)
        self.state.selected_index = -1

    def smart_suggestions(self, query: str | None = None) -> SmartSuggestionResult:
        self.refresh_corpus()
        return self.suggestion_engine.smart_suggestions(
            self.state.query if query is None else query,
            self._engine,
            self.recent_store.list(),
        )

    def _recompute(self) -> None:
        self.refresh_corpus()
        options = SearchOptions(
            limit=self.config.max_results,
            empty_limit=self.config.max_empty_results,
            threshold=self.config.threshold,
        )
        self._results = self._engine.search(self.state.query, options)
        self._groups = group_results(self._results, self.locale)
        self._suggestions = self.suggestion_engine.suggest(self.state.query)
        self._clamp()

    def _clamp(self) -> None:
        last = self.total_results - 1
        self.state.selected_index = max(-1, min(self.state.selected_index, last))

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def move_down(self) -> None:
        self.select_index(self.state.selected_index + 1)

    def move_up(self) -> None:
        self.select_index(self.state.selected_index - 1)

    def select_index(self, index: int) -> None:
        """Highlight ``index``, clamped; no wrapping at either end."""
        if not self.state.is_open:
            return
        last = self.total_results - 1
        self.state.selected_index = max(-1, min(index, last))

    def handle_key(self, key: NavKey) -> SearchableItem | None:
        """Apply a navigation key; returns the item committed by Enter, if any."""
        if not self.state.is_open:
            return None
        if key is NavKey.ARROW_DOWN:
            self.move_down()
        elif key is NavKey.ARROW_UP:
            self.move_up()
        elif key is NavKey.ESCAPE:
            self.cancel()
        elif key is NavKey.ENTER:
            return self.enter()
        return None

    def enter(self) -> SearchableItem | None:
        """Commit the highlighted item.

        With nothing highlighted, ``EnterPolicy.FIRST`` commits the first
        result of a non-empty query; ``EnterPolicy.NOOP`` does nothing.
        """
        if not self.state.is_open:
            return None
        index = self.state.selected_index
        if index < 0:
            if self.config.enter_policy is not EnterPolicy.FIRST:
                return None
            if not self.state.query.strip() or self.total_results == 0:
                return None
            index = 0
        item = item_at(self._groups, index)
        if item is None:
            return None
        self.commit(item)
        return item

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self, item: SearchableItem) -> None:
        """Run the item's target, record navigable titles, then close.

        A failing target is logged and re-raised; the palette stays open
        and nothing is recorded.
        """
        target = item.target
        try:
            if isinstance(target, NavigateTarget):
                self.navigator.navigate(target.path)
            elif isinstance(target, ActionTarget):
                target.perform()
            else:
                raise TypeError(f"Unknown target for item '{item.id}': {target!r}")
        except Exception:
            logger.exception(f"Committing '{item.id}' failed")
            raise

        logger.debug(f"Committed '{item.id}' ({target.kind.value})")
        if item.is_navigable:
            self.recent_store.record(item.title)
        self.close()
