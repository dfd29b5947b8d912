# tests/palette/test_palette_controller.py
"""Tests for the CommandPalette selection and keyboard state machine."""

import logging
from unittest.mock import MagicMock

import pytest

from darwin_palette.config.enums import (
    ItemCategory,
    NavKey,
    PaletteStatus,
    Theme,
)
from darwin_palette.config.models import PaletteConfig
from darwin_palette.corpus.models import ActionEntry, StaticEntries
from darwin_palette.palette.controller import CommandPalette, HistoryNavigator
from darwin_palette.recent.store import MemoryKeyValueStore, RecentSearchStore


@pytest.fixture
def palette(catalogs):
    return CommandPalette(catalogs=catalogs)


@pytest.fixture
def catalog_palette(catalogs):
    """Palette whose corpus holds only catalog content."""
    return CommandPalette(
        catalogs=catalogs,
        static_entries=StaticEntries(),
        config=PaletteConfig(enter_policy="first"),
    )


class TestOpenClose:
    def test_starts_closed(self, palette):
        assert palette.status is PaletteStatus.CLOSED
        assert palette.results == []

    def test_open_shows_actions_and_pages(self, palette):
        palette.open()
        assert palette.status is PaletteStatus.OPEN_EMPTY
        assert palette.selected_index == -1
        assert palette.total_results == 12
        assert [g.category for g in palette.groups] == [
            ItemCategory.ACTION,
            ItemCategory.PAGE,
        ]

    def test_toggle(self, palette):
        palette.toggle()
        assert palette.is_open
        palette.toggle()
        assert not palette.is_open

    def test_close_clears_session(self, palette):
        palette.set_query("asma")
        palette.move_down()
        palette.close()
        assert palette.query == ""
        assert palette.selected_index == -1
        assert palette.groups == []
        assert palette.suggestions.is_empty

    def test_escape_cancels(self, palette):
        palette.open()
        assert palette.handle_key(NavKey.ESCAPE) is None
        assert palette.status is PaletteStatus.CLOSED

    def test_keys_ignored_when_closed(self, palette):
        assert palette.handle_key(NavKey.ARROW_DOWN) is None
        assert palette.selected_index == -1


class TestQuery:
    def test_querying_status(self, palette):
        palette.set_query("asma")
        assert palette.status is PaletteStatus.OPEN_QUERYING

    def test_set_query_opens(self, palette):
        palette.set_query("Losartana")
        assert palette.is_open
        assert palette.results[0].item.id == "medication-losartana"

    def test_whitespace_query_is_empty_state(self, palette):
        palette.set_query("   ")
        assert palette.status is PaletteStatus.OPEN_EMPTY
        assert palette.total_results == 12

    def test_suggestions_follow_query(self, palette):
        palette.open()
        assert palette.suggestions.trending
        palette.set_query("hypertenson")
        assert palette.suggestions.correction == "hipertensao"
        assert palette.suggestions.trending == ()

    def test_apply_suggestion(self, palette):
        palette.set_query("hypertenson")
        palette.move_down()
        palette.apply_suggestion("Hypertension")
        assert palette.query == "Hypertension"
        assert palette.selected_index == -1

    def test_locale_switch_relabels_groups(self, palette):
        palette.open()
        palette.set_locale("pt")
        assert palette.groups[0].label == "Ações rápidas"
        assert palette.groups[0].items[0].title == "Alternar tema"


class TestSelection:
    def test_move_down_and_up(self, palette):
        palette.open()
        palette.move_down()
        assert palette.selected_index == 0
        palette.move_down()
        assert palette.selected_index == 1
        palette.move_up()
        palette.move_up()
        assert palette.selected_index == -1

    def test_no_wrap_at_either_end(self, palette):
        palette.open()
        palette.move_up()
        assert palette.selected_index == -1
        for _ in range(30):
            palette.handle_key(NavKey.ARROW_DOWN)
        assert palette.selected_index == palette.total_results - 1

    def test_no_results_keeps_nothing_highlighted(self, palette):
        palette.set_query("zzzzzzzzzz")
        palette.move_down()
        assert palette.total_results == 0
        assert palette.selected_index == -1

    def test_index_clamped_when_results_shrink(self, palette):
        palette.open()
        palette.select_index(11)
        palette.set_query("Losartana")
        assert palette.total_results < 12
        assert palette.selected_index == palette.total_results - 1

    def test_selected_item(self, palette):
        palette.open()
        assert palette.selected_item is None
        palette.move_down()
        assert palette.selected_item.id == "action-toggle-theme"


class TestEnter:
    def test_noop_policy(self, palette):
        palette.set_query("Hypertension")
        assert palette.enter() is None
        assert palette.is_open
        assert palette.navigator.history == []

    def test_first_policy(self, catalog_palette):
        catalog_palette.set_query("Hypertension")
        item = catalog_palette.handle_key(NavKey.ENTER)
        assert item.id == "disease-hypertension"
        assert catalog_palette.navigator.current == "/doencas/hypertension"

    def test_first_policy_needs_a_query(self, catalog_palette):
        catalog_palette.open()
        assert catalog_palette.enter() is None

    def test_highlighted_item_committed(self, catalog_palette):
        catalog_palette.set_query("Hypertension")
        catalog_palette.move_down()
        assert catalog_palette.enter().id == "disease-hypertension"


class TestCommit:
    def test_navigable_commit_records_title_and_closes(self, catalog_palette):
        navigator = MagicMock()
        catalog_palette.navigator = navigator
        catalog_palette.set_query("hypert")
        catalog_palette.move_down()
        item = catalog_palette.enter()

        navigator.navigate.assert_called_once_with(item.target.path)
        assert catalog_palette.recent_searches == [item.title]
        assert catalog_palette.status is PaletteStatus.CLOSED

    def test_action_commit_not_recorded(self, palette):
        palette.open()
        palette.move_down()
        item = palette.enter()

        assert item.id == "action-toggle-theme"
        assert palette.context.app_state.theme is Theme.DARK
        assert palette.recent_searches == []
        assert not palette.is_open

    def test_failing_action_keeps_palette_open(self, caplog):
        caplog.set_level(logging.WARNING, logger="darwin_palette")

        def broken(context):
            raise RuntimeError("boom")

        entries = StaticEntries(
            actions=(ActionEntry(id="action-broken", title_key="broken", perform=broken),)
        )
        palette = CommandPalette(static_entries=entries)
        palette.open()
        palette.move_down()

        with pytest.raises(RuntimeError, match="boom"):
            palette.enter()

        assert palette.is_open
        assert palette.recent_searches == []
        assert "Committing 'action-broken' failed" in caplog.text

    def test_failing_navigator_propagates(self, catalog_palette):
        navigator = MagicMock()
        navigator.navigate.side_effect = LookupError("no route")
        catalog_palette.navigator = navigator
        catalog_palette.set_query("Hypertension")

        with pytest.raises(LookupError):
            catalog_palette.enter()
        assert catalog_palette.is_open

    def test_recent_searches_capped(self, catalogs):
        store = RecentSearchStore(MemoryKeyValueStore(), max_entries=2)
        palette = CommandPalette(
            catalogs=catalogs,
            static_entries=StaticEntries(),
            recent_store=store,
            config=PaletteConfig(enter_policy="first"),
        )
        for query in ["Hypertension", "Asma", "Losartana"]:
            palette.set_query(query)
            palette.enter()
        assert palette.recent_searches == ["Losartana", "Asma"]


class TestView:
    def test_recent_shown_only_when_empty(self, catalogs):
        store = RecentSearchStore(MemoryKeyValueStore())
        store.record("Asma")
        palette = CommandPalette(catalogs=catalogs, recent_store=store)

        palette.open()
        assert palette.view().recent == ("Asma",)

        palette.set_query("as")
        view = palette.view()
        assert view.recent == ()
        assert view.status is PaletteStatus.OPEN_QUERYING
        assert view.total_results == palette.total_results

    def test_view_selected_item(self, palette):
        palette.open()
        palette.move_down()
        assert palette.view().selected_item.id == "action-toggle-theme"


class TestCorpusCache:
    def test_corpus_built_once(self, palette):
        palette.open()
        palette.set_query("a")
        palette.set_query("as")
        palette.close()
        palette.open()
        assert palette.cache.build_count == 1

    def test_theme_change_rebuilds(self, palette):
        palette.open()
        palette.move_down()
        palette.enter()

        palette.open()
        assert palette.cache.build_count == 2
        theme = next(i for i in palette.items if i.id == "action-toggle-theme")
        assert theme.subtitle == "Switch to light mode"

    def test_catalog_replace_rebuilds(self, catalogs):
        palette = CommandPalette(catalogs=catalogs, static_entries=StaticEntries())
        palette.set_query("Dengue")
        assert palette.total_results == 0

        catalogs[0].replace([{"id": "dengue", "title": "Dengue"}])
        palette.set_query("Dengue ")
        assert palette.results[0].item.id == "disease-dengue"

    def test_invalidate_forces_rebuild(self, palette):
        palette.open()
        palette.invalidate()
        assert palette.cache.build_count == 2

    def test_loading_flag_during_build(self):
        seen = []

        class SpyCatalog:
            kind = ItemCategory.DISEASE

            def list_items(self):
                seen.append(palette.state.is_loading)
                return []

        palette = CommandPalette(catalogs=[SpyCatalog()])
        palette.open()
        assert seen == [True]
        assert palette.state.is_loading is False


class TestHistoryNavigator:
    def test_records_paths(self):
        navigator = HistoryNavigator()
        assert navigator.current is None
        navigator.navigate("/doencas")
        navigator.navigate("/")
        assert navigator.history == ["/doencas", "/"]
        assert navigator.current == "/"
