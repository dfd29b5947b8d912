# tests/ui/test_renderers.py
"""Tests for chuk-term result rendering."""

from unittest.mock import patch

import pytest

from darwin_palette.config.enums import ItemCategory, PaletteStatus
from darwin_palette.palette.controller import PaletteView
from darwin_palette.palette.grouping import group_results
from darwin_palette.search.models import RankedResult
from darwin_palette.suggestions.engine import Suggestions
from darwin_palette.ui.renderers import (
    RESULT_COLUMNS,
    highlight_text,
    render_recent,
    render_results,
    render_suggestions,
    render_view,
    result_rows,
    suggestion_lines,
)


@pytest.fixture
def groups(make_item):
    items = [
        make_item("disease-has", "Hipertensão", ItemCategory.DISEASE, subtitle="K86 | I10"),
        make_item("page-home", "Go to Home", path="/"),
        make_item("action-theme", "Toggle theme", ItemCategory.ACTION, perform=lambda: None),
    ]
    return group_results([RankedResult(item=i, score=0.1) for i in items])


@pytest.fixture
def mock_output():
    with patch("darwin_palette.ui.renderers.output") as output:
        yield output


class TestHighlightText:
    def test_accent_insensitive_span(self):
        text = highlight_text("Hipertensão", "tensao")
        assert text.plain == "Hipertensão"
        assert [(s.start, s.end) for s in text.spans] == [(5, 11)]

    def test_no_query(self):
        assert highlight_text("Asma", "").spans == []


class TestResultRows:
    def test_rows_follow_selection_space(self, groups):
        rows = result_rows(groups, selected_index=1)

        assert [r["Title"] for r in rows] == ["Toggle theme", "Go to Home", "Hipertensão"]
        assert [r["#"] for r in rows] == [" 0", "▶1", " 2"]
        assert rows[0]["Target"] == "action"
        assert rows[1]["Target"] == "/"
        assert rows[2]["Group"] == "🩺 Diseases"
        assert rows[2]["Subtitle"] == "K86 | I10"
        assert set(rows[0]) == set(RESULT_COLUMNS)

    def test_no_groups(self):
        assert result_rows([]) == []


class TestSuggestionLines:
    def test_all_parts(self):
        suggestions = Suggestions(
            correction="hipertensao", related_topics=("a", "b"), trending=("asma",)
        )
        assert suggestion_lines(suggestions) == [
            "Did you mean: hipertensao?",
            "Related: a, b",
            "Trending: asma",
        ]

    def test_localized(self):
        lines = suggestion_lines(Suggestions(correction="asma"), locale="pt")
        assert lines == ["Você quis dizer: asma?"]

    def test_empty(self):
        assert suggestion_lines(Suggestions()) == []


class TestRender:
    def test_results_table(self, groups, mock_output):
        view = PaletteView(PaletteStatus.OPEN_QUERYING, "h", groups=tuple(groups))
        with patch("darwin_palette.ui.renderers.format_table") as format_table:
            render_results(view)

        kwargs = format_table.call_args.kwargs
        assert len(kwargs["data"]) == 3
        assert kwargs["columns"] == RESULT_COLUMNS
        assert kwargs["title"] == "Results for 'h'"
        mock_output.print.assert_called_once_with(format_table.return_value)

    def test_no_results_message(self, mock_output):
        render_results(PaletteView(PaletteStatus.OPEN_QUERYING, "zzz"))
        mock_output.warning.assert_called_once_with("No results found.")

    def test_suggestions_as_hints(self, mock_output):
        view = PaletteView(
            PaletteStatus.OPEN_QUERYING, "x", suggestions=Suggestions(correction="asma")
        )
        render_suggestions(view)
        mock_output.hint.assert_called_once_with("Did you mean: asma?")

    def test_recent_list(self, mock_output):
        render_recent(["asma", "diabetes"])
        mock_output.rule.assert_called_once_with("Recent")
        mock_output.print.assert_any_call("  1. asma")
        mock_output.print.assert_any_call("  2. diabetes")

    def test_recent_empty(self, mock_output):
        render_recent([], locale="pt")
        mock_output.info.assert_called_once_with("Recentes: -")

    def test_view_renders_recent_first(self, mock_output):
        view = PaletteView(PaletteStatus.OPEN_EMPTY, "", recent=("asma",))
        render_view(view)
        mock_output.rule.assert_called_once_with("Recent")
        mock_output.warning.assert_called_once_with("No results found.")
