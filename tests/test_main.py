# tests/test_main.py
"""Tests for the darwin-palette typer CLI."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from darwin_palette.main import app, main
from darwin_palette.recent.store import JsonFileKeyValueStore, RecentSearchStore

runner = CliRunner()

CATALOG = {
    "diseases": [
        {"id": "hypertension", "title": "Hypertension", "ciap2": ["K86"], "icd10": ["I10"]},
        {"id": "asma", "titulo": "Asma", "ciap2": ["R96"], "cid10": ["J45"]},
    ],
    "medicamentos": [
        {"id": "losartana", "nomeGenerico": "Losartana", "nomesComerciais": ["Cozaar"]},
    ],
}


@pytest.fixture(autouse=True)
def no_logging_setup():
    """The callback's logging setup would replace pytest's root handlers."""
    with patch("darwin_palette.main.setup_logging") as setup:
        yield setup


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "store" / "storage.json"


@pytest.fixture
def outputs():
    with (
        patch("darwin_palette.main.output") as main_output,
        patch("darwin_palette.ui.renderers.output") as render_output,
        patch("darwin_palette.ui.renderers.format_table") as format_table,
    ):
        yield main_output, render_output, format_table


def _table_rows(format_table):
    return format_table.call_args.kwargs["data"]


class TestSearch:
    def test_ranked_results(self, catalog_file, outputs):
        _, _, format_table = outputs
        result = runner.invoke(app, ["search", "Hypertension", "-c", str(catalog_file)])

        assert result.exit_code == 0, result.output
        titles = [row["Title"] for row in _table_rows(format_table)]
        assert "Hypertension" in titles

    def test_empty_query_lists_actions_and_pages(self, outputs):
        _, _, format_table = outputs
        result = runner.invoke(app, ["search"])

        assert result.exit_code == 0, result.output
        rows = _table_rows(format_table)
        assert len(rows) == 12
        assert rows[0]["Title"] == "Toggle theme"

    def test_category_filter(self, catalog_file, outputs):
        _, _, format_table = outputs
        result = runner.invoke(
            app, ["search", "a", "-c", str(catalog_file), "-C", "medication"]
        )

        assert result.exit_code == 0, result.output
        groups = {row["Group"] for row in _table_rows(format_table)}
        assert groups == {"💊 Medications"}

    def test_locale(self, outputs):
        _, _, format_table = outputs
        result = runner.invoke(app, ["--locale", "pt-BR", "search"])

        assert result.exit_code == 0, result.output
        assert _table_rows(format_table)[0]["Group"] == "⚡ Ações rápidas"

    def test_no_results(self, outputs):
        _, render_output, _ = outputs
        result = runner.invoke(app, ["search", "zzzzzzzzzz"])

        assert result.exit_code == 0, result.output
        render_output.warning.assert_called_once_with("No results found.")

    def test_missing_catalog(self, tmp_path, outputs):
        main_output, _, _ = outputs
        result = runner.invoke(app, ["search", "x", "-c", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        main_output.error.assert_called_once()

    def test_invalid_threshold(self, outputs):
        result = runner.invoke(app, ["search", "x", "-t", "7"])
        assert result.exit_code == 2


class TestSuggest:
    def test_correction(self, store_path, outputs):
        _, render_output, _ = outputs
        result = runner.invoke(
            app, ["--store", str(store_path), "suggest", "hypertenson"]
        )

        assert result.exit_code == 0, result.output
        render_output.hint.assert_any_call("Did you mean: hipertensao?")

    def test_ranked_suggestions(self, store_path, catalog_file, outputs):
        main_output, _, _ = outputs
        result = runner.invoke(
            app,
            ["--store", str(store_path), "suggest", "hyper", "-c", str(catalog_file)],
        )

        assert result.exit_code == 0, result.output
        lines = [c.args[0] for c in main_output.print.call_args_list]
        assert any(line.startswith("  [autocomplete] Hypertension") for line in lines)


class TestRecent:
    def test_lists_persisted_terms(self, store_path, outputs):
        _, render_output, _ = outputs
        RecentSearchStore(JsonFileKeyValueStore(store_path)).record("Asma")

        result = runner.invoke(app, ["--store", str(store_path), "recent"])

        assert result.exit_code == 0, result.output
        render_output.print.assert_called_once_with("  1. Asma")

    def test_clear(self, store_path, outputs):
        main_output, _, _ = outputs
        RecentSearchStore(JsonFileKeyValueStore(store_path)).record("Asma")

        result = runner.invoke(app, ["--store", str(store_path), "recent", "--clear"])

        assert result.exit_code == 0, result.output
        main_output.success.assert_called_once_with("Recent searches cleared")
        assert RecentSearchStore(JsonFileKeyValueStore(store_path)).list() == []


class TestCallback:
    def test_invalid_log_level(self, no_logging_setup):
        no_logging_setup.side_effect = ValueError("Invalid log level: NOPE")
        result = runner.invoke(app, ["--log-level", "NOPE", "search"])
        assert result.exit_code == 2

    def test_logging_flags_forwarded(self, no_logging_setup, outputs):
        runner.invoke(app, ["-v", "search"])
        no_logging_setup.assert_called_once_with(
            level="WARNING", quiet=False, verbose=True, log_file=None
        )

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("search", "suggest", "recent", "interactive"):
            assert command in result.output


class TestInteractive:
    def test_runs_terminal_palette(self, store_path, outputs):
        with patch("darwin_palette.ui.terminal.TerminalPalette") as terminal:
            result = runner.invoke(app, ["--store", str(store_path), "interactive"])

        assert result.exit_code == 0, result.output
        terminal.return_value.run.assert_called_once_with()


def test_main_keyboard_interrupt():
    with patch("darwin_palette.main.app", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 130
