# darwin_palette/main.py
"""Entry-point for the darwin-palette CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from chuk_term.ui import output
from pydantic import ValidationError

from darwin_palette.config.enums import ItemCategory, PaletteStatus
from darwin_palette.config.env_vars import EnvVar, get_env
from darwin_palette.config.logging import setup_logging
from darwin_palette.config.models import PaletteConfig
from darwin_palette.corpus.builder import build
from darwin_palette.corpus.catalogs import (
    CatalogLoadError,
    StaticCatalog,
    default_static_entries,
    load_catalog_file,
)
from darwin_palette.palette.controller import CommandPalette, PaletteView
from darwin_palette.palette.grouping import group_results
from darwin_palette.recent.store import JsonFileKeyValueStore, RecentSearchStore
from darwin_palette.search.engine import SearchEngine
from darwin_palette.search.models import SearchOptions
from darwin_palette.suggestions.engine import SuggestionEngine
from darwin_palette.suggestions.providers import StaticCorrectionProvider
from darwin_palette.ui.renderers import render_recent, render_suggestions, render_view

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Fuzzy command palette for Darwin content")


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #
def _load_catalogs(catalog: Optional[Path]) -> List[StaticCatalog]:
    if catalog is None:
        return []
    try:
        return load_catalog_file(catalog)
    except CatalogLoadError as exc:
        output.error(str(exc))
        raise typer.Exit(code=1) from exc


def _recent_store(config: PaletteConfig) -> RecentSearchStore:
    return RecentSearchStore(
        JsonFileKeyValueStore(config.store_path), max_entries=config.max_recent
    )


def _suggestion_engine(config: PaletteConfig) -> SuggestionEngine:
    return SuggestionEngine(
        correction_provider=StaticCorrectionProvider(
            max_distance=config.correction_max_distance
        ),
        max_trending=config.max_trending,
        max_related=config.max_related,
    )


def _config(ctx: typer.Context, **overrides) -> PaletteConfig:
    base: dict = dict(ctx.obj or {})
    base.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return PaletteConfig.from_env(**base)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


# --------------------------------------------------------------------------- #
# Commands                                                                    #
# --------------------------------------------------------------------------- #
@app.callback()
def main_callback(
    ctx: typer.Context,
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Label locale (en, pt)"),
    store: Optional[Path] = typer.Option(None, "--store", help="Recent-search store file"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress most log output"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
    log_level: str = typer.Option(
        get_env(EnvVar.LOG_LEVEL, "WARNING"), "--log-level", help="Set log level"
    ),
    log_file: Optional[str] = typer.Option(
        get_env(EnvVar.LOG_FILE), "--log-file", help="Rotating debug log file"
    ),
) -> None:
    """Search pages, actions and catalog content from the terminal."""
    try:
        setup_logging(level=log_level, quiet=quiet, verbose=verbose, log_file=log_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = {"locale": locale, "store_path": store}


@app.command("search")
def search_command(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Search text; empty shows pages and actions"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="Catalog JSON file"),
    category: Optional[List[ItemCategory]] = typer.Option(
        None, "--category", "-C", help="Only show these categories"
    ),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Match threshold (0 exact .. 1 anything)"
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum results"),
) -> None:
    """Rank the corpus against QUERY and print grouped results."""
    config = _config(ctx, threshold=threshold, max_results=limit)
    catalogs = _load_catalogs(catalog)

    items = build(catalogs, default_static_entries(), config.locale)
    options = SearchOptions(
        limit=config.max_results,
        empty_limit=config.max_empty_results,
        threshold=config.threshold,
        categories=frozenset(category) if category else None,
    )
    results = SearchEngine(items).search(query, options)
    view = PaletteView(
        status=PaletteStatus.OPEN_QUERYING if query.strip() else PaletteStatus.OPEN_EMPTY,
        query=query,
        groups=tuple(group_results(results, config.locale)),
        suggestions=_suggestion_engine(config).suggest(query),
        locale=config.locale,
    )
    render_view(view)


@app.command("suggest")
def suggest_command(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Search text"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="Catalog JSON file"),
) -> None:
    """Show the correction, related topics, trending terms and ranked suggestions."""
    config = _config(ctx)
    catalogs = _load_catalogs(catalog)
    engine = _suggestion_engine(config)

    view = PaletteView(
        status=PaletteStatus.OPEN_QUERYING if query.strip() else PaletteStatus.OPEN_EMPTY,
        query=query,
        suggestions=engine.suggest(query),
        locale=config.locale,
    )
    render_suggestions(view)

    items = build(catalogs, default_static_entries(), config.locale)
    result = engine.smart_suggestions(query, items, _recent_store(config).list())
    if not result.suggestions and view.suggestions.is_empty:
        output.info("No suggestions")
        return
    for suggestion in result.suggestions:
        text = suggestion.display_text or suggestion.text
        output.print(f"  [{suggestion.type.value}] {text} ({suggestion.score:.2f})")


@app.command("recent")
def recent_command(
    ctx: typer.Context,
    clear: bool = typer.Option(False, "--clear", help="Forget all recent searches"),
) -> None:
    """List (or clear) the persisted recent searches."""
    config = _config(ctx)
    store = _recent_store(config)
    if clear:
        store.clear()
        output.success("Recent searches cleared")
        return
    render_recent(store.list(), config.locale)


@app.command("interactive")
def interactive_command(
    ctx: typer.Context,
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="Catalog JSON file"),
) -> None:
    """Run the palette in the terminal (Ctrl+K toggles, Ctrl+C quits)."""
    from darwin_palette.ui.terminal import TerminalPalette

    config = _config(ctx)
    palette = CommandPalette(
        catalogs=_load_catalogs(catalog),
        recent_store=_recent_store(config),
        suggestion_engine=_suggestion_engine(config),
        config=config,
    )
    try:
        TerminalPalette(palette).run()
    except KeyboardInterrupt:
        logger.debug("Interactive palette interrupted")
    navigator = palette.navigator
    history = getattr(navigator, "history", [])
    if history:
        output.info(f"Last destination: {history[-1]}")


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
