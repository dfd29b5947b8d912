#!/usr/bin/env python
"""
Scripted walk through a palette session.

Opens the palette, types a misspelled query, follows the correction,
moves the highlight and commits, then shows the recent searches.

Run with: uv run examples/palette_demo.py
"""

from pathlib import Path

from chuk_term.ui import output

from darwin_palette.config.enums import NavKey
from darwin_palette.corpus.catalogs import load_catalog_file
from darwin_palette.palette.controller import CommandPalette
from darwin_palette.ui.renderers import render_view

CATALOG = Path(__file__).parent / "sample_catalog.json"


def demo_session() -> None:
    palette = CommandPalette(catalogs=load_catalog_file(CATALOG))

    output.rule("Empty query")
    palette.open()
    render_view(palette.view())

    output.rule("Typo")
    palette.set_query("hypertenson")
    render_view(palette.view())

    correction = palette.suggestions.correction
    if correction:
        output.rule(f"Following correction: {correction}")
        palette.apply_suggestion(correction)
        render_view(palette.view())

    output.rule("Commit")
    palette.handle_key(NavKey.ARROW_DOWN)
    committed = palette.handle_key(NavKey.ENTER)
    if committed:
        output.success(f"Committed {committed.title}")
    output.hint(f"Navigator history: {palette.navigator.history}")

    output.rule("Reopened")
    palette.open()
    render_view(palette.view())


def demo_action() -> None:
    output.rule("Toggle theme action")
    palette = CommandPalette()
    palette.set_query("theme")
    palette.handle_key(NavKey.ARROW_DOWN)
    palette.handle_key(NavKey.ENTER)
    output.info(f"Theme is now {palette.context.app_state.theme.value}")
    output.info(f"Recent searches: {palette.recent_searches}")


if __name__ == "__main__":
    demo_session()
    demo_action()
