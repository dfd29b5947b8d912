# darwin_palette/ui/renderers.py
"""Terminal rendering of palette views using chuk-term and rich."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from chuk_term.ui import format_table, output
from rich.text import Text

from darwin_palette.config.enums import ItemCategory
from darwin_palette.corpus.labels import translate
from darwin_palette.palette.controller import PaletteView
from darwin_palette.palette.grouping import ResultGroup
from darwin_palette.search.fuzzy import highlight_spans
from darwin_palette.suggestions.engine import Suggestions

CATEGORY_ICONS: dict[ItemCategory, str] = {
    ItemCategory.ACTION: "⚡",
    ItemCategory.PAGE: "📄",
    ItemCategory.DISEASE: "🩺",
    ItemCategory.MEDICATION: "💊",
    ItemCategory.SCREENING: "🔍",
}

RESULT_COLUMNS = ["#", "Group", "Title", "Subtitle", "Target"]


def highlight_text(text: str, query: str, style: str = "bold yellow") -> Text:
    """``text`` with every literal occurrence of ``query`` styled."""
    rendered = Text(text)
    for start, end in highlight_spans(text, query):
        rendered.stylize(style, start, end)
    return rendered


def result_rows(
    groups: Sequence[ResultGroup], selected_index: int = -1
) -> List[Dict[str, Any]]:
    """One table row per item, numbered by selection index."""
    rows: List[Dict[str, Any]] = []
    for group in groups:
        icon = CATEGORY_ICONS.get(group.category, "•")
        for position, item in enumerate(group.items):
            index = group.global_index(position)
            marker = "▶" if index == selected_index else " "
            target = getattr(item.target, "path", None) or "action"
            rows.append(
                {
                    "#": f"{marker}{index}",
                    "Group": f"{icon} {group.label}",
                    "Title": item.title,
                    "Subtitle": item.subtitle or "",
                    "Target": target,
                }
            )
    return rows


def suggestion_lines(suggestions: Suggestions, locale: str = "en") -> List[str]:
    """Human-readable lines for correction, related topics and trending."""
    lines: List[str] = []
    if suggestions.correction:
        label = translate("commandPalette.didYouMean", locale)
        lines.append(f"{label}: {suggestions.correction}?")
    if suggestions.related_topics:
        label = translate("commandPalette.related", locale)
        lines.append(f"{label}: {', '.join(suggestions.related_topics)}")
    if suggestions.trending:
        label = translate("commandPalette.trending", locale)
        lines.append(f"{label}: {', '.join(suggestions.trending)}")
    return lines


def render_results(view: PaletteView, title: str | None = None) -> None:
    """Print grouped results as a table, or the no-results message."""
    if not view.has_results:
        output.warning(translate("commandPalette.noResults", view.locale))
        return
    table = format_table(
        data=result_rows(view.groups, view.selected_index),
        title=title or f"Results for '{view.query}'",
        columns=RESULT_COLUMNS,
    )
    output.print(table)


def render_suggestions(view: PaletteView) -> None:
    for line in suggestion_lines(view.suggestions, view.locale):
        output.hint(line)


def render_recent(recent: Sequence[str], locale: str = "en") -> None:
    label = translate("commandPalette.recentSearches", locale)
    if not recent:
        output.info(f"{label}: -")
        return
    output.rule(label)
    for position, term in enumerate(recent, 1):
        output.print(f"  {position}. {term}")


def render_view(view: PaletteView) -> None:
    """Full palette: recent searches (empty query), results, suggestions."""
    if view.recent:
        render_recent(view.recent, view.locale)
    render_results(view)
    render_suggestions(view)
