"""Terminal rendering and the interactive prompt_toolkit palette."""

from darwin_palette.ui.renderers import (
    highlight_text,
    render_recent,
    render_results,
    render_suggestions,
    render_view,
    result_rows,
    suggestion_lines,
)

__all__ = [
    "highlight_text",
    "render_recent",
    "render_results",
    "render_suggestions",
    "render_view",
    "result_rows",
    "suggestion_lines",
]
