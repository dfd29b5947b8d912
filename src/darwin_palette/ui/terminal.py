# darwin_palette/ui/terminal.py
"""
Interactive terminal palette built on prompt_toolkit.

Layout is a one-line query input above a results pane. Ctrl+K toggles the
palette, ``/`` opens it while closed, arrows move the highlight, Enter
commits and Escape cancels. Ctrl+C quits.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.styles import Style

from darwin_palette.config.enums import NavKey, PaletteStatus
from darwin_palette.corpus.labels import translate
from darwin_palette.palette.controller import CommandPalette, PaletteView
from darwin_palette.palette.shortcuts import KeyEvent, ShortcutTrigger
from darwin_palette.search.fuzzy import highlight_spans
from darwin_palette.ui.renderers import CATEGORY_ICONS, suggestion_lines

logger = logging.getLogger(__name__)

Fragments = List[Tuple[str, str]]

# Terminals never deliver Cmd, so Ctrl+K toggles on every platform.
TERMINAL_PLATFORM = "terminal"

PALETTE_STYLE = Style.from_dict(
    {
        "prompt": "fg:goldenrod bold",
        "group": "fg:ansibrightblack bold",
        "item": "",
        "item.selected": "reverse",
        "match": "fg:goldenrod bold",
        "subtitle": "fg:ansibrightblack",
        "hint": "fg:ansicyan",
        "status": "fg:ansibrightblack italic",
        "error": "fg:ansired",
    }
)


def _highlighted(text: str, query: str, base: str) -> Fragments:
    fragments: Fragments = []
    cursor = 0
    for start, end in highlight_spans(text, query):
        if start > cursor:
            fragments.append((f"class:{base}", text[cursor:start]))
        fragments.append((f"class:{base} class:match", text[start:end]))
        cursor = end
    if cursor < len(text):
        fragments.append((f"class:{base}", text[cursor:]))
    return fragments


def view_fragments(view: PaletteView, message: str = "") -> Fragments:
    """Formatted text for the results pane."""
    fragments: Fragments = []
    if view.status is PaletteStatus.CLOSED:
        fragments.append(
            ("class:status", "Palette closed. Ctrl+K or / to open, Ctrl+C to quit.\n")
        )
    else:
        if view.is_loading:
            fragments.append(("class:status", "Loading...\n"))
        if view.recent:
            label = translate("commandPalette.recentSearches", view.locale)
            fragments.append(("class:hint", f"{label}: {', '.join(view.recent)}\n"))
        if not view.has_results:
            fragments.append(
                ("class:status", translate("commandPalette.noResults", view.locale) + "\n")
            )
        for group in view.groups:
            icon = CATEGORY_ICONS.get(group.category, "•")
            fragments.append(("class:group", f"{icon} {group.label}\n"))
            for position, item in enumerate(group.items):
                selected = group.global_index(position) == view.selected_index
                base = "item.selected" if selected else "item"
                fragments.append((f"class:{base}", "  "))
                fragments.extend(_highlighted(item.title, view.query.strip(), base))
                if item.subtitle:
                    fragments.append(("class:subtitle", f"  {item.subtitle}"))
                if item.shortcut:
                    fragments.append(("class:subtitle", f"  [{item.shortcut}]"))
                fragments.append(("", "\n"))
        for line in suggestion_lines(view.suggestions, view.locale):
            fragments.append(("class:hint", line + "\n"))
    if message:
        fragments.append(("class:error", message + "\n"))
    return fragments


class TerminalPalette:
    """Binds a ``CommandPalette`` to a prompt_toolkit application."""

    def __init__(self, palette: CommandPalette, trigger: ShortcutTrigger | None = None):
        self.palette = palette
        self.trigger = trigger or ShortcutTrigger(platform=TERMINAL_PLATFORM)
        self.message = ""
        self.buffer = Buffer(
            multiline=False,
            read_only=Condition(lambda: not self.palette.is_open),
            on_text_changed=self._on_text_changed,
        )
        self.app = self._create_application()

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def _on_text_changed(self, buffer: Buffer) -> None:
        if self.palette.is_open and buffer.text != self.palette.query:
            self.message = ""
            self.palette.set_query(buffer.text)

    def _sync_buffer(self) -> None:
        """Mirror the controller's query into the input line."""
        if self.buffer.text != self.palette.query:
            self.buffer.set_document(
                Document(self.palette.query),
                bypass_readonly=True,
            )

    def handle_nav(self, key: NavKey) -> None:
        try:
            item = self.palette.handle_key(key)
        except Exception as exc:
            self.message = f"Command failed: {exc}"
            return
        if item is not None:
            self.message = f"→ {item.title}"
        self._sync_buffer()

    def handle_shortcut(self, event: KeyEvent) -> None:
        if self.trigger.dispatch(event, self.palette):
            self.message = ""
            self._sync_buffer()

    # ------------------------------------------------------------------
    # prompt_toolkit wiring
    # ------------------------------------------------------------------

    def create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        is_closed = Condition(lambda: not self.palette.is_open)

        @kb.add(Keys.ControlC)
        def _(event):
            event.app.exit()

        @kb.add(Keys.ControlK)
        def _(event):
            self.handle_shortcut(KeyEvent(key="k", ctrl=True))

        @kb.add("/", filter=is_closed)
        def _(event):
            self.handle_shortcut(KeyEvent(key="/"))

        @kb.add(Keys.Up)
        def _(event):
            self.handle_nav(NavKey.ARROW_UP)

        @kb.add(Keys.Down)
        def _(event):
            self.handle_nav(NavKey.ARROW_DOWN)

        @kb.add(Keys.ControlM)
        def _(event):
            self.handle_nav(NavKey.ENTER)

        @kb.add(Keys.Escape, eager=True)
        def _(event):
            self.handle_nav(NavKey.ESCAPE)

        return kb

    def _create_application(self) -> Application:
        placeholder = translate("commandPalette.placeholder", self.palette.locale)
        input_window = Window(
            BufferControl(buffer=self.buffer),
            height=1,
            get_line_prefix=lambda line, wrap: [("class:prompt", "⌕ ")],
        )
        hint_window = Window(
            FormattedTextControl(lambda: [("class:status", placeholder)]),
            height=1,
        )
        results_window = Window(
            FormattedTextControl(lambda: view_fragments(self.palette.view(), self.message))
        )
        return Application(
            layout=Layout(HSplit([input_window, hint_window, results_window])),
            key_bindings=self.create_key_bindings(),
            style=PALETTE_STYLE,
            full_screen=False,
        )

    def run(self) -> None:
        """Open the palette and run until Ctrl+C."""
        self.palette.open()
        logger.debug("Interactive palette started")
        self.app.run()
