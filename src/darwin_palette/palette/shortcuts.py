# darwin_palette/palette/shortcuts.py
"""Global keyboard shortcut trigger.

Mod+K toggles the palette (Cmd on macOS, Ctrl elsewhere). A bare ``/``
opens it, unless focus is already inside a text field.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from darwin_palette.config.defaults import PLATFORM_DARWIN
from darwin_palette.config.enums import ShortcutAction

TOGGLE_KEY = "k"
OPEN_KEY = "/"


@dataclass(frozen=True)
class KeyEvent:
    """A key press as seen by a global listener."""

    key: str
    meta: bool = False
    ctrl: bool = False
    in_text_field: bool = False


class ShortcutTrigger:
    """Maps key events to palette open/toggle requests."""

    def __init__(self, platform: str | None = None) -> None:
        self.platform = platform or sys.platform

    @property
    def modifier_name(self) -> str:
        return "meta" if self.platform == PLATFORM_DARWIN else "ctrl"

    def match(self, event: KeyEvent) -> ShortcutAction | None:
        """Return the requested action, or None if the event is not a shortcut."""
        modifier = event.meta if self.platform == PLATFORM_DARWIN else event.ctrl
        if modifier and event.key.lower() == TOGGLE_KEY:
            return ShortcutAction.TOGGLE
        if (
            event.key == OPEN_KEY
            and not event.in_text_field
            and not (event.meta or event.ctrl)
        ):
            return ShortcutAction.OPEN
        return None

    def dispatch(self, event: KeyEvent, palette) -> bool:
        """Apply the shortcut to ``palette``; True when the event was consumed."""
        action = self.match(event)
        if action is ShortcutAction.TOGGLE:
            palette.toggle()
            return True
        if action is ShortcutAction.OPEN:
            palette.open()
            return True
        return False
