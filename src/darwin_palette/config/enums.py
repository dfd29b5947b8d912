"""Configuration and engine enums - no magic strings!"""

from __future__ import annotations

from enum import Enum


class ItemCategory(str, Enum):
    """Fixed classification of a searchable item.

    Declaration order is the display order of result groups.
    """

    ACTION = "action"
    PAGE = "page"
    DISEASE = "disease"
    MEDICATION = "medication"
    SCREENING = "screening"


# Categories shown when the query is empty
ALWAYS_VISIBLE_CATEGORIES: frozenset[ItemCategory] = frozenset(
    {ItemCategory.ACTION, ItemCategory.PAGE}
)


class TargetKind(str, Enum):
    """What committing an item does."""

    NAVIGATE = "navigate"
    ACTION = "action"


class ItemPriority(str, Enum):
    """Tie-break between items with equal match scores."""

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class PaletteStatus(str, Enum):
    """States of the selection state machine."""

    CLOSED = "closed"
    OPEN_EMPTY = "open_empty"
    OPEN_QUERYING = "open_querying"


class NavKey(str, Enum):
    """Keys the state machine reacts to while open."""

    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"


class EnterPolicy(str, Enum):
    """Behavior of Enter when nothing is highlighted."""

    NOOP = "noop"
    FIRST = "first"


class SuggestionType(str, Enum):
    """Kinds of entries in the smart suggestion list."""

    CORRECTION = "correction"
    AUTOCOMPLETE = "autocomplete"
    RECENT = "recent"


class ShortcutAction(str, Enum):
    """What a global keyboard shortcut asks the palette to do."""

    OPEN = "open"
    TOGGLE = "toggle"


class Theme(str, Enum):
    """Application color theme toggled by the theme action."""

    LIGHT = "light"
    DARK = "dark"


class ContentMode(str, Enum):
    """Application content mode toggled by the content action."""

    DESCRIPTIVE = "descriptive"
    CRITICAL = "critical"
