"""Result grouping, session state and the palette controller."""

from darwin_palette.palette.controller import CommandPalette, HistoryNavigator, PaletteView
from darwin_palette.palette.grouping import (
    ResultGroup,
    category_labels,
    flatten,
    group_results,
    item_at,
    total_count,
)
from darwin_palette.palette.shortcuts import KeyEvent, ShortcutTrigger
from darwin_palette.palette.state import EngineState

__all__ = [
    "CommandPalette",
    "EngineState",
    "HistoryNavigator",
    "KeyEvent",
    "PaletteView",
    "ResultGroup",
    "ShortcutTrigger",
    "category_labels",
    "flatten",
    "group_results",
    "item_at",
    "total_count",
]
