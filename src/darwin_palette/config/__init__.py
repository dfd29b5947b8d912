"""
Configuration for Darwin palette.

Defaults, enums, environment variables and the pydantic session config.
"""

from darwin_palette.config.enums import (
    ALWAYS_VISIBLE_CATEGORIES,
    ContentMode,
    EnterPolicy,
    ItemCategory,
    ItemPriority,
    NavKey,
    PaletteStatus,
    ShortcutAction,
    SuggestionType,
    TargetKind,
    Theme,
)
from darwin_palette.config.env_vars import EnvVar
from darwin_palette.config.models import PaletteConfig

__all__ = [
    "PaletteConfig",
    "EnvVar",
    # Enums
    "ALWAYS_VISIBLE_CATEGORIES",
    "ContentMode",
    "EnterPolicy",
    "ItemCategory",
    "ItemPriority",
    "NavKey",
    "PaletteStatus",
    "ShortcutAction",
    "SuggestionType",
    "TargetKind",
    "Theme",
]
