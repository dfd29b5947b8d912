"""Recent-search persistence."""

from darwin_palette.recent.store import (
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    RecentSearchStore,
)

__all__ = ["JsonFileKeyValueStore", "MemoryKeyValueStore", "RecentSearchStore"]
