# darwin_palette/recent/store.py
"""Recent-search store and the key-value backends it persists through."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from darwin_palette.config.defaults import DEFAULT_MAX_RECENT, RECENT_SEARCHES_KEY
from darwin_palette.protocols import KeyValueStore

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Key-value backends
# ──────────────────────────────────────────────────────────────────────────────
class MemoryKeyValueStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """Persists string values as one JSON object on disk.

    Writes are synchronous. A corrupted file is moved aside to
    ``<name>.json.backup`` and the store starts empty.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._data = self._load()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self._save()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(f"Key-value store {self.path} unreadable: {exc}")
            self._backup()
            return {}
        if not isinstance(raw, dict):
            logger.warning(f"Key-value store {self.path} is not a JSON object")
            self._backup()
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _backup(self) -> None:
        backup_file = self.path.with_suffix(".json.backup")
        try:
            self.path.replace(backup_file)
        except OSError as exc:
            logger.warning(f"Could not back up {self.path}: {exc}")

    def _save(self) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
        except OSError as exc:
            logger.warning(f"Failed to save key-value store {self.path}: {exc}")


# ──────────────────────────────────────────────────────────────────────────────
# Recent searches
# ──────────────────────────────────────────────────────────────────────────────
class RecentSearchStore:
    """Bounded, de-duplicated, most-recent-first list of accepted terms.

    The persisted list is read once at construction; every ``record``
    writes the whole list back synchronously.
    """

    def __init__(
        self,
        backend: KeyValueStore,
        key: str = RECENT_SEARCHES_KEY,
        max_entries: int = DEFAULT_MAX_RECENT,
    ) -> None:
        self.backend = backend
        self.key = key
        self.max_entries = max_entries
        self._entries = self._read()

    def record(self, term: str) -> None:
        """Move ``term`` to the front, dropping exact duplicates and overflow."""
        if not term or not term.strip():
            return
        entries = [term] + [e for e in self._entries if e != term]
        self._entries = entries[: self.max_entries]
        self._write()

    def list(self) -> list[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []
        self._write()

    def __len__(self) -> int:
        return len(self._entries)

    def _read(self) -> list[str]:
        try:
            stored = self.backend.get(self.key)
        except Exception as exc:
            logger.warning(f"Could not read recent searches: {exc}")
            return []
        if stored is None:
            return []
        try:
            data = json.loads(stored)
        except (TypeError, ValueError) as exc:
            logger.warning(f"Ignoring corrupt recent searches: {exc}")
            return []
        if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
            logger.warning("Ignoring recent searches: expected a list of strings")
            return []
        return data[: self.max_entries]

    def _write(self) -> None:
        try:
            self.backend.set(self.key, json.dumps(self._entries, ensure_ascii=False))
        except Exception as exc:
            logger.warning(f"Could not persist recent searches: {exc}")
