"""KeyValueStore abstraction + in-memory backend with optional JSON persistence.

Backs per-user preferences such as favorite projects. Values are strings.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional, Protocol

log = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String-keyed, string-valued store. Implementations: InMemoryKeyValueStore, SqlKeyValueStore."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        """Delete the key. Missing keys are ignored."""
        ...

    def keys(self) -> list[str]:
        ...


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore. Optional JSON persistence for restart."""

    def __init__(self, persist_path: Optional[str] = None) -> None:
        self._data: dict[str, str] = {}
        self._persist_path = persist_path
        if persist_path and os.path.isfile(persist_path):
            self._load()

    def _load(self) -> None:
        if not self._persist_path:
            return
        try:
            with open(self._persist_path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.warning("ignoring unreadable key-value file %s: %s", self._persist_path, e)
            return
        if not isinstance(data, dict):
            log.warning("ignoring key-value file %s: expected a JSON object", self._persist_path)
            return
        for k, v in data.items():
            if isinstance(k, str) and isinstance(v, str):
                self._data[k] = v

    def save(self) -> None:
        """Persist to JSON if path set."""
        if not self._persist_path:
            return
        os.makedirs(os.path.dirname(self._persist_path) or ".", exist_ok=True)
        with open(self._persist_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=0, sort_keys=True)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.save()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self.save()

    def keys(self) -> list[str]:
        return list(self._data)
