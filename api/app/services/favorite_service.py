"""Per-project favorite flags on top of a KeyValueStore."""

from __future__ import annotations

import logging
from typing import Iterable

from app.adapters.kv_store import KeyValueStore
from app.models.project import ProjectDescriptor

FAVORITE_MARKER = "favorite"
log = logging.getLogger(__name__)


class FavoriteStore:
    """A project is a favorite iff its key holds FAVORITE_MARKER.

    Unmarking removes the key rather than writing a false value. Storage
    errors come straight from the backing store.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def is_favorite(self, project_name: str) -> bool:
        return self._store.get(project_name) == FAVORITE_MARKER

    def set_favorite(self, project_name: str, should_be_favorite: bool) -> None:
        if should_be_favorite:
            self._store.set(project_name, FAVORITE_MARKER)
        else:
            self._store.remove(project_name)
        log.debug("favorite project=%s value=%s", project_name, should_be_favorite)

    def sort_by_favorite(self, projects: Iterable[ProjectDescriptor]) -> list[ProjectDescriptor]:
        """Favorites first, then by name (case-insensitive). Returns a new list."""
        return sorted(projects, key=lambda p: (not self.is_favorite(p.name), p.name.lower()))
