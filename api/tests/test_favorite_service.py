"""Tests for FavoriteStore."""

import pytest

from app.adapters.kv_store import InMemoryKeyValueStore
from app.models.project import ProjectDescriptor
from app.services.favorite_service import FAVORITE_MARKER, FavoriteStore


@pytest.fixture
def kv():
    return InMemoryKeyValueStore(persist_path=None)


@pytest.fixture
def favorites(kv):
    return FavoriteStore(kv)


def test_unset_project_is_not_favorite(favorites):
    assert favorites.is_favorite("docs") is False


def test_set_favorite_writes_marker(favorites, kv):
    favorites.set_favorite("docs", True)
    assert favorites.is_favorite("docs") is True
    assert kv.get("docs") == FAVORITE_MARKER


def test_unset_favorite_removes_key(favorites, kv):
    favorites.set_favorite("docs", True)
    favorites.set_favorite("docs", False)
    assert favorites.is_favorite("docs") is False
    assert "docs" not in kv.keys()


def test_other_values_are_not_favorite(favorites, kv):
    kv.set("docs", "true")
    assert favorites.is_favorite("docs") is False


def test_unset_missing_favorite_is_noop(favorites, kv):
    favorites.set_favorite("never-set", False)
    assert kv.keys() == []


def test_favorites_survive_restart(tmp_path):
    path = str(tmp_path / "favorites.json")
    FavoriteStore(InMemoryKeyValueStore(persist_path=path)).set_favorite("docs", True)
    assert FavoriteStore(InMemoryKeyValueStore(persist_path=path)).is_favorite("docs") is True


def test_sort_by_favorite_puts_favorites_first(favorites):
    projects = [ProjectDescriptor(name=n) for n in ["charlie", "Alpha", "bravo", "delta"]]
    favorites.set_favorite("delta", True)
    favorites.set_favorite("bravo", True)
    ordered = favorites.sort_by_favorite(projects)
    assert [p.name for p in ordered] == ["bravo", "delta", "Alpha", "charlie"]
    assert [p.name for p in projects] == ["charlie", "Alpha", "bravo", "delta"]
