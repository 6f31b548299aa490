"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _fresh_app_state():
    # Each test gets empty, non-persistent stores on the shared FastAPI app.
    from app.adapters.kv_store import InMemoryKeyValueStore
    from app.adapters.project_store import InMemoryProjectStore
    from app.main import app
    from app.services.favorite_service import FavoriteStore

    app.state.project_store = InMemoryProjectStore(persist_path=None)
    app.state.favorites = FavoriteStore(InMemoryKeyValueStore(persist_path=None))
    yield
