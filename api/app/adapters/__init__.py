"""Adapters for external storage: project catalogue and key-value preferences."""

from app.adapters.kv_store import InMemoryKeyValueStore
from app.adapters.project_store import InMemoryProjectStore
from app.adapters.sql_kv_store import SqlKeyValueStore

__all__ = ["InMemoryKeyValueStore", "InMemoryProjectStore", "SqlKeyValueStore"]
