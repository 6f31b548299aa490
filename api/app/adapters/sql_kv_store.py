"""SQLAlchemy-backed KeyValueStore, used when DATABASE_URL is configured."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import Column, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


class KeyValueEntryModel(Base):
    __tablename__ = "kv_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)


class SqlKeyValueStore:
    """KeyValueStore persisted in a single kv_entries table."""

    def __init__(self, database_url: str | None = None) -> None:
        if not database_url:
            database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlKeyValueStore")

        self.engine = create_engine(database_url, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        self._ensure_tables()

    def _ensure_tables(self) -> None:
        """Create tables if they don't exist."""
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def _session(self):
        """Get a new database session with proper cleanup."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, key: str) -> Optional[str]:
        with self._session() as session:
            model = session.get(KeyValueEntryModel, key)
            return model.value if model else None

    def set(self, key: str, value: str) -> None:
        with self._session() as session:
            model = session.get(KeyValueEntryModel, key)
            if model is None:
                session.add(KeyValueEntryModel(key=key, value=value))
            else:
                model.value = value

    def remove(self, key: str) -> None:
        with self._session() as session:
            session.query(KeyValueEntryModel).filter_by(key=key).delete(synchronize_session=False)

    def keys(self) -> list[str]:
        with self._session() as session:
            return [key for (key,) in session.query(KeyValueEntryModel.key).order_by(KeyValueEntryModel.key)]
