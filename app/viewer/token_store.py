"""Persistence for the viewer's single access token."""

from __future__ import annotations

from typing import Optional, Protocol

from app.clients.sqlite_store import SQLiteStore

TOKEN_KEY = "linkedin_access_token"


class TokenStore(Protocol):
    def get(self) -> Optional[str]:
        ...

    def set(self, token: str) -> None:
        ...

    def clear(self) -> None:
        ...


class InMemoryTokenStore:
    """Process-local token store, the equivalent of a fresh browser tab."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class SQLiteTokenStore:
    """Token store backed by a SQLite key-value file, surviving restarts."""

    def __init__(self, store: SQLiteStore, *, key: str = TOKEN_KEY) -> None:
        self._store = store
        self._key = key

    @classmethod
    def at_path(cls, db_path: str) -> "SQLiteTokenStore":
        return cls(SQLiteStore(db_path))

    def get(self) -> Optional[str]:
        return self._store.get(self._key) or None

    def set(self, token: str) -> None:
        self._store.put(self._key, token)

    def clear(self) -> None:
        self._store.delete(self._key)


__all__ = ["InMemoryTokenStore", "SQLiteTokenStore", "TOKEN_KEY", "TokenStore"]
