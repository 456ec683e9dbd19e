try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from pathlib import Path

import pytest

from app.clients.sqlite_store import SQLiteStore
from app.viewer import InMemoryTokenStore, SQLiteTokenStore


def test_sqlite_token_store_survives_reopen(tmp_path: Path) -> None:
    db_path = tmp_path / "nested" / "tokens.db"
    store = SQLiteTokenStore.at_path(str(db_path))
    assert store.get() is None

    store.set("first")
    store.set("second")

    reopened = SQLiteTokenStore.at_path(str(db_path))
    assert reopened.get() == "second"

    reopened.clear()
    assert store.get() is None
    reopened.clear()


def test_sqlite_store_keeps_keys_separate(tmp_path: Path) -> None:
    backing = SQLiteStore(str(tmp_path / "kv.db"))
    tokens = SQLiteTokenStore(backing)

    backing.put("other", "value")
    tokens.set("token")
    tokens.clear()

    assert backing.get("other") == "value"


def test_sqlite_store_rejects_empty_key(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        SQLiteStore(str(tmp_path / "kv.db")).put("", "value")


def test_in_memory_token_store() -> None:
    store = InMemoryTokenStore()
    store.set("abc")
    assert store.get() == "abc"
    store.clear()
    assert store.get() is None
