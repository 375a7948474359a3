from __future__ import annotations

import json
import logging
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

# Key under which the admin session token is persisted.
TOKEN_KEY = "adminToken"

K = TypeVar("K")
V = TypeVar("V")


class InMemoryStorage(Generic[K, V]):
    """
    Simple in-memory key/value storage.
    """

    def __init__(self) -> None:
        self._store: MutableMapping[K, V] = {}

    def put(self, key: K, value: V) -> None:
        self._store[key] = value

    def get(self, key: K) -> V | None:
        return self._store.get(key)

    def delete(self, key: K) -> None:
        self._store.pop(key, None)

    def all(self) -> list[V]:
        return list(self._store.values())

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


class JsonFileStorage(InMemoryStorage[str, Any]):
    """
    Key/value storage persisted to a JSON file, written on every change.
    Plays the part of the browser's localStorage.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path).expanduser()
        if self.path.exists():
            with open(self.path) as f:
                self._store.update(json.load(f))

    def put(self, key: str, value: Any) -> None:
        super().put(key, value)
        self._flush()

    def delete(self, key: str) -> None:
        super().delete(key)
        self._flush()

    def clear(self) -> None:
        super().clear()
        self._flush()

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(dict(self._store), f)
        logger.debug("Storage written to %s", self.path)


_storage: InMemoryStorage[str, Any] | None = None


def get_storage() -> InMemoryStorage[str, Any]:
    """Get the global storage instance."""
    global _storage
    if _storage is None:
        _storage = InMemoryStorage()
    return _storage
