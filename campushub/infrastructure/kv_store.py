"""Key-Value Stores — durable and in-process implementations of KeyValueStore.

Invariants:
    - Values are JSON objects; anything that cannot round-trip through JSON is
      rejected with PersistenceError("...", "serialize")
    - get() on a missing key returns None; delete() on a missing key is a no-op
    - Callers never receive a reference to stored state (copies in, copies out)

Design Decisions:
    - SqlKeyValueStore goes through DatabaseSessionManager so driver errors are
      already mapped to PersistenceError
    - InMemoryKeyValueStore keeps JSON text, not dicts: serialization failures
      show up in development exactly as they would against the database
"""

import json
import logging
from typing import Any

from sqlalchemy import delete

from campushub.core.errors import ErrorContext, PersistenceError
from campushub.infrastructure.database import DatabaseSessionManager
from campushub.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


def _encode(key: str, value: dict[str, Any]) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise PersistenceError(
            str(e), "serialize", ErrorContext(storage_key=key),
        ) from e


def _require_object(key: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise PersistenceError(
            "stored value is not an object", "deserialize",
            ErrorContext(storage_key=key),
        )
    return dict(value)


def _decode(key: str, raw: str) -> dict[str, Any]:
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise PersistenceError(
            str(e), "deserialize", ErrorContext(storage_key=key),
        ) from e
    return _require_object(key, value)


class SqlKeyValueStore:
    """KeyValueStore backed by the kv_entries table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, key: str) -> dict[str, Any] | None:
        async with self._manager.session() as db:
            entry = await db.get(KeyValueEntry, key)
            if entry is None:
                return None
            value = entry.value
        return _require_object(key, value)

    async def set(self, key: str, value: dict[str, Any]) -> None:
        payload = json.loads(_encode(key, value))
        async with self._manager.session() as db:
            entry = await db.get(KeyValueEntry, key)
            if entry is None:
                db.add(KeyValueEntry(key=key, value=payload))
            else:
                entry.value = payload
            await db.commit()
        logger.debug("Stored key", extra={"storage_key": key})

    async def delete(self, key: str) -> None:
        async with self._manager.session() as db:
            await db.execute(
                delete(KeyValueEntry).where(KeyValueEntry.key == key),
            )
            await db.commit()
        logger.debug("Deleted key", extra={"storage_key": key})


class InMemoryKeyValueStore:
    """Process-local KeyValueStore. Survives SessionStore instances, not the process."""

    def __init__(self):
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> dict[str, Any] | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        return _decode(key, raw)

    async def set(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = _encode(key, value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data
