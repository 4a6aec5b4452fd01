"""Key-Value Stores — SQL-backed and in-memory implementations.

Invariants:
    - get/set/delete behave the same on both backends
    - Overwrites replace the single row for a key
    - Serialization and driver failures surface as PersistenceError
"""

from unittest.mock import patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from campushub.core.errors import PersistenceError
from campushub.infrastructure.kv_store import InMemoryKeyValueStore, SqlKeyValueStore
from campushub.models.kv_entry import KeyValueEntry


@pytest.fixture(params=["memory", "sql"])
async def any_store(request, db_manager):
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return SqlKeyValueStore(db_manager)


async def test_missing_key(any_store):
    assert await any_store.get("nope") is None


async def test_set_get_overwrite_delete(any_store):
    await any_store.set("slot", {"id": "u1", "name": "Jo", "year": 2})
    assert await any_store.get("slot") == {"id": "u1", "name": "Jo", "year": 2}

    await any_store.set("slot", {"id": "u1", "name": "Joanna"})
    assert await any_store.get("slot") == {"id": "u1", "name": "Joanna"}

    await any_store.delete("slot")
    assert await any_store.get("slot") is None


async def test_delete_missing_key_is_noop(any_store):
    await any_store.delete("never-set")
    assert await any_store.get("never-set") is None


async def test_returned_value_is_a_copy(any_store):
    await any_store.set("slot", {"name": "Jo"})
    value = await any_store.get("slot")
    value["name"] = "changed"
    assert (await any_store.get("slot"))["name"] == "Jo"


async def test_unserializable_value_rejected(any_store):
    with pytest.raises(PersistenceError) as exc_info:
        await any_store.set("slot", {"bad": {1, 2}})
    assert exc_info.value.operation == "serialize"


async def test_sql_store_keeps_one_row_per_key(db_manager):
    store = SqlKeyValueStore(db_manager)
    await store.set("slot", {"name": "A1"})
    await store.set("slot", {"name": "A2"})
    async with db_manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(KeyValueEntry))
    assert count == 1


async def test_sql_driver_failure_maps_to_persistence_error(db_manager):
    store = SqlKeyValueStore(db_manager)
    boom = OperationalError("SELECT", {}, Exception("database is locked"))
    with patch("sqlalchemy.ext.asyncio.AsyncSession.get", side_effect=boom):
        with pytest.raises(PersistenceError) as exc_info:
            await store.get("slot")
    assert exc_info.value.operation == "execute"


async def test_in_memory_store_rejects_non_object_payload():
    store = InMemoryKeyValueStore()
    store._data["slot"] = "[1, 2]"
    with pytest.raises(PersistenceError):
        await store.get("slot")
