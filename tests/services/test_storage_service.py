"""Storage Service — best-effort load/save semantics.

Invariants:
    - Missing and failed loads both come back as None
    - save_key(None) deletes the slot
    - Write failures come back as False and are logged, never raised
"""

import logging

from campushub.services.storage_service import load_key, save_key


async def test_load_missing_key_returns_none(kv_store):
    assert await load_key(kv_store, "absent") is None


async def test_save_then_load(kv_store):
    assert await save_key(kv_store, "slot", {"name": "Jo"}) is True
    assert await load_key(kv_store, "slot") == {"name": "Jo"}


async def test_save_none_deletes(kv_store):
    await save_key(kv_store, "slot", {"name": "Jo"})
    assert await save_key(kv_store, "slot", None) is True
    assert kv_store.writes[-1] == ("delete", "slot")
    assert await load_key(kv_store, "slot") is None


async def test_load_failure_returns_none_and_logs(failing_kv_store, caplog):
    with caplog.at_level(logging.WARNING, logger="campushub.services.storage_service"):
        assert await load_key(failing_kv_store, "slot") is None
    record = caplog.records[-1]
    assert record.storage_key == "slot"
    assert record.error_code == "PERSISTENCE_ERROR"


async def test_save_failure_returns_false(failing_kv_store, caplog):
    with caplog.at_level(logging.ERROR, logger="campushub.services.storage_service"):
        assert await save_key(failing_kv_store, "slot", {"name": "Jo"}) is False
        assert await save_key(failing_kv_store, "slot", None) is False
    assert failing_kv_store.calls == ["set", "delete"]
    assert len(caplog.records) == 2


async def test_unserializable_value_is_a_failed_save(kv_store):
    assert await save_key(kv_store, "slot", {"when": object()}) is False
    assert await load_key(kv_store, "slot") is None
