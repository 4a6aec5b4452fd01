"""Storage Service — best-effort load/save of a single key against a KeyValueStore.

Invariants:
    - load_key returns None for both "missing" and "failed"; it never raises PersistenceError
    - save_key with value None deletes the slot (sign-out path)
    - save_key reports failure as False; it never raises PersistenceError
    - Exactly one attempt per call, no retry, no backoff

Design Decisions:
    - Failures logged here, once, with storage_key and error_code extras; callers
      only decide what a False means for them
"""

import logging
from typing import Any

from campushub.core.errors import PersistenceError
from campushub.core.repository_protocols import KeyValueStore

logger = logging.getLogger(__name__)


async def load_key(store: KeyValueStore, key: str) -> dict[str, Any] | None:
    try:
        return await store.get(key)
    except PersistenceError as e:
        logger.warning(
            f"Failed to load stored value: {e.message}",
            extra={"storage_key": key, "error_code": e.code, "operation": e.operation},
        )
        return None


async def save_key(
    store: KeyValueStore, key: str, value: dict[str, Any] | None,
) -> bool:
    try:
        if value is None:
            await store.delete(key)
        else:
            await store.set(key, value)
    except PersistenceError as e:
        logger.error(
            f"Failed to save stored value: {e.message}",
            extra={"storage_key": key, "error_code": e.code, "operation": e.operation},
        )
        return False
    return True
