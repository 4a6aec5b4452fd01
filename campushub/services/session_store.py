"""Session Store — the stateful owner of the current user session.

Invariants:
    - One SessionStore per process, injected where needed (never imported as a global)
    - Mutations run one at a time behind an asyncio.Lock
    - Every mutation is validate -> update memory -> persist -> return
    - A rejected candidate never touches memory or storage
    - Reads (is_admin, get_display_name, ...) are synchronous and never wait on IO
    - initialize() clears loading exactly once, whatever the restore outcome

Design Decisions:
    - Optimistic ordering: memory first, storage second. A failed write is logged
      and memory keeps the new state; the caller still gets success
    - Validation failures are data (AuthResult.errors), never exceptions
    - The profile id is the session identity: update_profile cannot reassign it
"""

import asyncio
import logging
from typing import Any, Mapping

from campushub.core.domain_types import CURRENT_USER_KEY, new_user_id
from campushub.core.profile import Profile
from campushub.core.repository_protocols import KeyValueStore
from campushub.core.session_state import AuthResult, SessionState
from campushub.core.validation import validate_profile
from campushub.services.storage_service import load_key, save_key

logger = logging.getLogger(__name__)


def _needs_generated_id(candidate: Mapping[str, Any]) -> bool:
    user_id = candidate.get("id")
    return user_id is None or (isinstance(user_id, str) and not user_id.strip())


def _is_restorable(record: Any) -> bool:
    if not isinstance(record, dict):
        return False
    user_id = record.get("id")
    if not isinstance(user_id, str) or not user_id.strip():
        return False
    return validate_profile(record).valid


class SessionStore:
    """Holds the current Profile (or none) and keeps its durable copy in sync."""

    def __init__(self, store: KeyValueStore, storage_key: str = CURRENT_USER_KEY):
        self._store = store
        self._key = storage_key
        self._state = SessionState()
        self._lock = asyncio.Lock()
        self._initialized = False

    # -- Observable state ------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return SessionState(self._state.current_user, self._state.loading)

    @property
    def current_user(self) -> Profile | None:
        return self._state.current_user

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    @property
    def loading(self) -> bool:
        return self._state.loading

    # -- Lifecycle -------------------------------------------------------------

    async def initialize(self) -> None:
        """Restore the persisted session. Missing, unreadable or malformed -> signed out."""
        async with self._lock:
            if self._initialized:
                return
            self._initialized = True
            record = await load_key(self._store, self._key)
            if record is None:
                logger.info("No persisted session", extra={"storage_key": self._key})
            elif _is_restorable(record):
                self._state.current_user = Profile.from_record(record)
                logger.info(
                    "Restored persisted session",
                    extra={"user_id": self._state.current_user.id},
                )
            else:
                logger.warning(
                    "Ignoring malformed persisted session",
                    extra={"storage_key": self._key},
                )
            self._state.loading = False

    # -- Mutations -------------------------------------------------------------

    async def sign_in(self, candidate: Mapping[str, Any]) -> AuthResult:
        async with self._lock:
            prepared = dict(candidate)
            if _needs_generated_id(prepared):
                prepared["id"] = new_user_id()

            result = validate_profile(prepared)
            if not result.valid:
                logger.info(
                    f"Sign-in rejected: {sorted(result.errors)}",
                )
                return AuthResult.rejected(result.errors)

            profile = Profile.from_record(prepared)
            self._state.current_user = profile
            await self._persist(profile)
            logger.info(
                f"Signed in as {profile.role.value}",
                extra={"user_id": profile.id},
            )
            return AuthResult.ok()

    async def sign_out(self) -> bool:
        async with self._lock:
            previous = self._state.current_user
            self._state.current_user = None
            await save_key(self._store, self._key, None)
            if previous is not None:
                logger.info("Signed out", extra={"user_id": previous.id})
            return True

    async def update_profile(self, fields: Mapping[str, Any]) -> AuthResult:
        async with self._lock:
            current = self._state.current_user
            if current is None:
                return AuthResult.not_signed_in()

            merged = {**current.to_record(), **fields}
            if merged.get("id") != current.id:
                logger.debug("Ignoring id change in profile update", extra={"user_id": current.id})
                merged["id"] = current.id

            result = validate_profile(merged)
            if not result.valid:
                logger.info(
                    f"Profile update rejected: {sorted(result.errors)}",
                    extra={"user_id": current.id},
                )
                return AuthResult.rejected(result.errors)

            profile = Profile.from_record(merged)
            self._state.current_user = profile
            await self._persist(profile)
            return AuthResult.ok()

    async def _persist(self, profile: Profile) -> None:
        saved = await save_key(self._store, self._key, profile.to_record())
        if not saved:
            logger.warning(
                "Session kept in memory only; durable copy is stale",
                extra={"user_id": profile.id, "storage_key": self._key},
            )

    # -- Derived queries -------------------------------------------------------

    def is_admin(self) -> bool:
        return self._state.is_admin

    def is_student(self) -> bool:
        return self._state.is_student

    def get_display_name(self) -> str:
        return self._state.display_name

    def get_role_label(self) -> str:
        return self._state.role_label.value
