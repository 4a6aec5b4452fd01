"""API Dependencies — access to the process SessionStore.

Invariants:
    - The SessionStore is created once by the lifespan and kept on app.state
    - Tests swap it through app.dependency_overrides, never by patching globals
"""

from fastapi import Request

from campushub.services.session_store import SessionStore


def get_session_store(request: Request) -> SessionStore:
    """FastAPI dependency for the process-wide session store."""
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        raise RuntimeError("Session store not initialized")
    return store
