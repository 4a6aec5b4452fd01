"""Session Routes — sign-in, sign-out, profile update and current-session reads.

Invariants:
    - Every mutation goes through SessionStore (validation, lock, persistence)
    - Validation failures -> 422 with the field-keyed errors from AuthResult
    - Profile update without a signed-in user -> 401 NotAuthenticatedError, decided
      from the store's own result (under its lock), not from a pre-check
    - Sign-out always succeeds (idempotent)

Design Decisions:
    - Candidate bodies are dict[str, Any]: type mistakes reach the validator and
      come back as field errors instead of FastAPI's generic 422 details
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from campushub.api.dependencies import get_session_store
from campushub.core.candidate import build_candidate
from campushub.core.errors import NotAuthenticatedError
from campushub.core.session_state import AuthResult
from campushub.schemas.session import (
    AuthResultResponse, SessionResponse, SignInForm,
)
from campushub.services.session_store import SessionStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/session", tags=["session"])


def _auth_response(result: AuthResult) -> JSONResponse:
    if result.not_authenticated:
        raise NotAuthenticatedError()
    code = status.HTTP_200_OK if result.success else status.HTTP_422_UNPROCESSABLE_ENTITY
    return JSONResponse(
        status_code=code,
        content=AuthResultResponse(**result.to_dict()).model_dump(exclude_none=True),
    )


@router.get("", response_model=SessionResponse)
async def get_session(store: SessionStore = Depends(get_session_store)):
    """Current session snapshot."""
    return SessionResponse.from_state(store.state)


@router.post("", response_model=AuthResultResponse)
async def sign_in(
    candidate: dict[str, Any] = Body(...),
    store: SessionStore = Depends(get_session_store),
):
    """Sign in with a profile candidate."""
    return _auth_response(await store.sign_in(candidate))


@router.post("/form", response_model=AuthResultResponse)
async def sign_in_with_form(
    form: SignInForm, store: SessionStore = Depends(get_session_store),
):
    """Sign in from the raw sign-in form fields."""
    candidate = build_candidate(
        form.name, form.is_admin,
        roll_number=form.roll_number, branch=form.branch, year=form.year,
    )
    return _auth_response(await store.sign_in(candidate))


@router.delete("")
async def sign_out(store: SessionStore = Depends(get_session_store)):
    """Sign out. Safe to call when nobody is signed in."""
    return {"success": await store.sign_out()}


@router.patch("/profile", response_model=AuthResultResponse)
async def update_profile(
    fields: dict[str, Any] = Body(...),
    store: SessionStore = Depends(get_session_store),
):
    """Shallow-merge fields into the signed-in profile."""
    return _auth_response(await store.update_profile(fields))
