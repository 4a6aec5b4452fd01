"""Session Schemas — Pydantic models for the session API boundary.

Invariants:
    - SignInForm mirrors the sign-in screen: every student field is free text
    - SessionResponse is a read-only projection of SessionState
    - AuthResultResponse matches AuthResult.to_dict()

Design Decisions:
    - Candidate and profile-update bodies are plain dicts, not models: wrong types
      must reach the validator so the caller gets field-keyed messages
"""

from pydantic import BaseModel, Field

from campushub.core.domain_types import RoleLabel
from campushub.core.session_state import SessionState


class SignInForm(BaseModel):
    """Raw sign-in form, converted by build_candidate()."""
    name: str = Field(default="", max_length=200)
    is_admin: bool = False
    roll_number: str = Field(default="", max_length=100)
    branch: str = Field(default="", max_length=100)
    year: str = Field(default="", max_length=10)


class ProfileResponse(BaseModel):
    id: str
    name: str
    is_admin: bool
    roll_number: str | None = None
    branch: str | None = None
    year: int | None = None


class SessionResponse(BaseModel):
    """Current session as seen by the UI layer."""
    user: ProfileResponse | None
    is_authenticated: bool
    loading: bool
    display_name: str
    role_label: RoleLabel
    is_admin: bool
    is_student: bool

    @classmethod
    def from_state(cls, state: SessionState) -> "SessionResponse":
        user = state.current_user
        return cls(
            user=ProfileResponse(**user.to_record()) if user else None,
            is_authenticated=state.is_authenticated,
            loading=state.loading,
            display_name=state.display_name,
            role_label=state.role_label,
            is_admin=state.is_admin,
            is_student=state.is_student,
        )


class AuthResultResponse(BaseModel):
    success: bool
    errors: dict[str, str] | None = None
    message: str | None = None
