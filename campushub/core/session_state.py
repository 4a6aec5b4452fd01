"""Session State — the single authentication slot and its derived queries.

Invariants:
    - current_user is None (Unauthenticated) or exactly one Profile (Authenticated)
    - loading is True only until the initial restore completes, then False for good
    - Role queries are False when Unauthenticated; display name and label fall back to Guest

Design Decisions:
    - Dataclass with computed properties: pure, deterministic, testable without mocks
    - AuthResult carries validation errors as data; failures are never raised
"""

from dataclasses import dataclass, field

from campushub.core.domain_types import GUEST_DISPLAY_NAME, RoleLabel
from campushub.core.profile import Profile

NOT_SIGNED_IN_MESSAGE = "No user signed in"


@dataclass
class SessionState:
    """Process-wide session slot. Pure dataclass, no IO."""

    current_user: Profile | None = None
    loading: bool = True

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def is_admin(self) -> bool:
        return self.current_user is not None and self.current_user.is_admin is True

    @property
    def is_student(self) -> bool:
        return self.current_user is not None and not self.current_user.is_admin

    @property
    def display_name(self) -> str:
        if self.current_user is None:
            return GUEST_DISPLAY_NAME
        return self.current_user.name

    @property
    def role_label(self) -> RoleLabel:
        if self.is_admin:
            return RoleLabel.ADMIN
        if self.is_student:
            return RoleLabel.STUDENT
        return RoleLabel.GUEST


@dataclass
class AuthResult:
    """Result of sign_in / update_profile."""

    success: bool
    errors: dict[str, str] | None = None
    message: str | None = None

    @classmethod
    def ok(cls) -> "AuthResult":
        return cls(success=True)

    @classmethod
    def rejected(cls, errors: dict[str, str]) -> "AuthResult":
        return cls(
            success=False,
            errors=dict(errors),
            message=", ".join(errors.values()),
        )

    @classmethod
    def not_signed_in(cls) -> "AuthResult":
        return cls(success=False, message=NOT_SIGNED_IN_MESSAGE)

    @property
    def not_authenticated(self) -> bool:
        """Failed because nobody was signed in, not because of field errors."""
        return not self.success and self.errors is None

    def to_dict(self) -> dict:
        data: dict = {"success": self.success}
        if self.errors is not None:
            data["errors"] = self.errors
        if self.message is not None:
            data["message"] = self.message
        return data
