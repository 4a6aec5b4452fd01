"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps str; generated ids follow user_<epoch-ms>_<9 base36 chars>
    - Roles are exactly two (admin, student); Guest is a label, never a role
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import secrets
import string
import time
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LENGTH = 9


def new_user_id() -> UserId:
    """Time component plus random suffix. Unique in practice, not cryptographically."""
    millis = int(time.time() * 1000)
    suffix = "".join(
        secrets.choice(_ID_ALPHABET) for _ in range(_ID_RANDOM_LENGTH)
    )
    return UserId(f"user_{millis}_{suffix}")


# ─── Roles ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"


class RoleLabel(str, Enum):
    """Human-facing role labels, including the signed-out sentinel."""
    ADMIN = "Admin"
    STUDENT = "Student"
    GUEST = "Guest"


GUEST_DISPLAY_NAME = "Guest"

# Single slot holding the current session record
CURRENT_USER_KEY = "campushub_current_user"
