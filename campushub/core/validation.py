"""Profile Validation — pure role-specific checks producing field-keyed error maps.

Invariants:
    - Every check returns ValidationResult; nothing here raises for bad input
    - Each field key appears at most once in errors (first failing rule wins)
    - None means "not supplied"; 0 and "" are supplied values and get checked
    - validate_profile dispatches on truthiness of is_admin; both paths reject non-bool flags

Design Decisions:
    - Plain functions over Pydantic models: candidates are arbitrary mappings and
      failures must come back as data, not as raised ValidationError
    - Messages are user-facing strings shown verbatim by the sign-in screen
    - validate_required_fields and is_valid_email are not used by the session
      flow; they are exported for the UI layer's other forms (contact details,
      admin tools) so every screen reports errors in the same shape
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

NAME_REQUIRED = "Name is required"
NAME_TOO_SHORT = "Name must be at least 2 characters"
ROLL_NUMBER_NOT_STRING = "Roll number must be a string"
BRANCH_NOT_STRING = "Branch must be a string"
YEAR_OUT_OF_RANGE = "Year must be between 1 and 4"
ADMIN_FLAG_NOT_BOOLEAN = "Admin flag must be a boolean"
ADMIN_FLAG_NOT_TRUE = "Admin flag must be true"
ID_REQUIRED = "ID is required"
ID_NOT_STRING = "ID must be a string"

MIN_NAME_LENGTH = 2
MIN_YEAR = 1
MAX_YEAR = 4

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ValidationResult:
    """Outcome of a validation pass. valid is derived, never set independently."""
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def _supplied(candidate: Mapping[str, Any], key: str) -> bool:
    return candidate.get(key) is not None


def _check_name(candidate: Mapping[str, Any], errors: dict[str, str]) -> None:
    name = candidate.get("name")
    if not isinstance(name, str) or not name.strip():
        errors["name"] = NAME_REQUIRED
    elif len(name.strip()) < MIN_NAME_LENGTH:
        errors["name"] = NAME_TOO_SHORT


def _is_year(value: Any) -> bool:
    # bool is an int subclass; True must not pass as year 1
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_YEAR <= value <= MAX_YEAR
    )


def validate_student(candidate: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    _check_name(candidate, errors)

    if _supplied(candidate, "roll_number") and not isinstance(candidate["roll_number"], str):
        errors["roll_number"] = ROLL_NUMBER_NOT_STRING
    if _supplied(candidate, "branch") and not isinstance(candidate["branch"], str):
        errors["branch"] = BRANCH_NOT_STRING
    if _supplied(candidate, "year") and not _is_year(candidate["year"]):
        errors["year"] = YEAR_OUT_OF_RANGE
    if _supplied(candidate, "is_admin") and not isinstance(candidate["is_admin"], bool):
        errors["is_admin"] = ADMIN_FLAG_NOT_BOOLEAN
    if _supplied(candidate, "id") and not isinstance(candidate["id"], str):
        errors["id"] = ID_NOT_STRING

    return ValidationResult(errors)


def validate_admin(candidate: Mapping[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    _check_name(candidate, errors)

    user_id = candidate.get("id")
    if not isinstance(user_id, str) or not user_id.strip():
        errors["id"] = ID_REQUIRED
    if candidate.get("is_admin") is not True:
        errors["is_admin"] = ADMIN_FLAG_NOT_TRUE

    return ValidationResult(errors)


def validate_profile(candidate: Mapping[str, Any]) -> ValidationResult:
    """Role dispatch shared by sign-in, profile update and session restore."""
    if candidate.get("is_admin"):
        return validate_admin(candidate)
    return validate_student(candidate)


def validate_required_fields(
    data: Mapping[str, Any], required: list[str],
) -> ValidationResult:
    """Generic form check for UI screens: None or blank text counts as missing."""
    errors: dict[str, str] = {}
    for name in required:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[name] = f"{name} is required"
    return ValidationResult(errors)


def is_valid_email(value: Any) -> bool:
    """Shape check for UI forms that collect an email address."""
    return isinstance(value, str) and bool(_EMAIL_RE.match(value))
