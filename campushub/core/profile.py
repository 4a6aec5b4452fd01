"""Profile — the signed-in user record, Admin or Student variant.

Invariants:
    - A Profile is built only from a mapping that already passed validate_profile
    - Admin profiles never carry student fields (dropped on construction)
    - to_record() omits absent fields; from_record(to_record(p)) == p

Design Decisions:
    - Frozen dataclass: session transitions replace the Profile, never mutate it
    - Records are plain dicts: JSON column and API payloads share the same shape
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from campushub.core.domain_types import UserId, UserRole

STUDENT_FIELDS = ("roll_number", "branch", "year")


@dataclass(frozen=True)
class Profile:
    id: UserId
    name: str
    is_admin: bool
    roll_number: str | None = None
    branch: str | None = None
    year: int | None = None

    @property
    def role(self) -> UserRole:
        return UserRole.ADMIN if self.is_admin else UserRole.STUDENT

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Profile":
        is_admin = record.get("is_admin") is True
        student = {} if is_admin else {k: record.get(k) for k in STUDENT_FIELDS}
        return cls(
            id=UserId(record["id"]),
            name=record["name"],
            is_admin=is_admin,
            **student,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
