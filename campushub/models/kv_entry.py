"""Key-Value Entry ORM — one durable slot per string key.

Invariants:
    - key is the primary key (one record per slot, never a collection)
    - value is a JSON object, non-nullable; clearing a slot deletes the row
    - updated_at refreshed on every write

Design Decisions:
    - JSON column for value: stores the profile record as-is, no per-field columns,
      so the record shape can grow without migrations
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from campushub.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueEntry(Base):
    """Durable key-value slot."""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )
