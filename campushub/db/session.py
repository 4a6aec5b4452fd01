"""Schema Bootstrap — creates missing tables on an async engine.

Invariants:
    - Idempotent: existing tables are left untouched
    - All models imported first so Base.metadata is complete

Design Decisions:
    - Separate from Alembic: device-local SQLite databases are created on first
      start without a migration step; managed databases still use alembic upgrade
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from campushub.db.base import Base


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    import campushub.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
