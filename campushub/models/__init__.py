"""ORM Models — SQLAlchemy declarative models for durable storage.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is complete before create_all or autogenerate

Design Decisions:
    - One file per entity for locality
"""

from campushub.models.kv_entry import KeyValueEntry  # noqa: F401
