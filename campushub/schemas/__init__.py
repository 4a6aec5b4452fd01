"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Profile rules are NOT enforced here: field errors must come back as data
      from the session store, so request schemas only fix the transport shape

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
