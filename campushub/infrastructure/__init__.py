"""Infrastructure Layer — storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core/ domain logic beyond errors and protocols
    - All storage failures mapped to PersistenceError

Design Decisions:
    - Thin wrappers over raw clients, one concern per module
"""
