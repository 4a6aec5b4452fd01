"""Services Layer — the imperative shell around the pure core.

Invariants:
    - Services await storage; core/ never does
    - Storage failures stop here (storage_service) and never reach callers

Design Decisions:
    - SessionStore is a class (owns state); storage helpers are plain functions
"""
