"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations raise PersistenceError on IO or serialization failure

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the session store awaits them
      around the pure validation and state logic
    - One slot per key, values are JSON-compatible dicts
"""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Contract for durable key-value persistence, implemented by shell."""
    async def get(self, key: str) -> dict[str, Any] | None: ...
    async def set(self, key: str, value: dict[str, Any]) -> None: ...
    async def delete(self, key: str) -> None: ...
