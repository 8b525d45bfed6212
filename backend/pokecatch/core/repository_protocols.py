"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - External catalog accessed only through CreatureLookup

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol


class CreatureLookup(Protocol):
    """Contract for the external creature catalog — implemented by shell."""
    async def get_creature(self, name: str) -> dict: ...
    async def exists(self, name: str) -> bool: ...
