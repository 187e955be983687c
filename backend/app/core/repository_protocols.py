"""Boundary Protocols - contracts between request handling and storage.

Invariants:
    - Handlers depend on UserGateway, never on AsyncSession directly
    - create() reports ordinary persistence failures as Outcome.failure, never raises
    - On success the same User object carries its assigned id

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async in Protocol: implementations do IO
"""

from typing import TYPE_CHECKING, Protocol

from app.core.domain_types import Outcome

if TYPE_CHECKING:
    from app.models.user import User


class UserGateway(Protocol):
    """Contract for user persistence - implemented by infrastructure."""
    async def create(self, user: "User") -> Outcome: ...
