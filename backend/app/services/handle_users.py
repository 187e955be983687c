"""User Handlers - create_user: build entity, persist through the gateway, map the outcome.

Invariants:
    - The User handed to the gateway has no identity (id is None)
    - Exactly one gateway.create call per create_user call
    - A failed Outcome becomes PersistenceError carrying the gateway's description
    - On success the returned User carries the id assigned by the gateway

Design Decisions:
    - Gateway injected through the constructor: tests pass a recording double,
      no HTTP layer or database needed
    - Decoding happens before this layer (UserCreate); this layer never sees raw JSON
"""

import logging

from app.core.errors import PersistenceError
from app.core.repository_protocols import UserGateway
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserHandlers:
    """User creation handler."""

    def __init__(self, gateway: UserGateway):
        self.gateway = gateway

    async def create_user(self, body: UserCreate) -> User:
        """Persist a new user and return it with its assigned id."""
        user = User(name=body.name, email=body.email)
        outcome = await self.gateway.create(user)
        if not outcome.ok:
            raise PersistenceError(outcome.error or "persistence failed")
        logger.info(f"Created user {user.id}", extra={"user_id": user.id})
        return user
