"""User Gateway - SQLAlchemy implementation of the UserGateway protocol.

Invariants:
    - create() commits exactly one row per call (no deduplication)
    - user.id is assigned at flush, before commit; nothing touches the row after commit
    - A failure before or during commit rolls back and returns Outcome.failure
      with the driver's description; nothing is raised, even if the rollback fails

Design Decisions:
    - Gateway wraps an AsyncSession injected per request: one session, one transaction
    - Description prefers the DBAPI exception text (e.g. "connection refused")
      over SQLAlchemy's wrapper text, which embeds SQL and parameters
"""

import logging

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Outcome
from app.core.repository_protocols import UserGateway
from app.infrastructure.database import describe_failure, get_db
from app.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserGateway:
    """Persists users through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> Outcome:
        try:
            self.db.add(user)
            await self.db.flush()
            await self.db.commit()
        except (SQLAlchemyError, OSError) as e:
            description = describe_failure(e)
            logger.error(
                f"Failed to persist user: {description}",
                extra={"error_code": "PERSISTENCE_ERROR", "operation": "create"},
            )
            await self._rollback_quietly()
            return Outcome.failure(description)
        logger.info("User persisted", extra={"user_id": user.id})
        return Outcome.success()

    async def _rollback_quietly(self) -> None:
        try:
            await self.db.rollback()
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                f"Rollback after failed create also failed: {describe_failure(e)}",
                extra={"error_code": "PERSISTENCE_ERROR", "operation": "rollback"},
            )


async def get_user_gateway(
    db: AsyncSession = Depends(get_db),
) -> UserGateway:
    """FastAPI dependency - gateway bound to the request's session."""
    return SqlAlchemyUserGateway(db)
