"""Users - POST /api/v1/users creates one user.

Invariants:
    - Request body is decoded and validated by Pydantic before the route runs;
      a decode failure never reaches the gateway
    - 201 with the persisted user on success, nulls omitted
    - Gateway failures surface as PersistenceError (500) via the global handler

Design Decisions:
    - Gateway arrives through Depends(get_user_gateway): tests swap it with
      app.dependency_overrides, and the route function is callable directly
      with (body, gateway)
"""

import logging

from fastapi import APIRouter, Depends, status

from app.core.repository_protocols import UserGateway
from app.infrastructure.user_gateway import get_user_gateway
from app.schemas.user import UserCreate, UserResponse
from app.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, gateway: UserGateway = Depends(get_user_gateway),
) -> UserResponse:
    """Create a new user."""
    user = await UserHandlers(gateway).create_user(body)
    return UserResponse.model_validate(user)
