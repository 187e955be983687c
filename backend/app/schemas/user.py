"""User Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate.name: required, stripped, then non-empty and at most 255 chars
    - UserCreate.email: optional, stripped, RFC-checked by EmailStr
    - UserCreate carries no id; a client-supplied id is ignored
    - UserResponse is read from ORM attributes (from_attributes)

Design Decisions:
    - StringConstraints strips before the length check, so padding never counts
    - Validator messages are the exact user-facing descriptions ("name is required")
"""

from typing import Annotated

from pydantic import (
    BaseModel, ConfigDict, EmailStr, StringConstraints, field_validator,
)

UserName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]


class UserCreate(BaseModel):
    """User creation request body."""
    name: UserName
    email: EmailStr | None = None

    @field_validator("name")
    @classmethod
    def require_name(cls, v: str) -> str:
        if not v:
            raise ValueError("name is required")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserResponse(BaseModel):
    """Persisted user - public-facing data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str | None = None
