"""
User Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import User, UserState


class CreateUserCommand(BaseModel):
    name: str
    email: str
    password: str


class UpdateUserCommand(BaseModel):
    user_id: UUID
    name: Optional[str] = None
    email: Optional[str] = None


class UserInfo(BaseModel):
    """Public view of a user; credential material is never exposed"""

    id: str
    name: str
    email: str
    state: UserState
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            state=user.state,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )
