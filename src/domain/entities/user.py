"""
User Entity

Identity and authentication record.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import UserState


class User(SQLModel, table=True):
    """
    User entity - identity and credentials of one account.

    Business Rules:
    - Email is unique across all users (unique index closes the
      check-then-create race)
    - Salt is generated once at creation and never changes
    - verification_code is set only while a verification or password
      reset request is outstanding
    - State only moves from not_verified to active
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)

    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    salt: str = Field(max_length=29)  # Bcrypt salt is 29 chars

    state: UserState = Field(default=UserState.not_verified)
    verification_code: Optional[str] = Field(default=None, max_length=64)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_state", "state"),)
