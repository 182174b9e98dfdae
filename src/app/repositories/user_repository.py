from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """
    User repository interface - application layer

    Every method may raise StorageError; create/update raise
    EmailAlreadyInUse when the email unique constraint is violated.
    """

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Get all users"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def consume_verification_code(self, user: User, code: str) -> bool:
        """
        Persist user's changed state, password hash and cleared code only if
        the stored verification code still equals ``code``.

        Returns False when another request consumed or replaced the code first.
        """
        pass
