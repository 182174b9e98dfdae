from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User
from src.domain.exceptions import EmailAlreadyInUse, StorageError


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[User]:
        """Get all users ordered by creation time"""
        stmt = select(User).order_by(User.created_at)
        try:
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        try:
            result = await self.session.exec(stmt)
            return result.one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        try:
            result = await self.session.exec(stmt)
            return result.one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    async def create(self, user: User) -> User:
        """Create a new user"""
        return await self._save(user)

    async def update(self, user: User) -> User:
        """Update existing user"""
        return await self._save(user)

    async def consume_verification_code(self, user: User, code: str) -> bool:
        """Conditional update keyed on the stored verification code"""
        stmt = (
            update(User)
            .where(User.id == user.id, User.verification_code == code)
            .values(
                state=user.state,
                password_hash=user.password_hash,
                verification_code=user.verification_code,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        return result.rowcount == 1

    async def _save(self, user: User) -> User:
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.refresh(user)
        except IntegrityError as exc:
            raise EmailAlreadyInUse(user.email) from exc
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        return user
