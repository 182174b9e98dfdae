from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import not_found, upstream_fault
from src.domain.exceptions import StorageError
from .dtos import UserInfo


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        """
        Returns:
            Result with the user's public view, or Error(NOT_FOUND)
        """
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(user_id)

                if user is None:
                    return Return.err(not_found())

                return Return.ok(UserInfo.from_entity(user))
        except StorageError as exc:
            return Return.err(upstream_fault(exc))
