from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import upstream_fault
from src.domain.exceptions import StorageError
from .dtos import UserInfo


class GetAllUsersUseCase:
    """Lists every user as a public view"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserInfo]]:
        try:
            async with self.uow:
                users = await self.uow.users.get_all()
                # Leaving the unit of work rolls back and expires loaded rows
                return Return.ok([UserInfo.from_entity(user) for user in users])
        except StorageError as exc:
            return Return.err(upstream_fault(exc))
