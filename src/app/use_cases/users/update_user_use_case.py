from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import email_in_use, not_found, upstream_fault
from src.domain.account_state import normalize_email
from src.domain.exceptions import EmailAlreadyInUse, StorageError
from .dtos import UpdateUserCommand


class UpdateUserUseCase:
    """
    Updates the mutable profile fields (name, email).

    Credentials, state and verification code are only changed through
    the registration and password flows.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateUserCommand) -> Result[None]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(command.user_id)
                if user is None:
                    return Return.err(not_found())

                if command.email is not None:
                    email = normalize_email(command.email)
                    if email != user.email:
                        owner = await self.uow.users.get_by_email(email)
                        if owner is not None:
                            return Return.err(email_in_use())
                        user.email = email

                if command.name is not None:
                    user.name = command.name

                await self.uow.users.update(user)
                await self.uow.commit()
        except EmailAlreadyInUse:
            return Return.err(email_in_use())
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        return Return.ok()
