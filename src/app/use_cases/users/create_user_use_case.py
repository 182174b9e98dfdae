"""
Create User Use Case

Direct account creation without email verification.
"""

import logging

from libs.result import Result, Return
from src.app.services.credential_codec import CredentialCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import email_in_use, rejected, upstream_fault
from src.domain.account_state import normalize_email
from src.domain.entities import User, UserState
from src.domain.exceptions import EmailAlreadyInUse, InvalidCredentialInput, StorageError
from .dtos import CreateUserCommand

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Business Rules:
    - Email must not already be in use
    - Fresh salt per user, password stored as salted bcrypt hash
    - Created directly in the active state with no verification code
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialCodec):
        self.uow = uow
        self.credentials = credentials

    async def execute(self, command: CreateUserCommand) -> Result[None]:
        email = normalize_email(command.email)

        try:
            async with self.uow:
                existing_user = await self.uow.users.get_by_email(email)
                if existing_user:
                    return Return.err(email_in_use())

                try:
                    salt = self.credentials.generate_salt()
                    password_hash = self.credentials.hash(command.password, salt)
                except InvalidCredentialInput as exc:
                    return Return.err(rejected(str(exc), exc))

                user = User(
                    email=email,
                    name=command.name,
                    password_hash=password_hash,
                    salt=salt,
                    state=UserState.active,
                )
                user = await self.uow.users.create(user)
                await self.uow.commit()
        except EmailAlreadyInUse:
            return Return.err(email_in_use())
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        logger.info(f"User created: {user.id}")
        return Return.ok()
