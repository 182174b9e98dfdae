"""
Renew Password Use Case

Replaces the password of the user named by the token, given the code
issued by the forgot-password request.
"""

import logging

from libs.result import Result, Return
from src.app.services.credential_codec import CredentialCodec
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import decode_claims, rejected, upstream_fault
from src.app.use_cases.users.dtos import UserInfo
from src.domain.account_state import AccountStateMachine
from src.domain.exceptions import InvalidCredentialInput, StorageError
from .dtos import RenewPasswordCommand

logger = logging.getLogger(__name__)


class RenewPasswordUseCase:
    """
    Business Rules:
    - User id comes from the token, never from the client
    - Invalid or expired token fails before any repository access
    - Code must equal the stored verification code
    - New hash reuses the user's salt; code is cleared (single use)
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialCodec, tokens: TokenCodec):
        self.uow = uow
        self.credentials = credentials
        self.tokens = tokens

    async def execute(self, command: RenewPasswordCommand) -> Result[UserInfo]:
        claims = decode_claims(self.tokens, command.token)
        if claims.is_err():
            return Return.err(claims.error)

        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(claims.value.user_id)

                if not AccountStateMachine.can_renew_password(user, command.code):
                    return Return.err(rejected())

                try:
                    password_hash = self.credentials.hash(command.password, user.salt)
                except InvalidCredentialInput as exc:
                    return Return.err(rejected(str(exc), exc))

                AccountStateMachine.renew_password(user, command.code, password_hash)

                if not await self.uow.users.consume_verification_code(user, command.code):
                    return Return.err(rejected())

                await self.uow.commit()
                info = UserInfo.from_entity(user)
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        logger.info(f"Password renewed: {info.id}")
        return Return.ok(info)
