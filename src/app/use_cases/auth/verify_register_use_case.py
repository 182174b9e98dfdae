"""
Verify Register Use Case

Activates a not_verified account from the emailed code and the
registration token.
"""

import logging

from libs.result import Result, Return
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import decode_claims, rejected, upstream_fault
from src.app.use_cases.users.dtos import UserInfo
from src.domain.account_state import AccountStateMachine
from src.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class VerifyRegisterUseCase:
    """
    Business Rules:
    - Token is decoded first; an invalid or expired token never reaches
      the repository
    - Code must equal the stored verification code
    - User must still be not_verified
    - Code is cleared on success (single use); the clearing update is
      conditional on the stored code so concurrent calls cannot both win
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenCodec):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, token: str, code: str) -> Result[UserInfo]:
        claims = decode_claims(self.tokens, token)
        if claims.is_err():
            return Return.err(claims.error)

        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(claims.value.user_id)

                if not AccountStateMachine.verify_registration(user, code):
                    return Return.err(rejected())

                if not await self.uow.users.consume_verification_code(user, code):
                    return Return.err(rejected())

                await self.uow.commit()
                info = UserInfo.from_entity(user)
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        logger.info(f"User verified: {info.id}")
        return Return.ok(info)
