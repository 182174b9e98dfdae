"""
Authenticate User Use Case

Credential login for active accounts.
"""

import logging

from libs.result import Result, Return
from src.app.services.credential_codec import CredentialCodec
from src.app.services.token_codec import TokenClaims, TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import rejected, upstream_fault
from src.domain.account_state import AccountStateMachine, normalize_email
from src.domain.exceptions import InvalidCredentialInput, StorageError
from .dtos import AuthenticateResponse

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """
    Business Rules:
    - Only active users may authenticate
    - Unknown email, inactive account and wrong password are
      indistinguishable to the caller
    - A hash is computed even when the user is missing to keep timing flat
    - Updates last_login_at and issues a login token (is_logged_in=True)
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialCodec, tokens: TokenCodec):
        self.uow = uow
        self.credentials = credentials
        self.tokens = tokens

    def _password_matches(self, password: str, salt: str, password_hash: str) -> bool:
        try:
            return self.credentials.verify(password, salt, password_hash)
        except InvalidCredentialInput:
            return False

    async def execute(self, email: str, password: str) -> Result[AuthenticateResponse]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(normalize_email(email))

                if not AccountStateMachine.can_authenticate(user):
                    self._password_matches(
                        "dummy_password", self.credentials.generate_salt(), ""
                    )
                    return Return.err(rejected())

                if not self._password_matches(password, user.salt, user.password_hash):
                    return Return.err(rejected())

                AccountStateMachine.record_login(user)
                await self.uow.users.update(user)
                await self.uow.commit()
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        token = self.tokens.create_token(
            TokenClaims(
                user_id=user.id,
                is_logged_in=True,
                name=user.name,
                email=user.email,
            )
        )

        logger.info(f"User logged in: {user.id}")
        return Return.ok(AuthenticateResponse(name=user.name, email=user.email, token=token))
