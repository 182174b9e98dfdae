"""
Forgot Password Request Use Case

Issues a reset code and mails it with a reset token.
"""

import logging
from datetime import UTC, datetime

from libs.result import Result, Return
from src.app.services.account_mailer import AccountMailer
from src.app.services.mail_dispatcher import MailDispatcher
from src.app.services.token_codec import TokenClaims, TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import not_found, upstream_fault
from src.domain.account_state import AccountStateMachine, normalize_email
from src.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class ForgotPasswordRequestUseCase:
    """
    Business Rules:
    - Unknown email returns a bare failure with no detail
    - A new code replaces any previous one; only the latest is valid
    - Account state is not changed
    - Mail carries the code and a reset token (is_logged_in=False)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tokens: TokenCodec,
        mailer: AccountMailer,
        dispatcher: MailDispatcher,
    ):
        self.uow = uow
        self.tokens = tokens
        self.mailer = mailer
        self.dispatcher = dispatcher

    async def execute(self, email: str) -> Result[None]:
        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(normalize_email(email))
                if user is None:
                    return Return.err(not_found())

                code = self.tokens.generate_one_time_code(
                    f"{user.email}{datetime.now(UTC).timestamp()}"
                )
                AccountStateMachine.request_password_reset(user, code)
                await self.uow.users.update(user)
                await self.uow.commit()
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        token = self.tokens.create_token(TokenClaims(user_id=user.id, is_logged_in=False))

        self.dispatcher.dispatch(
            self.mailer.send_forgot_password(
                to=user.email, name=user.name, code=code, token=token
            ),
            f"forgot password for user {user.id}",
        )

        logger.info(f"Password reset requested: {user.id}")
        return Return.ok()
