"""
Register User Use Case

Creates an unverified account and mails the verification code together
with a registration token.
"""

import logging
from datetime import UTC, datetime

from libs.result import Result, Return
from src.app.services.account_mailer import AccountMailer
from src.app.services.credential_codec import CredentialCodec
from src.app.services.mail_dispatcher import MailDispatcher
from src.app.services.token_codec import TokenClaims, TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import email_in_use, rejected, upstream_fault
from src.domain.account_state import AccountStateMachine, normalize_email
from src.domain.exceptions import EmailAlreadyInUse, InvalidCredentialInput, StorageError
from .dtos import RegisterUserCommand

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Business Logic:
    1. Reject if the email is already in use
    2. Generate a fresh salt and hash the password
    3. Issue a one-time verification code
    4. Create the user in the not_verified state and commit
    5. Sign a registration token (is_logged_in=False) for the new user id
    6. Schedule the verification mail; delivery never affects the result
    """

    def __init__(
        self,
        uow: UnitOfWork,
        credentials: CredentialCodec,
        tokens: TokenCodec,
        mailer: AccountMailer,
        dispatcher: MailDispatcher,
    ):
        self.uow = uow
        self.credentials = credentials
        self.tokens = tokens
        self.mailer = mailer
        self.dispatcher = dispatcher

    async def execute(self, command: RegisterUserCommand) -> Result[None]:
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

                code = self.tokens.generate_one_time_code(
                    f"{email}{datetime.now(UTC).timestamp()}"
                )
                user = AccountStateMachine.register(
                    email=email,
                    name=command.name,
                    password_hash=password_hash,
                    salt=salt,
                    code=code,
                )
                user = await self.uow.users.create(user)
                await self.uow.commit()
        except EmailAlreadyInUse:
            # Lost the race against a concurrent registration
            return Return.err(email_in_use())
        except StorageError as exc:
            return Return.err(upstream_fault(exc))

        token = self.tokens.create_token(TokenClaims(user_id=user.id, is_logged_in=False))

        self.dispatcher.dispatch(
            self.mailer.send_account_verification(
                to=user.email, name=user.name, code=code, token=token
            ),
            f"account verification for user {user.id}",
        )

        logger.info(f"User registered: {user.id}")
        return Return.ok()
