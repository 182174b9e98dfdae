"""
Account Service

Single entry point for the nine account operations. Each method builds
the matching use case over the same Unit of Work and collaborators and
returns its Result unchanged.
"""

from typing import List, Optional
from uuid import UUID

from libs.result import Result
from src.app.services.account_mailer import AccountMailer
from src.app.services.credential_codec import CredentialCodec
from src.app.services.mail_dispatcher import MailDispatcher
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticateResponse,
    AuthenticateUserUseCase,
    ForgotPasswordRequestUseCase,
    RegisterUserCommand,
    RegisterUserUseCase,
    RenewPasswordCommand,
    RenewPasswordUseCase,
    VerifyRegisterUseCase,
)
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    GetAllUsersUseCase,
    GetUserUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserInfo,
)


class AccountService:
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

    async def get_all_users(self) -> Result[List[UserInfo]]:
        return await GetAllUsersUseCase(self.uow).execute()

    async def get_user(self, user_id: UUID) -> Result[UserInfo]:
        return await GetUserUseCase(self.uow).execute(user_id)

    async def create_user(self, name: str, email: str, password: str) -> Result[None]:
        command = CreateUserCommand(name=name, email=email, password=password)
        return await CreateUserUseCase(self.uow, self.credentials).execute(command)

    async def update_user(
        self, user_id: UUID, name: Optional[str] = None, email: Optional[str] = None
    ) -> Result[None]:
        command = UpdateUserCommand(user_id=user_id, name=name, email=email)
        return await UpdateUserUseCase(self.uow).execute(command)

    async def register_user(self, name: str, email: str, password: str) -> Result[None]:
        command = RegisterUserCommand(name=name, email=email, password=password)
        use_case = RegisterUserUseCase(
            self.uow, self.credentials, self.tokens, self.mailer, self.dispatcher
        )
        return await use_case.execute(command)

    async def verify_register(self, token: str, code: str) -> Result[UserInfo]:
        return await VerifyRegisterUseCase(self.uow, self.tokens).execute(token, code)

    async def authenticate_user(self, email: str, password: str) -> Result[AuthenticateResponse]:
        use_case = AuthenticateUserUseCase(self.uow, self.credentials, self.tokens)
        return await use_case.execute(email, password)

    async def forgot_password_request(self, email: str) -> Result[None]:
        use_case = ForgotPasswordRequestUseCase(
            self.uow, self.tokens, self.mailer, self.dispatcher
        )
        return await use_case.execute(email)

    async def renew_password(self, code: str, password: str, token: str) -> Result[UserInfo]:
        command = RenewPasswordCommand(code=code, password=password, token=token)
        use_case = RenewPasswordUseCase(self.uow, self.credentials, self.tokens)
        return await use_case.execute(command)
