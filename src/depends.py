from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.mail_sender import ConsoleMailSender, SmtpMailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.account_mailer import AccountMailer, MailLinks
from src.app.services.account_service import AccountService
from src.app.services.credential_codec import CredentialCodec
from src.app.services.mail_dispatcher import MailDispatcher
from src.app.services.mail_sender import IMailSender
from src.app.services.token_codec import TokenClaims, TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.domain.exceptions import TokenExpired, TokenInvalid

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


def build_mail_sender(config) -> IMailSender:
    if config.MAIL_BACKEND == "smtp":
        return SmtpMailSender(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            from_email=config.MAIL_FROM,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
        )
    return ConsoleMailSender()


credential_codec = CredentialCodec(rounds=ApplicationConfig.BCRYPT_ROUNDS)
token_codec = TokenCodec(
    secret=ApplicationConfig.JWT_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    expires_minutes=ApplicationConfig.JWT_EXPIRES_MINUTES,
)
mail_links = MailLinks(
    host=ApplicationConfig.CLIENT_HOST,
    account_verification_path=ApplicationConfig.CLIENT_ACCOUNT_VERIFICATION_PATH,
    forgot_password_path=ApplicationConfig.CLIENT_FORGOT_PASSWORD_PATH,
)
mail_sender = build_mail_sender(ApplicationConfig)
mail_dispatcher = MailDispatcher()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_credential_codec() -> CredentialCodec:
    return credential_codec


def get_token_codec() -> TokenCodec:
    return token_codec


def get_mail_sender() -> IMailSender:
    return mail_sender


def get_mail_dispatcher() -> MailDispatcher:
    return mail_dispatcher


def get_account_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialCodec = Depends(get_credential_codec),
    tokens: TokenCodec = Depends(get_token_codec),
    sender: IMailSender = Depends(get_mail_sender),
    dispatcher: MailDispatcher = Depends(get_mail_dispatcher),
) -> AccountService:
    return AccountService(
        uow=uow,
        credentials=credentials,
        tokens=tokens,
        mailer=AccountMailer(sender, mail_links),
        dispatcher=dispatcher,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    tokens: TokenCodec = Depends(get_token_codec),
) -> TokenClaims:
    """
    Dependency to extract and verify the login token from the Authorization header.

    Returns:
        Decoded claims of a logged-in user

    Raises:
        HTTPException: 401 if token is invalid, expired or not a login token
    """
    try:
        claims = tokens.decode_token(credentials.credentials)
    except (TokenInvalid, TokenExpired):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    if not claims.is_logged_in:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required",
        )

    return claims
