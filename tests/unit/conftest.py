import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.account_mailer import AccountMailer, MailLinks
from src.app.services.credential_codec import CredentialCodec
from src.app.services.mail_dispatcher import MailDispatcher
from src.app.services.token_codec import TokenCodec
from tests.fixtures.mail_outbox import MailOutbox


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the user repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_all = AsyncMock(return_value=[])
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.consume_verification_code = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def credentials():
    # Lowest bcrypt cost keeps the suite fast
    return CredentialCodec(rounds=4)


@pytest.fixture
def tokens():
    return TokenCodec(secret="unit-test-secret", expires_minutes=5)


@pytest.fixture
def outbox():
    return MailOutbox()


@pytest.fixture
def mail_links():
    return MailLinks(
        host="https://app.example.com",
        account_verification_path="/account-verification",
        forgot_password_path="/renew-password",
    )


@pytest.fixture
def mailer(outbox, mail_links):
    return AccountMailer(outbox, mail_links)


@pytest.fixture
def dispatcher():
    return MailDispatcher()


@pytest.fixture
def make_user(credentials):
    """Factory for User entities with real salted hashes"""
    from src.domain.entities import User, UserState

    def _make_user(
        email="alice@example.com",
        name="Alice",
        password="CorrectHorse1!",
        state=UserState.active,
        verification_code=None,
    ):
        salt = credentials.generate_salt()
        return User(
            email=email,
            name=name,
            password_hash=credentials.hash(password, salt),
            salt=salt,
            state=state,
            verification_code=verification_code,
        )

    return _make_user
