"""
Domain exceptions - Semantic error types raised by codecs and adapters.

Use cases translate these into Result errors; nothing here is raised for
routine business outcomes such as a wrong password.
"""


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class InvalidCredentialInput(AccountError):
    """Password or salt is empty or malformed."""

    pass


class TokenInvalid(AccountError):
    """Signed token failed signature or payload checks."""

    pass


class TokenExpired(AccountError):
    """Signed token is past its expiry."""

    pass


class StorageError(AccountError):
    """Persistence layer failed."""

    pass


class EmailAlreadyInUse(StorageError):
    """Unique constraint on email was violated."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already in use: {email}")


class DeliveryError(AccountError):
    """Outbound mail could not be delivered."""

    pass
