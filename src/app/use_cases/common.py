"""
Shared error vocabulary for account use cases.
"""

from enum import Enum

from libs.result import Error, Result, Return
from src.app.services.token_codec import TokenClaims, TokenCodec
from src.domain.exceptions import StorageError, TokenExpired, TokenInvalid

EMAIL_IN_USE = "This email is in use"


class ErrorKind(str, Enum):
    """
    VALIDATION_FAILED: expected negative outcome or rejected input
    NOT_FOUND: the addressed user does not exist
    CONFLICT: email already in use
    UPSTREAM_FAULT: storage failed; carries the underlying exception
    """

    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UPSTREAM_FAULT = "UPSTREAM_FAULT"


def rejected(message: str = None, cause: Exception = None) -> Error:
    return Error(ErrorKind.VALIDATION_FAILED, message, cause)


def not_found() -> Error:
    return Error(ErrorKind.NOT_FOUND)


def email_in_use() -> Error:
    return Error(ErrorKind.CONFLICT, EMAIL_IN_USE)


def upstream_fault(exc: StorageError) -> Error:
    return Error(ErrorKind.UPSTREAM_FAULT, str(exc), exc)


def decode_claims(tokens: TokenCodec, token: str) -> Result[TokenClaims]:
    """Decode a token or fail before any repository access"""
    try:
        return Return.ok(tokens.decode_token(token))
    except (TokenInvalid, TokenExpired) as exc:
        return Return.err(rejected(str(exc), exc))
