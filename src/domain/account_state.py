"""
Account state machine.

States
======
- not_verified: created by registration, waiting for the emailed code
- active: confirmed, may authenticate

Password reset does not change ``state``. A reset is pending while an
active user holds a ``verification_code``.

Transitions
===========
    Register              -> new user, not_verified, code issued
    VerifyRegistration    not_verified -> active, code cleared
    Authenticate          active only, last_login_at stamped
    ForgotPasswordRequest code issued (any state), previous code replaced
    RenewPassword         password replaced, code cleared

Guards return booleans. Mismatched codes, absent codes and already active
users are expected outcomes and never raise.
"""

import secrets
from datetime import UTC, datetime
from typing import Optional

from .entities import User, UserState


def normalize_email(email: str) -> str:
    """Strip whitespace and lowercase; applied before every lookup and write"""
    return email.strip().lower()


def codes_match(stored: Optional[str], supplied: Optional[str]) -> bool:
    """Constant-time comparison; an absent code on either side never matches"""
    if not stored or not supplied:
        return False
    return secrets.compare_digest(stored.encode(), supplied.encode())


class AccountStateMachine:
    """Guards and effects for every account transition"""

    @staticmethod
    def register(
        email: str, name: str, password_hash: str, salt: str, code: str
    ) -> User:
        return User(
            email=email,
            name=name,
            password_hash=password_hash,
            salt=salt,
            state=UserState.not_verified,
            verification_code=code,
        )

    @staticmethod
    def can_verify_registration(user: Optional[User], code: str) -> bool:
        if user is None or user.state != UserState.not_verified:
            return False
        return codes_match(user.verification_code, code)

    @classmethod
    def verify_registration(cls, user: Optional[User], code: str) -> bool:
        if not cls.can_verify_registration(user, code):
            return False
        user.state = UserState.active
        user.verification_code = None
        return True

    @staticmethod
    def can_authenticate(user: Optional[User]) -> bool:
        return user is not None and user.state == UserState.active

    @staticmethod
    def record_login(user: User) -> None:
        user.last_login_at = datetime.now(UTC).replace(tzinfo=None)

    @staticmethod
    def request_password_reset(user: User, code: str) -> None:
        user.verification_code = code

    @staticmethod
    def can_renew_password(user: Optional[User], code: str) -> bool:
        if user is None:
            return False
        return codes_match(user.verification_code, code)

    @classmethod
    def renew_password(cls, user: Optional[User], code: str, password_hash: str) -> bool:
        if not cls.can_renew_password(user, code):
            return False
        user.password_hash = password_hash
        user.verification_code = None
        return True
