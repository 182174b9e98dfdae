"""
Credential codec - salted bcrypt hashing with constant-time verification.
"""

import secrets

import bcrypt

from src.domain.exceptions import InvalidCredentialInput


class CredentialCodec:
    """
    Business Rules:
    - Salt comes from bcrypt.gensalt (CSPRNG) and is stored per user
    - hash(password, salt) is deterministic for a given salt
    - verify() never short-circuits on the first differing byte
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def generate_salt(self) -> str:
        return bcrypt.gensalt(self.rounds).decode("utf-8")

    def hash(self, password: str, salt: str) -> str:
        """
        Derive the bcrypt hash of a password under the given salt.

        Raises:
            InvalidCredentialInput: password is empty or salt is missing/malformed
        """
        if not password:
            raise InvalidCredentialInput("Password must not be empty")
        if not salt:
            raise InvalidCredentialInput("Salt must not be empty")

        try:
            hashed = bcrypt.hashpw(password.encode("utf-8"), salt.encode("utf-8"))
        except ValueError as exc:
            raise InvalidCredentialInput(str(exc)) from exc
        return hashed.decode("utf-8")

    def verify(self, password: str, salt: str, expected_hash: str) -> bool:
        """Recompute the hash and compare in constant time"""
        candidate = self.hash(password, salt)
        return secrets.compare_digest(
            candidate.encode("utf-8"), (expected_hash or "").encode("utf-8")
        )
