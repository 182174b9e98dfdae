"""
Token codec - signed claim tokens and opaque one-time codes.
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel, ValidationError

from src.domain.exceptions import TokenExpired, TokenInvalid


class TokenClaims(BaseModel):
    """Claims carried by a signed token"""

    user_id: UUID
    is_logged_in: bool = False
    name: Optional[str] = None
    email: Optional[str] = None


class TokenCodec:
    """
    Business Rules:
    - Tokens are HS256 JWTs with exp and iat
    - A registration or reset token carries is_logged_in=False
    - A login token carries is_logged_in=True plus name and email
    - One-time codes have no authority on their own; they are only
      accepted together with a token naming the same user
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def create_token(self, claims: TokenClaims, expires_delta: Optional[timedelta] = None) -> str:
        """
        Sign claims into a compact token.

        Args:
            claims: user id, login flag and optional name/email
            expires_delta: overrides the configured lifetime

        Returns:
            JWT token string
        """
        now = datetime.now(UTC)
        payload = claims.model_dump(mode="json", exclude_none=True)
        payload["exp"] = now + (expires_delta or self.expires_delta)
        payload["iat"] = now
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry, then return the claims.

        Raises:
            TokenExpired: token is past its expiry
            TokenInvalid: bad signature or malformed payload
        """
        if not token:
            raise TokenInvalid("Token is missing")

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpired("Token has expired") from exc
        except JWTError as exc:
            raise TokenInvalid("Token is invalid") from exc

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as exc:
            raise TokenInvalid("Token payload is malformed") from exc

    @staticmethod
    def generate_one_time_code(seed: str) -> str:
        """Unpredictable code; the seed only keeps concurrent codes distinct"""
        material = seed.encode("utf-8") + secrets.token_bytes(32)
        return hashlib.sha256(material).hexdigest()
