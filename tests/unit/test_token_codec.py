"""
Unit tests for TokenCodec
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from src.app.services.token_codec import TokenClaims, TokenCodec
from src.domain.exceptions import TokenExpired, TokenInvalid


def test_token_round_trips_claims(tokens):
    user_id = uuid4()
    token = tokens.create_token(
        TokenClaims(user_id=user_id, is_logged_in=True, name="Alice", email="alice@example.com")
    )

    claims = tokens.decode_token(token)

    assert claims.user_id == user_id
    assert claims.is_logged_in is True
    assert claims.name == "Alice"
    assert claims.email == "alice@example.com"


def test_registration_token_omits_profile_claims(tokens):
    token = tokens.create_token(TokenClaims(user_id=uuid4(), is_logged_in=False))
    payload = jwt.get_unverified_claims(token)

    assert payload["is_logged_in"] is False
    assert "name" not in payload
    assert "email" not in payload
    assert "exp" in payload and "iat" in payload


def test_expired_token_raises_token_expired(tokens):
    token = tokens.create_token(
        TokenClaims(user_id=uuid4()), expires_delta=timedelta(seconds=-10)
    )

    with pytest.raises(TokenExpired):
        tokens.decode_token(token)


def test_token_signed_with_other_secret_is_invalid(tokens):
    forged = TokenCodec(secret="attacker-secret").create_token(TokenClaims(user_id=uuid4()))

    with pytest.raises(TokenInvalid):
        tokens.decode_token(forged)


def test_tampered_payload_is_invalid(tokens):
    token = tokens.create_token(TokenClaims(user_id=uuid4(), is_logged_in=False))
    header, payload, signature = token.split(".")
    other = tokens.create_token(TokenClaims(user_id=uuid4(), is_logged_in=True))
    tampered = ".".join([header, other.split(".")[1], signature])

    with pytest.raises(TokenInvalid):
        tokens.decode_token(tampered)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_invalid(tokens, token):
    with pytest.raises(TokenInvalid):
        tokens.decode_token(token)


def test_token_without_user_id_is_invalid(tokens):
    token = jwt.encode({"is_logged_in": True}, tokens.secret, algorithm=tokens.algorithm)

    with pytest.raises(TokenInvalid):
        tokens.decode_token(token)


def test_one_time_codes_are_unique_for_same_seed():
    codes = {TokenCodec.generate_one_time_code("alice@example.com1700000000") for _ in range(50)}

    assert len(codes) == 50
    assert all(len(code) == 64 for code in codes)
