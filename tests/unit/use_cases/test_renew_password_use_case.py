"""
Unit tests for RenewPasswordUseCase
"""

from datetime import timedelta

import pytest

from src.app.services.token_codec import TokenClaims, TokenCodec
from src.app.use_cases.auth import RenewPasswordCommand, RenewPasswordUseCase
from src.app.use_cases.common import ErrorKind


@pytest.fixture
def use_case(mock_uow, credentials, tokens):
    return RenewPasswordUseCase(mock_uow, credentials, tokens)


@pytest.fixture
def resetting_user(make_user):
    return make_user(verification_code="R1")


def _command(tokens, user, code="R1", password="BrandNewPass9", token=None):
    token = token or tokens.create_token(TokenClaims(user_id=user.id, is_logged_in=False))
    return RenewPasswordCommand(code=code, password=password, token=token)


@pytest.mark.asyncio
async def test_successful_renewal(use_case, mock_uow, credentials, tokens, resetting_user):
    old_hash = resetting_user.password_hash
    mock_uow.users.get_by_id.return_value = resetting_user

    result = await use_case.execute(_command(tokens, resetting_user))

    assert result.is_ok()
    assert result.value.id == str(resetting_user.id)
    assert resetting_user.verification_code is None
    assert resetting_user.password_hash != old_hash
    assert credentials.verify("BrandNewPass9", resetting_user.salt, resetting_user.password_hash)
    assert not credentials.verify("CorrectHorse1!", resetting_user.salt, resetting_user.password_hash)

    mock_uow.users.consume_verification_code.assert_called_once_with(resetting_user, "R1")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_salt_is_preserved(use_case, mock_uow, tokens, resetting_user):
    salt = resetting_user.salt
    mock_uow.users.get_by_id.return_value = resetting_user

    await use_case.execute(_command(tokens, resetting_user))

    assert resetting_user.salt == salt


@pytest.mark.asyncio
async def test_wrong_code_fails_closed(use_case, mock_uow, tokens, resetting_user):
    old_hash = resetting_user.password_hash
    mock_uow.users.get_by_id.return_value = resetting_user

    result = await use_case.execute(_command(tokens, resetting_user, code="nope"))

    assert result.as_dict() == {"success": False}
    assert resetting_user.password_hash == old_hash
    assert resetting_user.verification_code == "R1"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_no_outstanding_code_fails_closed(use_case, mock_uow, tokens, make_user):
    user = make_user(verification_code=None)
    mock_uow.users.get_by_id.return_value = user

    result = await use_case.execute(_command(tokens, user, code=""))

    assert result.as_dict() == {"success": False}


@pytest.mark.asyncio
async def test_code_cannot_be_reused(use_case, mock_uow, tokens, resetting_user):
    mock_uow.users.get_by_id.return_value = resetting_user

    first = await use_case.execute(_command(tokens, resetting_user))
    second = await use_case.execute(_command(tokens, resetting_user, password="AnotherPass7"))

    assert first.is_ok()
    assert second.is_err()


@pytest.mark.asyncio
async def test_empty_new_password_is_rejected(use_case, mock_uow, tokens, resetting_user):
    mock_uow.users.get_by_id.return_value = resetting_user

    result = await use_case.execute(_command(tokens, resetting_user, password=""))

    assert result.is_err()
    assert result.error.code == ErrorKind.VALIDATION_FAILED
    assert resetting_user.verification_code == "R1"


@pytest.mark.asyncio
async def test_tampered_token_touches_no_user_record(use_case, mock_uow, resetting_user):
    forged = TokenCodec(secret="attacker").create_token(TokenClaims(user_id=resetting_user.id))

    result = await use_case.execute(RenewPasswordCommand(code="R1", password="x" * 10, token=forged))

    assert result.is_err()
    mock_uow.__aenter__.assert_not_called()
    mock_uow.users.get_by_id.assert_not_called()
    mock_uow.users.get_by_email.assert_not_called()
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token_touches_no_user_record(use_case, mock_uow, tokens, resetting_user):
    expired = tokens.create_token(
        TokenClaims(user_id=resetting_user.id), expires_delta=timedelta(seconds=-1)
    )

    result = await use_case.execute(_command(tokens, resetting_user, token=expired))

    assert result.is_err()
    mock_uow.users.get_by_id.assert_not_called()
