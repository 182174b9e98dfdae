"""
Unit tests for AuthenticateUserUseCase
"""

import pytest

from src.app.use_cases.auth import AuthenticateUserUseCase
from src.app.use_cases.common import ErrorKind
from src.domain.entities import UserState
from src.domain.exceptions import StorageError


@pytest.fixture
def use_case(mock_uow, credentials, tokens):
    return AuthenticateUserUseCase(mock_uow, credentials, tokens)


@pytest.mark.asyncio
async def test_successful_login(use_case, mock_uow, tokens, make_user):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    result = await use_case.execute("alice@example.com", "CorrectHorse1!")

    assert result.is_ok()
    assert result.value.name == "Alice"
    assert result.value.email == "alice@example.com"

    claims = tokens.decode_token(result.value.token)
    assert claims.user_id == user.id
    assert claims.is_logged_in is True
    assert claims.email == "alice@example.com"

    assert user.last_login_at is not None
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_password_fails_without_detail(use_case, mock_uow, make_user):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    result = await use_case.execute("alice@example.com", "wrong-password")

    assert result.as_dict() == {"success": False}
    assert user.last_login_at is None
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_email_is_indistinguishable_from_wrong_password(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = None
    unknown = await use_case.execute("ghost@example.com", "whatever")

    mock_uow.users.get_by_email.return_value = make_user()
    wrong = await use_case.execute("alice@example.com", "wrong-password")

    assert unknown.error == wrong.error
    assert unknown.error.code == ErrorKind.VALIDATION_FAILED


@pytest.mark.asyncio
async def test_unverified_user_cannot_login(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user(
        state=UserState.not_verified, verification_code="C1"
    )

    result = await use_case.execute("alice@example.com", "CorrectHorse1!")

    assert result.as_dict() == {"success": False}
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_empty_password_is_a_plain_failure(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await use_case.execute("alice@example.com", "")

    assert result.as_dict() == {"success": False}


@pytest.mark.asyncio
async def test_email_lookup_is_normalized(use_case, mock_uow):
    await use_case.execute(" ALICE@example.com", "x")

    mock_uow.users.get_by_email.assert_called_once_with("alice@example.com")


@pytest.mark.asyncio
async def test_storage_failure_on_update_is_upstream_fault(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.users.update.side_effect = StorageError("disk I/O error")

    result = await use_case.execute("alice@example.com", "CorrectHorse1!")

    assert result.is_err()
    assert result.error.code == ErrorKind.UPSTREAM_FAULT
    assert result.as_dict() == {"success": False, "error": "disk I/O error"}
