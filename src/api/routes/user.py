from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.account_service import AccountService
from src.app.services.token_codec import TokenClaims
from src.depends import get_account_service, get_current_user

router = APIRouter(prefix="/users", tags=["User"])


class CreateUserRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)


class UpdateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None


@router.get("", status_code=status.HTTP_200_OK)
async def list_users(
    current_user: TokenClaims = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
):
    result = await service.get_all_users()

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()


@router.get("/{user_id}", status_code=status.HTTP_200_OK)
async def get_user(
    user_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
):
    """
    Raises:
        - 401 Unauthorized: Missing or invalid login token
        - 404 Not Found: User does not exist
    """
    result = await service.get_user(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    current_user: TokenClaims = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
):
    """
    Create an active user without email verification.

    Raises:
        - 409 Conflict: Email already in use
    """
    result = await service.create_user(request.name, request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()


@router.put("/{user_id}", status_code=status.HTTP_200_OK)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current_user: TokenClaims = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
):
    """
    Raises:
        - 404 Not Found: User does not exist
        - 409 Conflict: New email belongs to another user
    """
    result = await service.update_user(user_id, name=request.name, email=request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()
