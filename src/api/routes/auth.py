from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.account_service import AccountService
from src.depends import get_account_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before it reaches the account service.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest, service: AccountService = Depends(get_account_service)
):
    """
    User Registration

    Creates an unverified account and mails a verification link carrying
    the one-time code and a registration token.

    Raises:
        - 409 Conflict: Email already in use
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    result = await service.register_user(request.name, request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()


class VerifyRequest(BaseModel):
    token: str = Field(..., description="Registration token from the verification link")
    code: str = Field(..., description="Verification code from the verification link")


@router.post("/verify", status_code=status.HTTP_200_OK)
async def verify(
    request: VerifyRequest, service: AccountService = Depends(get_account_service)
):
    """
    Registration Verification

    Activates the account named by the token when the code matches.

    Raises:
        - 400 Bad Request: Invalid/expired token, wrong or consumed code, already verified
        - 500 Internal Server Error: Server error
    """
    result = await service.verify_register(request.token, request.code)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest, service: AccountService = Depends(get_account_service)
):
    """
    User Login

    Raises:
        - 401 Unauthorized: Unknown email, unverified account or wrong password
        - 500 Internal Server Error: Server error
    """
    result = await service.authenticate_user(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error, rejected_status=status.HTTP_401_UNAUTHORIZED)

    return result.as_dict()


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK)
async def forgot_password(
    request: ForgotPasswordRequest, service: AccountService = Depends(get_account_service)
):
    """
    Forgot Password

    Mails a password renewal link carrying a one-time code and a reset token.

    Raises:
        - 404 Not Found: Unknown email
        - 500 Internal Server Error: Server error
    """
    result = await service.forgot_password_request(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()


class RenewPasswordRequest(BaseModel):
    token: str = Field(..., description="Reset token from the renewal link")
    code: str = Field(..., description="Reset code from the renewal link")
    password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post("/renew-password", status_code=status.HTTP_200_OK)
async def renew_password(
    request: RenewPasswordRequest, service: AccountService = Depends(get_account_service)
):
    """
    Renew Password

    Raises:
        - 400 Bad Request: Invalid/expired token, wrong or consumed code
        - 500 Internal Server Error: Server error
    """
    result = await service.renew_password(request.code, request.password, request.token)

    if result.is_err():
        raise_for_error(result.error)

    return result.as_dict()
