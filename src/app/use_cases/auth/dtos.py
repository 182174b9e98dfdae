"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterUserCommand(BaseModel):
    name: str
    email: str
    password: str


class RenewPasswordCommand(BaseModel):
    code: str
    password: str
    token: str


# ============================================================================
# Response DTOs
# ============================================================================


class AuthenticateResponse(BaseModel):
    """Response for user login use case"""

    name: str
    email: str
    token: str
