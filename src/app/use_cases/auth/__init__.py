"""
Authentication Use Cases

Registration, verification, login and password recovery.
"""

from .register_user_use_case import RegisterUserUseCase
from .verify_register_use_case import VerifyRegisterUseCase
from .authenticate_user_use_case import AuthenticateUserUseCase
from .forgot_password_request_use_case import ForgotPasswordRequestUseCase
from .renew_password_use_case import RenewPasswordUseCase
from .dtos import AuthenticateResponse, RegisterUserCommand, RenewPasswordCommand

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "VerifyRegisterUseCase",
    "AuthenticateUserUseCase",
    "ForgotPasswordRequestUseCase",
    "RenewPasswordUseCase",
    # DTOs - Commands
    "RegisterUserCommand",
    "RenewPasswordCommand",
    # DTOs - Responses
    "AuthenticateResponse",
]
