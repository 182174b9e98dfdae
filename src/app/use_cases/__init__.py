"""
Use Cases

Organized into domain folders:
- auth/: Registration, verification, login and password recovery
- users/: User management
"""

from .auth import (
    RegisterUserUseCase,
    VerifyRegisterUseCase,
    AuthenticateUserUseCase,
    ForgotPasswordRequestUseCase,
    RenewPasswordUseCase,
)
from .users import (
    GetAllUsersUseCase,
    GetUserUseCase,
    CreateUserUseCase,
    UpdateUserUseCase,
)

__all__ = [
    # Auth
    "RegisterUserUseCase",
    "VerifyRegisterUseCase",
    "AuthenticateUserUseCase",
    "ForgotPasswordRequestUseCase",
    "RenewPasswordUseCase",
    # Users
    "GetAllUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
]
