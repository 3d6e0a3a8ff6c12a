"""
Authentication Use Cases

Signup, login and the password reset flow.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import SignupCommand, UserInfo
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .validate_reset_token_use_case import ValidateResetTokenUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    LoginResponse,
    RequestPasswordResetResponse,
    ResetTokenContext,
    ConfirmPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ValidateResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "UserInfo",
    "LoginResponse",
    "RequestPasswordResetResponse",
    "ResetTokenContext",
    "ConfirmPasswordResetResponse",
]
