"""
Use Cases

Organized into domain folders:
- auth/: Signup, login and password reset
- articles/: Article content
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ValidateResetTokenUseCase,
    ConfirmPasswordResetUseCase,
)
from .articles import (
    CreateArticleUseCase,
    ListArticlesUseCase,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ValidateResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # Articles
    "CreateArticleUseCase",
    "ListArticlesUseCase",
]
