"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for login and the password reset flow.
"""

from pydantic import BaseModel

from .signup_dto import UserInfo


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserInfo
    token: str


class RequestPasswordResetResponse(BaseModel):
    """
    Response for request password reset use case

    email_sent is False when the token was stored but the notifier failed.
    The reset window is open either way.
    """

    email_sent: bool


class ResetTokenContext(BaseModel):
    """Capability pair echoed back by the new-password form"""

    user_id: str
    token: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
