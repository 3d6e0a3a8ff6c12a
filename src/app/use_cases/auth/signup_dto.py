"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- UserInfo: Output from use case (redacted user, no password hash)
"""

from pydantic import BaseModel


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    password: str


class UserInfo(BaseModel):
    """Outward representation of a user. Never includes the password hash."""

    id: str
    email: str
