"""
User Entity

Represents an account that can log in and reset its password.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.clock import utc_now


class User(SQLModel, table=True):
    """
    User entity - account credentials plus the password reset window.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - reset_token and reset_token_expiration are set and cleared together
    - A reset window is open while now < reset_token_expiration
    - Users are never deleted
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset window
    reset_token: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_token_expiration: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def open_reset_window(self, token: str, expires_at: datetime) -> None:
        """Start (or replace) the reset window. Any previous token stops working."""
        self.reset_token = token
        self.reset_token_expiration = expires_at

    def close_reset_window(self) -> None:
        """Consume the reset window"""
        self.reset_token = None
        self.reset_token_expiration = None
