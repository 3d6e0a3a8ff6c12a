"""
Password reset token generation.

A reset token is 32 random bytes from the OS CSPRNG, hex encoded.
Tokens are not checked against existing ones; uniqueness relies on the
256-bit width.
"""

import secrets
from datetime import datetime, timedelta

RESET_TOKEN_BYTES = 32
RESET_WINDOW = timedelta(milliseconds=600000)  # 10 minutes


def generate_reset_token() -> str:
    """Return a fresh 64-char lowercase hex token"""
    return secrets.token_hex(RESET_TOKEN_BYTES)


def reset_window_expiry(now: datetime) -> datetime:
    return now + RESET_WINDOW
