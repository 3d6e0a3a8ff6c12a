"""
Password hashing with bcrypt.

Work factor is fixed at 12 for every hash this service writes.
"""

import bcrypt

BCRYPT_ROUNDS = 12

# bcrypt only accepts the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def check_password_bytes(password: str) -> str:
    """Raises ValueError for passwords bcrypt cannot hash"""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plaintext password, returns the 60-char bcrypt digest"""
    password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds))
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison is done by bcrypt.checkpw"""
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
