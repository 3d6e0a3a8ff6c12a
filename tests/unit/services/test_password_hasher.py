import pytest

from src.app.services.password_hasher import (
    MAX_PASSWORD_BYTES,
    check_password_bytes,
    hash_password,
    verify_password,
)


def test_password_at_byte_limit_is_accepted():
    password = "a" * MAX_PASSWORD_BYTES
    assert check_password_bytes(password) == password


def test_password_over_byte_limit_is_rejected():
    with pytest.raises(ValueError, match="72 bytes"):
        check_password_bytes("a" * (MAX_PASSWORD_BYTES + 1))


def test_limit_counts_utf8_bytes_not_characters():
    # 37 two-byte characters = 74 bytes
    with pytest.raises(ValueError):
        check_password_bytes("é" * 37)


def test_hash_then_verify():
    password_hash = hash_password("pw1", rounds=4)
    assert verify_password("pw1", password_hash)
    assert not verify_password("pw2", password_hash)
