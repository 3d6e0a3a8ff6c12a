from uuid import uuid4

import bcrypt
import pytest
from jose import jwt

from config import ApplicationConfig
from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.core.enums import ErrorCode
from src.domain.entities import User


def make_user(password: str = "pw1") -> User:
    password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt(4))
    return User(id=uuid4(), email="a@x.com", password_hash=password_hash.decode())


@pytest.mark.asyncio
async def test_successful_login(mock_uow):
    """Correct password returns the user and a token with id and email"""
    # Arrange
    user = make_user("pw1")
    mock_uow.users.get_by_email.return_value = user
    use_case = LoginUseCase(mock_uow)

    # Act
    result = await use_case.execute("a@x.com", "pw1")

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.user.id == str(user.id)
    assert data.user.email == "a@x.com"
    assert "password_hash" not in data.user.model_dump()

    payload = jwt.decode(data.token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
    assert payload["user_id"] == str(user.id)
    assert payload["email"] == "a@x.com"
    assert "exp" not in payload

    # Login never writes
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow):
    mock_uow.users.get_by_email.return_value = make_user("pw1")
    use_case = LoginUseCase(mock_uow)

    result = await use_case.execute("a@x.com", "wrong")

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_CREDENTIAL


@pytest.mark.asyncio
async def test_login_unknown_email(mock_uow):
    mock_uow.users.get_by_email.return_value = None
    use_case = LoginUseCase(mock_uow)

    result = await use_case.execute("missing@x.com", "pw")

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("attempt", ["PW1", "pw1 ", "pw", ""])
async def test_login_any_mismatch_is_invalid_credential(mock_uow, attempt):
    mock_uow.users.get_by_email.return_value = make_user("pw1")
    use_case = LoginUseCase(mock_uow)

    result = await use_case.execute("a@x.com", attempt)

    assert result.error.code == ErrorCode.INVALID_CREDENTIAL
