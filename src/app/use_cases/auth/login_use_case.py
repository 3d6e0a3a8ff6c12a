"""
Login Use Case

Checks credentials and issues an identity token.
"""

from src.api.utils.jwt import generate_jwt
from src.app.services.password_hasher import verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.core.enums import ErrorCode
from src.core.result import Error, Result, Return
from .dtos import LoginResponse
from .signup_dto import UserInfo


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email is NOT_FOUND, wrong password is INVALID_CREDENTIAL
    - Password comparison is constant-time (bcrypt.checkpw)
    - Token embeds user_id and email, no exp claim unless configured
    - No store mutation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error(
                        ErrorCode.NOT_FOUND,
                        "No account is registered with this email",
                    )
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIAL, "Incorrect password")
                )

            token = generate_jwt(user.id, user.email)

            return Return.ok(
                LoginResponse(
                    user=UserInfo(id=str(user.id), email=user.email),
                    token=token,
                )
            )
