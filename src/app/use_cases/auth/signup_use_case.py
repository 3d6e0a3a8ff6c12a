import logging

from sqlalchemy.exc import IntegrityError

from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.core.enums import ErrorCode
from src.core.result import Error, Result, Return
from src.domain.entities import User
from .signup_dto import SignupCommand, UserInfo

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[UserInfo] (redacted user)

    Business Logic:
    1. Check if email already exists (CONFLICT)
       A concurrent insert caught by the unique index is also CONFLICT
    2. Hash password with bcrypt cost factor 12
    3. Create User with no reset window
    4. Commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[UserInfo]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Email already registered")
                )

            user = User(
                email=command.email,
                password_hash=hash_password(command.password),
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Concurrent signup with the same email won the unique index
                await self.uow.rollback()
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Email already registered")
                )

            logger.info(f"User signed up: {user.id}")
            return Return.ok(UserInfo(id=str(user.id), email=user.email))
