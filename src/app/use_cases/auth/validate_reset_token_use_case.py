"""
Validate Reset Token Use Case

Read path behind the reset link in the email.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.core.enums import ErrorCode
from src.core.result import Error, Result, Return
from src.domain import clock
from .dtos import ResetTokenContext

EXPIRED_MESSAGE = "The request has expired"


class ValidateResetTokenUseCase:
    """
    Returns the (user_id, token) pair the new-password form posts back.

    Wrong, expired and already used tokens all yield EXPIRED.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[ResetTokenContext]:
        async with self.uow:
            user = await self.uow.users.get_by_reset_token(token, clock.utc_now())
            if user is None:
                return Return.err(Error(ErrorCode.EXPIRED, EXPIRED_MESSAGE))

            return Return.ok(ResetTokenContext(user_id=str(user.id), token=token))
