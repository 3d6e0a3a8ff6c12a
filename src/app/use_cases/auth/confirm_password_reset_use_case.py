"""
Confirm Password Reset Use Case

Redeems a reset window: sets the new password and consumes the token.
"""

import logging
from uuid import UUID

from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.core.enums import ErrorCode
from src.core.result import Error, Result, Return
from src.domain import clock
from .dtos import ConfirmPasswordResetResponse
from .validate_reset_token_use_case import EXPIRED_MESSAGE

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - User is looked up by ID + token + expiration > now
    - No match (wrong ID, wrong token, expired, already used) is EXPIRED
    - Password is hashed with bcrypt (cost factor 12)
    - Both reset fields are cleared, which makes the token single-use

    Known race: two concurrent redemptions can both pass the lookup before
    either commit clears the fields.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, token: str, new_password: str
    ) -> Result[ConfirmPasswordResetResponse]:
        try:
            user_uuid = UUID(user_id)
        except ValueError:
            return Return.err(Error(ErrorCode.EXPIRED, EXPIRED_MESSAGE))

        async with self.uow:
            user = await self.uow.users.get_by_id_and_reset_token(
                user_uuid, token, clock.utc_now()
            )
            if user is None:
                return Return.err(Error(ErrorCode.EXPIRED, EXPIRED_MESSAGE))

            user.password_hash = hash_password(new_password)
            user.close_reset_window()
            await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Password reset completed for {user.id}")
            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
