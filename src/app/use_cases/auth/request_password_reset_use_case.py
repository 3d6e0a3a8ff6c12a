"""
Request Password Reset Use Case

Opens a reset window on the user record and emails the reset link.
"""

import logging
from typing import Optional

from config import ApplicationConfig
from src.app.services.notifier import EmailMessage, INotifier, NotificationError
from src.app.services.reset_token import generate_reset_token, reset_window_expiry
from src.app.services.unit_of_work import UnitOfWork
from src.core.enums import ErrorCode
from src.core.result import Error, Result, Return
from src.domain import clock
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Unknown email is NOT_FOUND
    - Token is 32 random bytes, hex encoded, stored as-is on the user
    - Window closes 600000 ms after the request
    - A new request replaces any open window
    - The token is committed before the email is sent
    - A notifier failure does not fail the request; the result reports
      email_sent=False and the window stays open

    Known race: two concurrent requests for the same user both write the
    token pair; the last commit wins.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: INotifier,
        reset_url_base: Optional[str] = None,
        subject: Optional[str] = None,
    ):
        self.uow = uow
        self.notifier = notifier
        self.reset_url_base = (reset_url_base or ApplicationConfig.RESET_URL_BASE).rstrip("/")
        self.subject = subject or ApplicationConfig.RESET_EMAIL_SUBJECT

    def _build_message(self, email: str, reset_token: str) -> EmailMessage:
        reset_url = f"{self.reset_url_base}/reset/{reset_token}"
        return EmailMessage(
            to=email,
            subject=self.subject,
            html=f'<p>To reset your password, click <a href="{reset_url}">here</a>.</p>',
        )

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error(
                        ErrorCode.NOT_FOUND,
                        "No account is registered with this email",
                    )
                )

            user_id = user.id
            reset_token = generate_reset_token()
            user.open_reset_window(reset_token, reset_window_expiry(clock.utc_now()))
            await self.uow.users.update(user)
            await self.uow.commit()

        try:
            await self.notifier.send(self._build_message(email, reset_token))
        except NotificationError as e:
            logger.error(f"Reset token issued for {user_id} but email not sent: {e}")
            return Return.ok(RequestPasswordResetResponse(email_sent=False))

        return Return.ok(RequestPasswordResetResponse(email_sent=True))
