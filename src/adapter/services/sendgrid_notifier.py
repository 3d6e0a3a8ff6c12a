"""
SendGrid Notifier

Delivers transactional email through the SendGrid v3 ``/mail/send`` HTTP API.
The API key and sender come from an explicit ``NotifierConfig`` handed to the
constructor; nothing is configured process-wide.
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import BaseModel

from src.app.services.notifier import EmailMessage, INotifier, NotificationError

logger = logging.getLogger(__name__)

SENDGRID_API_URL = "https://api.sendgrid.com/v3/mail/send"


class NotifierConfig(BaseModel):
    api_key: str
    sender_email: str
    api_url: str = SENDGRID_API_URL
    timeout: float = 10.0
    max_attempts: int = 3
    backoff_seconds: float = 0.5


class SendGridNotifier(INotifier):
    """
    SendGrid implementation of INotifier.

    Retry policy:
    - Transport errors, 429 and 5xx responses are retried
    - Delay doubles after each failed attempt (backoff_seconds, 2x, 4x, ...)
    - Other 4xx responses fail immediately
    - NotificationError is raised once attempts are exhausted
    """

    def __init__(self, config: NotifierConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client

    def _payload(self, message: EmailMessage) -> dict:
        return {
            "personalizations": [{"to": [{"email": message.to}]}],
            "from": {"email": message.from_email or self.config.sender_email},
            "subject": message.subject,
            "content": [{"type": "text/html", "value": message.html}],
        }

    async def _post(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(
            self.config.api_url,
            json=payload,
            headers={"Authorization": f"Bearer {self.config.api_key}"},
        )

    async def send(self, message: EmailMessage) -> None:
        payload = self._payload(message)
        if self._client is not None:
            await self._send_with_retry(self._client, payload, message.to)
            return

        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            await self._send_with_retry(client, payload, message.to)

    async def _send_with_retry(
        self, client: httpx.AsyncClient, payload: dict, recipient: str
    ) -> None:
        delay = self.config.backoff_seconds
        last_error = "no attempt made"

        for attempt in range(1, self.config.max_attempts + 1):
            try:
                response = await self._post(client, payload)
            except httpx.InvalidURL as e:
                # Misconfigured endpoint, retrying cannot help
                last_error = f"{type(e).__name__}: {e}"
                break
            except httpx.HTTPError as e:
                last_error = f"{type(e).__name__}: {e}"
            else:
                if response.status_code < 300:
                    logger.info(f"Email sent to {recipient} (attempt {attempt})")
                    return
                last_error = f"HTTP {response.status_code}: {response.text[:200]}"
                if response.status_code < 500 and response.status_code != 429:
                    break

            logger.warning(
                f"Email to {recipient} failed (attempt {attempt}/{self.config.max_attempts}): {last_error}"
            )
            if attempt < self.config.max_attempts:
                await asyncio.sleep(delay)
                delay *= 2

        raise NotificationError(f"Failed to send email to {recipient}: {last_error}")
