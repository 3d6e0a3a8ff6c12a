import logging

from src.app.services.notifier import EmailMessage, INotifier

logger = logging.getLogger(__name__)


class LoggingNotifier(INotifier):
    """Development notifier - logs emails instead of sending them"""

    def __init__(self, sender_email: str):
        self.sender_email = sender_email

    async def send(self, message: EmailMessage) -> None:
        logger.info(
            f"EMAIL (not sent) from={message.from_email or self.sender_email} "
            f"to={message.to} subject={message.subject!r}"
        )
        logger.info(message.html)
