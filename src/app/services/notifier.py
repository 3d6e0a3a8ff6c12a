from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class EmailMessage(BaseModel):
    """Outbound transactional email"""

    to: str
    subject: str
    html: str
    from_email: Optional[str] = None  # Notifier falls back to its configured sender


class NotificationError(Exception):
    """Raised when an email could not be handed to the delivery service"""


class INotifier(ABC):
    """Notifier interface - application layer"""

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Deliver a message, raises NotificationError on failure"""
        pass
