from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.logging_notifier import LoggingNotifier
from src.adapter.services.sendgrid_notifier import NotifierConfig, SendGridNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.notifier import INotifier

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_notifier() -> INotifier:
    """
    Notifier built once from ApplicationConfig.

    Without a SendGrid API key, emails are logged instead of sent.
    """
    if not ApplicationConfig.SENDGRID_API_KEY:
        return LoggingNotifier(sender_email=ApplicationConfig.SENDGRID_SENDER_EMAIL)

    config = NotifierConfig(
        api_key=ApplicationConfig.SENDGRID_API_KEY,
        sender_email=ApplicationConfig.SENDGRID_SENDER_EMAIL,
        api_url=ApplicationConfig.SENDGRID_API_URL,
        timeout=ApplicationConfig.NOTIFIER_TIMEOUT,
        max_attempts=ApplicationConfig.NOTIFIER_MAX_ATTEMPTS,
        backoff_seconds=ApplicationConfig.NOTIFIER_BACKOFF_SECONDS,
    )
    return SendGridNotifier(config)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and email

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload
