from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[User]:
        stmt = select(User).where(
            User.reset_token == token,
            User.reset_token_expiration > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id_and_reset_token(
        self, user_id: UUID, token: str, now: datetime
    ) -> Optional[User]:
        stmt = select(User).where(
            User.id == user_id,
            User.reset_token == token,
            User.reset_token_expiration > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
