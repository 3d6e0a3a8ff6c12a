from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.article_repository import IArticleRepository
from src.domain.entities import Article


class ArticleRepository(IArticleRepository):
    """Article repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, article: Article) -> Article:
        """Create a new article"""
        self.session.add(article)
        await self.session.flush()
        await self.session.refresh(article)
        return article

    async def list_all(self) -> List[Article]:
        """List all articles, newest first"""
        stmt = select(Article).order_by(Article.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())
