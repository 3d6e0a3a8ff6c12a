from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Article


class IArticleRepository(ABC):
    """Article repository interface - application layer"""

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Create a new article"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Article]:
        """List all articles, newest first"""
        pass
