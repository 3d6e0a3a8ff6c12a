from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.core.result import Result, Return
from .create_article_use_case import to_article_info
from .dtos import ArticleInfo


class ListArticlesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[ArticleInfo]]:
        async with self.uow:
            articles = await self.uow.articles.list_all()
            return Return.ok([to_article_info(a) for a in articles])
