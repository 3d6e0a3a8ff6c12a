from src.app.services.unit_of_work import UnitOfWork
from src.core.result import Result, Return
from src.domain.entities import Article
from .dtos import ArticleInfo, CreateArticleCommand


def to_article_info(article: Article) -> ArticleInfo:
    return ArticleInfo(
        id=str(article.id),
        title=article.title,
        body=article.body,
        image_url=article.image_url,
        date=article.date,
    )


class CreateArticleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateArticleCommand) -> Result[ArticleInfo]:
        async with self.uow:
            article = Article(
                title=command.title,
                body=command.body,
                image_url=command.image_url,
                date=command.date,
            )
            article = await self.uow.articles.create(article)
            await self.uow.commit()

            return Return.ok(to_article_info(article))
