from .create_article_use_case import CreateArticleUseCase
from .list_articles_use_case import ListArticlesUseCase
from .dtos import ArticleInfo, CreateArticleCommand

__all__ = [
    "CreateArticleUseCase",
    "ListArticlesUseCase",
    "ArticleInfo",
    "CreateArticleCommand",
]
