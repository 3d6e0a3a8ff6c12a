from datetime import datetime, timedelta

import pytest

from src.app.use_cases.articles import (
    CreateArticleCommand,
    CreateArticleUseCase,
    ListArticlesUseCase,
)
from src.domain.entities import Article


@pytest.mark.asyncio
async def test_create_article(mock_uow):
    use_case = CreateArticleUseCase(mock_uow)
    command = CreateArticleCommand(
        title="Spring term", body="Classes start in March", date="2026-03-02"
    )

    result = await use_case.execute(command)

    assert result.is_ok()
    data = result.value
    assert data.id
    assert data.title == "Spring term"
    assert data.image_url is None
    mock_uow.articles.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_list_articles(mock_uow):
    now = datetime(2026, 1, 1)
    mock_uow.articles.list_all.return_value = [
        Article(title="New", body="b", date="2026-01-02", created_at=now + timedelta(days=1)),
        Article(title="Old", body="b", date="2026-01-01", image_url="https://img", created_at=now),
    ]
    use_case = ListArticlesUseCase(mock_uow)

    result = await use_case.execute()

    assert result.is_ok()
    assert [a.title for a in result.value] == ["New", "Old"]
    assert result.value[1].image_url == "https://img"
    mock_uow.commit.assert_not_called()
