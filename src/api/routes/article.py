from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ServerError
from src.api.utils.envelope import ApiResponse
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.articles import (
    ArticleInfo,
    CreateArticleCommand,
    CreateArticleUseCase,
    ListArticlesUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/articles", tags=["Articles"])


class CreateArticleRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
    image_url: Optional[str] = Field(None, alias="imageUrl", max_length=2048)
    date: str = Field(..., min_length=1, max_length=64)

    model_config = {"populate_by_name": True}


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[ArticleInfo]])
async def list_articles(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all articles, newest first"""
    use_case = ListArticlesUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value)


@router.post("", status_code=status.HTTP_200_OK, response_model=ApiResponse[ArticleInfo])
async def create_article(
    request: CreateArticleRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    current_user: dict = Depends(get_current_user),
):
    """
    Create Article

    Requires a bearer token issued by /auth/login.

    Raises:
        - 401/403: Missing or invalid token
        - 422 Unprocessable Entity: Invalid input
    """
    command = CreateArticleCommand(
        title=request.title,
        body=request.body,
        image_url=request.image_url,
        date=request.date,
    )
    use_case = CreateArticleUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value)
