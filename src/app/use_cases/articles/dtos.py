from typing import Optional

from pydantic import BaseModel


class CreateArticleCommand(BaseModel):
    title: str
    body: str
    image_url: Optional[str] = None
    date: str


class ArticleInfo(BaseModel):
    id: str
    title: str
    body: str
    image_url: Optional[str] = None
    date: str
