"""
Article Entity

Content published on the academy site. Not related to users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.clock import utc_now


class Article(SQLModel, table=True):
    __tablename__ = "articles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    body: str
    image_url: Optional[str] = Field(default=None, max_length=2048)
    date: str = Field(max_length=64)  # Display date, stored as given

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
