"""
Domain Entities

Each entity in its own file.
"""

from .user import User
from .article import Article

__all__ = [
    "User",
    "Article",
]
