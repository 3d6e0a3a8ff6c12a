from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: {"message": "success", "data": ...}"""

    message: str = "success"
    data: Optional[T] = None
