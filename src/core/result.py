"""Result types for use-case outcomes.

Use cases never raise for business failures. They return a ``Result`` that is
either ok (``value``) or err (``error``) and the API layer maps the error code
to an HTTP status.

Usage:
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error, status_code=422)
    return result.value
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Business error carried by a failed ``Result``.

    Attributes:
        code: Error tag, one of ``ErrorCode``
        message: Human readable message
        data: Optional structured payload (e.g. field errors)
    """

    code: str
    message: str
    data: Optional[Any] = None


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result is an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("Result is ok")
        return self._error

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result.err({self._error!r})"
        return f"Result.ok({self._value!r})"


class Return:
    """Constructors for ``Result``"""

    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)
