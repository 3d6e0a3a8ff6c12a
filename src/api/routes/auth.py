from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import ClientError, ServerError
from src.api.utils.envelope import ApiResponse
from src.app.services.notifier import INotifier
from src.app.services.password_hasher import check_password_bytes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    SignupCommand,
    SignupUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    LoginResponse,
    UserInfo,
)
from src.core.enums import ErrorCode
from src.depends import get_notifier, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_bytes(v)


@router.post(
    "/signup", status_code=status.HTTP_200_OK, response_model=ApiResponse[UserInfo]
)
async def signup(
    request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Signup

    Creates a user account. The response never contains the password hash.

    Raises:
        - 422 Unprocessable Entity: Email already registered or invalid input
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(email=request.email, password=request.password)

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.CONFLICT:
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return ApiResponse(data=result.value)


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_bytes(v)


@router.post(
    "/login", status_code=status.HTTP_200_OK, response_model=ApiResponse[LoginResponse]
)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Returns the user and a signed identity token (no expiry by default).

    Raises:
        - 404 Not Found: No account with this email
        - 422 Unprocessable Entity: Wrong password or invalid input
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == ErrorCode.INVALID_CREDENTIAL:
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return ApiResponse(data=result.value)


class RequestPasswordResetRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotifier = Depends(get_notifier),
):
    """
    Request Password Reset

    Opens a 10 minute reset window and emails a link to /reset/{token}.
    Succeeds even if the email could not be delivered.

    Raises:
        - 404 Not Found: No account with this email
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow, notifier)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(data=None)
