"""
Password reset link flow (server-rendered pages).

The email links to GET /reset/{token}, the form posts to /new-password and
a successful change redirects to /complete.
"""

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from src.api.error import ClientError, ServerError
from src.api.utils.views import (
    render_complete_page,
    render_expired_page,
    render_new_password_page,
)
from src.app.services.password_hasher import check_password_bytes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ConfirmPasswordResetUseCase,
    ValidateResetTokenUseCase,
)
from src.core.enums import ErrorCode
from src.core.result import Error
from src.depends import get_unit_of_work

router = APIRouter(tags=["Password Reset"])


def expired_response() -> HTMLResponse:
    return HTMLResponse(
        content=render_expired_page(), status_code=status.HTTP_404_NOT_FOUND
    )


@router.get("/reset/{token}", response_class=HTMLResponse)
async def new_password_form(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Reset link target

    Renders the new-password form for an open reset window, otherwise the
    expired page (404). Wrong, expired and used tokens look the same.
    """
    use_case = ValidateResetTokenUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        if result.error.code == ErrorCode.EXPIRED:
            return expired_response()
        raise ServerError(result.error)

    context = result.value
    return HTMLResponse(
        content=render_new_password_page(context.user_id, context.token),
        status_code=status.HTTP_200_OK,
    )


@router.post("/new-password", response_class=HTMLResponse)
async def set_new_password(
    password: str = Form(..., min_length=1),
    user_id: str = Form(..., alias="userId"),
    password_token: str = Form(..., alias="passwordToken"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    New-password form target

    Redirects to /complete on success. The token is consumed, so posting the
    same form again renders the expired page.
    """
    try:
        check_password_bytes(password)
    except ValueError as e:
        raise ClientError(
            Error(ErrorCode.VALIDATION_FAILED, str(e), [{"field": "password", "message": str(e)}]),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(user_id, password_token, password)

    if result.is_err():
        if result.error.code == ErrorCode.EXPIRED:
            return expired_response()
        raise ServerError(result.error)

    return RedirectResponse(url="/complete", status_code=status.HTTP_302_FOUND)


@router.get("/complete", response_class=HTMLResponse)
async def complete():
    return HTMLResponse(content=render_complete_page(), status_code=status.HTTP_200_OK)
