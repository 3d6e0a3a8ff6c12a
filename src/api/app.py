from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.core.enums import ErrorCode
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


def error_envelope(message: str, status_code: int, code: str, data=None) -> dict:
    envelope = {"message": message, "statusCode": status_code, "code": code}
    if data is not None:
        envelope["data"] = data
    return envelope


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    content = error_envelope(error.message, exc.status_code, error.code, error.data)
    logger.warning(f"Client error: {content}")
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(
            "Internal server error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.INTERNAL,
        ),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    field_errors = [
        {"field": str(err["loc"][-1]) if err.get("loc") else "", "message": err["msg"]}
        for err in exc.errors()
    ]
    message = field_errors[0]["message"] if field_errors else "Validation failed"
    content = error_envelope(
        message,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_FAILED,
        field_errors,
    )
    logger.warning(f"Validation error: {content}")
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(
            "Internal server error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.INTERNAL,
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Map Academy API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import article, auth, health_check, reset

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(reset.router, tags=["Password Reset"])
    app.include_router(article.router, tags=["Articles"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
