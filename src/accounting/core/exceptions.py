"""Domain exceptions and the handlers that turn them into responses."""

from typing import TYPE_CHECKING

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.accounting.core.logging import get_logger

if TYPE_CHECKING:
    from src.accounting.schemas.validation import FieldError

logger = get_logger(__name__)


class UnauthorizedError(Exception):
    """No valid session for the current request."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
        self.message = message


class ForbiddenError(Exception):
    """The caller is authenticated but lacks the required capability."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)
        self.message = message


class ValidationFailed(Exception):
    """Raised by API handlers that unwrap a failed validation result."""

    def __init__(self, errors: "tuple[FieldError, ...]"):
        super().__init__(errors[0].message if errors else "Validation error")
        self.errors = errors

    @property
    def message(self) -> str:
        return self.errors[0].message if self.errors else "Validation error"


class PageRedirect(Exception):
    """Non-local exit from a dashboard page handler.

    Raising it ends the request with a redirect to ``location``; nothing the
    page would have rendered is sent.
    """

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


def _error_response(status_code: int, message: str, **extra: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "request_id": correlation_id.get(),
            **extra,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
        return _error_response(status.HTTP_401_UNAUTHORIZED, exc.message)

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
        return _error_response(status.HTTP_403_FORBIDDEN, exc.message)

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            exc.message,
            errors=[error.as_dict() for error in exc.errors],
        )

    @app.exception_handler(PageRedirect)
    async def page_redirect_handler(request: Request, exc: PageRedirect) -> RedirectResponse:
        return RedirectResponse(url=exc.location, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
