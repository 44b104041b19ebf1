from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_manager.core.dto.contact import ErrorResponse
from contact_manager.infrastructure.config.config import APP_CONFIG
from contact_manager.infrastructure.errors.base import ApiError
from contact_manager.infrastructure.logging import get_logger


logger = get_logger(__name__)


def _envelope(status_code: int, response: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(exclude_none=True),
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _envelope(
        exc.status_code,
        ErrorResponse(message=exc.detail, errors=exc.errors),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error["loc"] if part != "body"]
        errors.append({
            "path": ".".join(location) or "body",
            "msg": error["msg"],
        })
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(message="Validation failed", errors=errors),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Route not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
    return _envelope(exc.status_code, ErrorResponse(message=message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("server_error", path=request.url.path, error=str(exc), exc_info=exc)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            message="Internal server error",
            error=str(exc) if APP_CONFIG.DEBUG else None,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
