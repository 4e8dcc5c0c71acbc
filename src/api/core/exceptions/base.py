"""Global exception handlers for the FastAPI application."""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.modules.geo.exceptions import PointSourceError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class PriceGeoException(Exception):
    """Base exception for the price GPS API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


def _serializable_errors(exc: RequestValidationError | ValidationError) -> list[dict]:
    serializable_errors = []
    for error in exc.errors():
        error_dict = dict(error)
        if "input" in error_dict and hasattr(error_dict["input"], "isoformat"):
            error_dict["input"] = error_dict["input"].isoformat()
        # ctx may hold the raised exception instance
        if "ctx" in error_dict:
            error_dict["ctx"] = {k: str(v) for k, v in error_dict["ctx"].items()}
        serializable_errors.append(error_dict)
    return serializable_errors


def _error_response(
    status_code: int,
    message_code: MessageCode,
    details: dict,
    message: str | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message_code": message_code,
            "message": message or get_default_message(message_code),
            "details": details,
        },
        headers=headers,
    )


_HTTP_MESSAGE_CODES = {
    status.HTTP_400_BAD_REQUEST: MessageCode.BAD_REQUEST,
    status.HTTP_404_NOT_FOUND: MessageCode.NOT_FOUND,
}


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(PriceGeoException)
    async def pricegeo_exception_handler(
        request: Request, exc: PriceGeoException
    ) -> JSONResponse:
        """Handle custom API exceptions."""
        logger.error(
            f"API exception: {exc.message_code.value}",
            path=request.url.path,
            method=request.method,
            message_code=exc.message_code.value,
            details=exc.details,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(PointSourceError)
    async def point_source_exception_handler(
        request: Request, exc: PointSourceError
    ) -> JSONResponse:
        """The price store could not be read."""
        logger.error(
            "Price store unavailable",
            path=request.url.path,
            method=request.method,
            region_code=exc.region_code,
            error=exc.detail,
        )
        return _error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            MessageCode.EXTERNAL_SERVICE_ERROR,
            {"description": "Price store unavailable"},
        )

    # FastAPI's HTTPException subclasses Starlette's, so this covers both
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )
        return _error_response(
            exc.status_code,
            _HTTP_MESSAGE_CODES.get(exc.status_code, MessageCode.INTERNAL_ERROR),
            {"description": "HTTP exception occurred"},
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        logger.warning(
            "Validation error occurred",
            path=request.url.path,
            method=request.method,
            error_count=len(exc.errors()),
        )
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MessageCode.INVALID_INPUT,
            {
                "description": "Request validation failed",
                "validation_errors": _serializable_errors(exc),
            },
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Model validation failing inside a handler, not in the request."""
        logger.warning(
            "Pydantic validation error occurred",
            path=request.url.path,
            method=request.method,
        )
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MessageCode.VALIDATION_ERROR,
            {"validation_errors": _serializable_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.error(
            f"Database error: {exc}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            {"database_error": "Internal database error"},
            message="Database error occurred",
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {exc}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            {"error_type": type(exc).__name__},
        )
