"""
Consolidated middleware and exception handlers for the DietLog API
"""

import time
import logging
from typing import Any, Optional
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import ErrorDetail, ErrorResponse
from app.exceptions import (
    ConflictError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)

logger = logging.getLogger("dietlog.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    return str(obj)


def error_response(
    status_code: int, code: str, message: str, details: Optional[Any] = None
) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        # Path only; query strings and cookies may carry session tokens
        logger.info(
            f"request_started request_id={request_id} "
            f"method={request.method} path={request.url.path}"
        )

        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            process_time = time.perf_counter() - start_time
            logger.error(
                f"request_failed request_id={request_id} method={request.method} "
                f"path={request.url.path} process_time={process_time:.4f}s",
                exc_info=True,
            )
            raise

        process_time = time.perf_counter() - start_time
        logger.info(
            f"request_completed request_id={request_id} method={request.method} "
            f"path={request.url.path} status_code={response.status_code} "
            f"process_time={process_time:.4f}s"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request parsing errors (malformed JSON, bad parameters)"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Request validation failed",
        make_serializable(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")

    return error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Handle service validation errors"""
    logger.warning(f"Service validation error on {request.url.path}: {exc}")

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        exc.code or "SERVICE_VALIDATION_ERROR",
        exc.message,
        make_serializable(exc.details) if exc.details else None,
    )


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handle not found errors"""
    logger.warning(f"Resource not found on {request.url.path}: {exc}")

    return error_response(status.HTTP_404_NOT_FOUND, exc.code or "NOT_FOUND", exc.message)


async def unauthorized_exception_handler(request: Request, exc: UnauthorizedError):
    """Handle missing or rejected session tokens"""
    logger.warning(f"Unauthorized request on {request.url.path}: {exc}")

    return error_response(
        status.HTTP_401_UNAUTHORIZED, exc.code or "UNAUTHORIZED", exc.message
    )


async def conflict_exception_handler(request: Request, exc: ConflictError):
    """Handle conflicting writes such as duplicate emails"""
    logger.warning(f"Conflict on {request.url.path}: {exc}")

    return error_response(status.HTTP_409_CONFLICT, exc.code or "CONFLICT", exc.message)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url.path}: {exc}")

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )
