"""
Shared API Middleware
======================

Common middleware and exception handlers for the FastAPI application.
"""

import time
import uuid
from typing import Callable
from datetime import datetime, timezone

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Adds correlation ID to requests for tracing.

    Reuses the caller's X-Correlation-ID header when present.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs all requests and responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = getattr(request.state, "correlation_id", "unknown")
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(e),
                    "response_time_ms": int((time.perf_counter() - start_time) * 1000)
                }
            )
            raise

        logger.info(
            "Request completed",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
                "response_time_ms": int((time.perf_counter() - start_time) * 1000)
            }
        )
        return response


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Map malformed request payloads to a plain 400.

    Field-level details are logged, not returned.
    """
    logger.info(
        "Rejected malformed request",
        extra={
            "correlation_id": getattr(request.state, "correlation_id", "unknown"),
            "path": request.url.path,
            "method": request.method,
            "errors": str(exc.errors()),
        }
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled exceptions.

    Internal details never reach the client.
    """
    correlation_id = getattr(request.state, "correlation_id", "unknown")

    logger.error(
        "Unhandled exception",
        extra={
            "correlation_id": correlation_id,
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc).__name__,
            "error_message": str(exc)
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "correlation_id": correlation_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )
