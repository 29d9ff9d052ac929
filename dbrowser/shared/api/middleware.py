"""
Shared API Middleware
======================

Common middleware and exception handlers for the FastAPI application.

Every failure leaves the service as a JSON envelope of the form
``{"error": "<message>"}``. Database messages are passed through verbatim.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from dbrowser.core import RepositoryException, ResourceNotFoundException
from dbrowser.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Adds correlation ID to requests for tracing.

    Correlation IDs link every log line emitted while serving a request.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID", str(uuid.uuid4()))

        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs all requests and responses.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = getattr(request.state, "correlation_id", "unknown")
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                "correlation_id": correlation_id,
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else None
            }
        )

        try:
            response = await call_next(request)

            response_time = time.perf_counter() - start_time
            logger.info(
                "Request completed",
                extra={
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "response_time_ms": int(response_time * 1000)
                }
            )

            return response

        except Exception as e:
            response_time = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                extra={
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "path": request.url.path,
                    "error": str(e),
                    "response_time_ms": int(response_time * 1000)
                }
            )
            raise


def error_message(exc: Exception) -> str:
    """Extract the driver-level message from a database error."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    if isinstance(exc, RepositoryException):
        return exc.message
    return str(exc)


async def not_found_handler(request: Request, exc: ResourceNotFoundException) -> JSONResponse:
    """Map missing resources to a 404 envelope."""
    logger.info(
        "Resource not found",
        extra={
            "correlation_id": getattr(request.state, "correlation_id", "unknown"),
            "path": request.url.path,
            "resource_type": exc.resource_type,
            **exc.details
        }
    )
    return JSONResponse(status_code=404, content={"error": exc.message})


async def database_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Map database failures to a 500 envelope.

    The underlying message is returned as-is so clients see the same text
    the database produced.
    """
    message = error_message(exc)
    logger.error(
        "Database error",
        extra={
            "correlation_id": getattr(request.state, "correlation_id", "unknown"),
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc).__name__,
            "error_message": message
        }
    )
    return JSONResponse(status_code=500, content={"error": message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled exceptions.

    Returns the same envelope as database failures.
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

    return JSONResponse(status_code=500, content={"error": str(exc)})


def install_exception_handlers(app: FastAPI) -> None:
    """Register the error envelope handlers on an application."""
    app.add_exception_handler(ResourceNotFoundException, not_found_handler)
    app.add_exception_handler(RepositoryException, database_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
