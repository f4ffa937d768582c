"""
Error handling middleware for Store Service.
Provides centralized exception handling and standardized error responses.
"""

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.exceptions import CreationFailure, NotFound, UpdateFailure
from ...utils.logging import get_store_logger

logger = get_store_logger("store_service.error_handler")


class StoreServiceErrorHandler:
    """
    Centralized error handling for Store Service.

    Every non-2xx response carries the same ``{"error": {...}}`` envelope
    with the correlation ID and caller of the failed request.
    """

    @staticmethod
    def setup_error_handlers(app: FastAPI) -> None:
        """
        Setup all error handlers for the FastAPI application.
        """

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(
            request: Request, exc: StarletteHTTPException
        ) -> JSONResponse:
            """Handle HTTP exceptions from Starlette/FastAPI."""
            return StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=exc.status_code,
                error_type="http_error",
                message=str(exc.detail),
                details={"path": request.url.path, "method": request.method},
            )

        @app.exception_handler(RequestValidationError)
        async def validation_exception_handler(
            request: Request, exc: RequestValidationError
        ) -> JSONResponse:
            """Malformed bodies, path ids and query parameters are bad requests."""
            error_details: list[Dict[str, Any]] = []
            for error in exc.errors():
                error_details.append(
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                        "type": error["type"],
                    }
                )

            return StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=400,
                error_type="validation_error",
                message="Request validation failed",
                details={"validation_errors": error_details},
            )

        @app.exception_handler(NotFound)
        async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
            return StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=404,
                error_type="not_found",
                message=exc.message,
                details={"entity": exc.entity, "id": exc.entity_id},
            )

        @app.exception_handler(CreationFailure)
        async def creation_failure_handler(
            request: Request, exc: CreationFailure
        ) -> JSONResponse:
            StoreServiceErrorHandler._log_store_failure(request, exc)
            return StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=500,
                error_type="creation_failure",
                message=exc.message,
                details={"entity": exc.entity},
            )

        @app.exception_handler(UpdateFailure)
        async def update_failure_handler(
            request: Request, exc: UpdateFailure
        ) -> JSONResponse:
            StoreServiceErrorHandler._log_store_failure(request, exc)
            return StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=500,
                error_type="update_failure",
                message=exc.message,
                details={"entity": exc.entity},
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(
            request: Request, exc: Exception
        ) -> JSONResponse:
            """Handle anything not classified above."""
            logger.error(
                "Unhandled exception occurred",
                extra={
                    "correlation_id": getattr(
                        request.state, "correlation_id", "unknown"
                    ),
                    "user_id": getattr(request.state, "user_id", "anonymous"),
                    "path": request.url.path,
                    "method": request.method,
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc(),
                    "event_type": "unhandled_exception",
                },
                exc_info=True,
            )

            return StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=500,
                error_type="internal_server_error",
                message="An internal server error occurred",
                details={"exception_type": type(exc).__name__},
            )

    @staticmethod
    def _log_store_failure(request: Request, exc: Exception) -> None:
        logger.error(
            "Store inconsistency detected",
            extra={
                "correlation_id": getattr(request.state, "correlation_id", "unknown"),
                "path": request.url.path,
                "method": request.method,
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
                "event_type": "store_failure",
            },
        )

    @staticmethod
    def _create_error_response(
        request: Request,
        status_code: int,
        error_type: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """
        Create a standardized error response.

        Args:
            request: The FastAPI request object
            status_code: HTTP status code
            error_type: Type of error for categorization
            message: Human-readable error message
            details: Additional error details

        Returns:
            JSONResponse with standardized error format
        """
        correlation_id = getattr(request.state, "correlation_id", "unknown")
        user_id = getattr(request.state, "user_id", "anonymous")

        error_response: Dict[str, Any] = {
            "error": {
                "type": error_type,
                "message": message,
                "correlation_id": correlation_id,
                "user_id": user_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "path": request.url.path,
                "method": request.method,
            }
        }

        if details:
            error_response["error"]["details"] = details

        if status_code < 500:
            logger.warning(
                f"Client error: {error_type}",
                extra={
                    "correlation_id": correlation_id,
                    "user_id": user_id,
                    "status_code": status_code,
                    "error_type": error_type,
                    "path": request.url.path,
                    "method": request.method,
                    "event_type": "client_error",
                },
            )

        return JSONResponse(status_code=status_code, content=error_response)


def setup_store_error_handling(app: FastAPI) -> None:
    """
    Convenience function to setup error handling for Store Service.

    Args:
        app: FastAPI application instance
    """
    StoreServiceErrorHandler.setup_error_handlers(app)

    logger.info(
        "Store Service error handling configured",
        extra={"event_type": "error_handler_setup"},
    )
