"""API middleware for logging and error handling."""
import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.exceptions import BaseAPIException, ValidationError
from ..core.logging import RequestLogger

logger = structlog.get_logger("api.error")


def error_response(exc: BaseAPIException) -> JSONResponse:
    """Render an API exception as the JSON error body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "error_code": exc.error_code,
            "details": exc.details,
            "timestamp": time.time()
        }
    )


async def api_exception_handler(request: Request, exc: BaseAPIException) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report body validation failures as 400 rather than 422."""
    fields = [
        ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        for error in exc.errors()
    ]
    return error_response(ValidationError(details={"fields": fields}))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging requests and responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Generate request ID
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        RequestLogger.log_request(
            method=request.method,
            path=str(request.url.path),
            request_id=request_id,
            extra_data={
                "client_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent")
            }
        )

        response = await call_next(request)

        response_time_ms = (time.time() - start_time) * 1000

        # Claims are set by the token gate once the route has run
        claims = getattr(request.state, "user", None)
        RequestLogger.log_response(
            method=request.method,
            path=str(request.url.path),
            status_code=response.status_code,
            response_time_ms=response_time_ms,
            user_id=claims.id if claims else None,
            request_id=request_id
        )

        response.headers["X-Request-ID"] = request_id

        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn anything that escaped the exception handlers into a 500."""

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except BaseAPIException as e:
            return error_response(e)

        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=str(request.url.path),
                method=request.method
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "error_code": "INTERNAL_ERROR",
                    "details": {"message": str(e)} if self.debug else {},
                    "timestamp": time.time()
                }
            )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response
