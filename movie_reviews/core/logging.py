"""Logging configuration and utilities."""
import logging
import sys
from typing import Any, Dict

import structlog
from structlog.stdlib import LoggerFactory


def configure_logging(log_level: str = "INFO"):
    """Configure structured logging."""

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Set third-party log levels
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class RequestLogger:
    """Request logging utility."""

    @staticmethod
    def log_request(
        method: str,
        path: str,
        request_id: str = None,
        extra_data: Dict[str, Any] = None
    ):
        """Log incoming request."""
        logger = structlog.get_logger("api.request")
        logger.info(
            "Request started",
            method=method,
            path=path,
            request_id=request_id,
            **(extra_data or {})
        )

    @staticmethod
    def log_response(
        method: str,
        path: str,
        status_code: int,
        response_time_ms: float,
        user_id: str = None,
        request_id: str = None
    ):
        """Log response."""
        logger = structlog.get_logger("api.response")
        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=status_code,
            response_time_ms=response_time_ms,
            user_id=user_id,
            request_id=request_id
        )


class BusinessLogger:
    """Business event logging utility."""

    @staticmethod
    def log_movie_deleted(
        movie_id: str,
        movie_found: bool,
        reviews_deleted: int
    ):
        """Log a movie cascade deletion."""
        logger = structlog.get_logger("business.movie")
        logger.info(
            "Movie deleted",
            event_type="movie_deleted",
            movie_id=movie_id,
            movie_found=movie_found,
            reviews_deleted=reviews_deleted
        )

    @staticmethod
    def log_cascade_failed(movie_id: str, error_message: str):
        """Log a review cascade that failed after the movie was removed."""
        logger = structlog.get_logger("business.movie")
        logger.error(
            "Review cascade failed",
            event_type="cascade_failed",
            movie_id=movie_id,
            error_message=error_message
        )


class SecurityLogger:
    """Security event logging utility."""

    @staticmethod
    def log_user_registered(user_id: str, email: str):
        """Log a new registration."""
        logger = structlog.get_logger("security.auth")
        logger.info(
            "User registered",
            event_type="user_registered",
            user_id=user_id,
            email=email
        )

    @staticmethod
    def log_login_attempt(
        email: str,
        success: bool,
        failure_reason: str = None
    ):
        """Log login attempt."""
        logger = structlog.get_logger("security.auth")
        logger.info(
            "Login attempt",
            event_type="login_attempt",
            email=email,
            success=success,
            failure_reason=failure_reason
        )

    @staticmethod
    def log_unauthorized_access(
        path: str,
        method: str,
        ip_address: str = None,
        reason: str = None
    ):
        """Log unauthorized access attempt."""
        logger = structlog.get_logger("security.access")
        logger.warning(
            "Unauthorized access attempt",
            event_type="unauthorized_access",
            path=path,
            method=method,
            ip_address=ip_address,
            reason=reason
        )
