"""Custom exceptions for the application."""


class BaseAPIException(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = None,
        details: dict = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseAPIException):
    """Missing or empty required field(s)."""

    def __init__(
        self,
        message: str = "All fields are required",
        details: dict = None,
        error_code: str = "VALIDATION_ERROR"
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class RegistrationError(ValidationError):
    """User could not be registered (e.g. the email is taken)."""

    def __init__(self, message: str = "Error registering user", details: dict = None):
        super().__init__(
            message=message,
            details=details,
            error_code="REGISTRATION_ERROR"
        )


class InvalidIdentifierError(BaseAPIException):
    """Identifier is not well formed for the store."""

    def __init__(self, message: str = "Invalid ID", details: dict = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_IDENTIFIER",
            details=details
        )


class NotFoundError(BaseAPIException):
    """Resource not found error."""

    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND_ERROR",
            details=details
        )


class AuthenticationError(BaseAPIException):
    """Authentication error."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: dict = None,
        error_code: str = "AUTHENTICATION_ERROR"
    ):
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code,
            details=details
        )


class InvalidCredentialsError(AuthenticationError):
    """Password does not match the stored hash."""

    def __init__(self, message: str = "Invalid credentials", details: dict = None):
        super().__init__(message, details, error_code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """No token presented on a protected request."""

    def __init__(
        self,
        message: str = "Access denied. Token not provided",
        details: dict = None
    ):
        super().__init__(message, details, error_code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Token signature, shape or expiry is invalid."""

    def __init__(self, message: str = "Invalid token", details: dict = None):
        super().__init__(message, details, error_code="INVALID_TOKEN")


class StoreError(BaseAPIException):
    """Unexpected persistence failure."""

    def __init__(self, message: str = "Server error", details: dict = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code="STORE_ERROR",
            details=details
        )
