"""Pydantic schemas module."""
from .auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    UserResponse,
    TokenClaims,
)
from .movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
)
from .review import (
    ReviewCreate,
    ReviewUpdate,
    ReviewResponse,
    ReviewDetailResponse,
)
from .common import (
    ErrorResponse,
    MessageResponse,
    HealthResponse,
)

__all__ = [
    # Auth
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    "TokenClaims",
    # Movie
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    # Review
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
    "ReviewDetailResponse",
    # Common
    "ErrorResponse",
    "MessageResponse",
    "HealthResponse",
]
