"""Authentication schemas."""
import uuid
from datetime import datetime

from pydantic import EmailStr, Field

from .common import BaseSchema


class RegisterRequest(BaseSchema):
    """Registration request schema."""

    username: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginRequest(BaseSchema):
    """Login request schema."""

    email: str = Field(..., min_length=1, description="User email")
    password: str = Field(..., min_length=1, description="User password")


class UserResponse(BaseSchema):
    """User response schema. Never carries the password hash."""

    id: uuid.UUID = Field(..., description="User ID")
    username: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="User email address")
    role: str = Field(..., description="User role")
    created_at: datetime = Field(..., description="Account creation time")


class RegisterResponse(BaseSchema):
    """Registration response schema."""

    message: str = Field(default="User registered")
    user: UserResponse = Field(..., description="Created user")


class LoginResponse(BaseSchema):
    """Login response schema."""

    message: str = Field(default="Success")
    token: str = Field(..., description="Signed session token")


class TokenClaims(BaseSchema):
    """Claims embedded in a session token."""

    id: str = Field(..., description="User ID")
    role: str = Field(..., description="User role")
