"""Database models module."""
from .base import Base
from .user import User, UserRole
from .movie import Movie
from .review import Review

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Movie",
    "Review",
]
