"""User model."""
import enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class UserRole(str, enum.Enum):
    """Roles carried in the token's role claim."""

    USER = "user"
    ADMIN = "admin"


class User(Base):
    """User identity record used for authentication."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), default=UserRole.USER.value, nullable=False)

    def __repr__(self) -> str:
        return f"<User(email={self.email}, role={self.role})>"
