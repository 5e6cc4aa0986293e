"""Persistence for user identity records."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import RegistrationError
from ..models.user import User, UserRole
from .entity_store import store_operation


class CredentialStore:
    """User store keyed by email."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation
    async def create_user(
        self,
        username: str,
        email: str,
        hashed_password: str,
        role: str = UserRole.USER.value
    ) -> User:
        """Create a user. A taken email raises ``RegistrationError``."""
        user = User(
            username=username,
            email=email,
            hashed_password=hashed_password,
            role=role,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise RegistrationError(details={"reason": "email_exists"}) from None

        await self.db.refresh(user)
        return user

    @store_operation
    async def get_user_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

