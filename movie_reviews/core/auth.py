"""Authentication core functionality."""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi.concurrency import run_in_threadpool
from jose import jwt

from ..config.settings import AuthSettings
from ..models.user import User
from ..services.credential_store import CredentialStore
from .exceptions import InvalidCredentialsError, NotFoundError, RegistrationError, ValidationError
from .logging import SecurityLogger


def _missing_fields(**fields) -> list[str]:
    return [name for name, value in fields.items() if not value]


class Authenticator:
    """Registers users and exchanges credentials for session tokens.

    The signing secret comes from the ``AuthSettings`` handed in at
    startup; the same settings object configures the ``TokenVerifier``.
    """

    def __init__(self, auth_settings: AuthSettings):
        self.secret_key = auth_settings.secret_key
        self.algorithm = auth_settings.algorithm
        self.token_expire_hours = auth_settings.token_expire_hours
        self.bcrypt_rounds = auth_settings.bcrypt_rounds

    def hash_password(self, password: str) -> str:
        """Hash password using bcrypt."""
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify password against hash."""
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )

    def create_access_token(
        self,
        data: dict,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """Create a signed session token."""
        to_encode = data.copy()

        if expires_delta is None:
            expires_delta = timedelta(hours=self.token_expire_hours)

        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    async def register(
        self,
        credentials: CredentialStore,
        username: str,
        email: str,
        password: str
    ) -> User:
        """Create a user with the default role.

        Raises ``ValidationError`` for missing fields and
        ``RegistrationError`` when the email is already taken.
        """
        missing = _missing_fields(username=username, email=email, password=password)
        if missing:
            raise ValidationError(details={"missing": missing})

        if await credentials.get_user_by_email(email) is not None:
            raise RegistrationError(details={"reason": "email_exists"})

        # bcrypt is CPU bound; keep it off the event loop
        hashed_password = await run_in_threadpool(self.hash_password, password)

        user = await credentials.create_user(
            username=username,
            email=email,
            hashed_password=hashed_password,
        )
        SecurityLogger.log_user_registered(user_id=str(user.id), email=user.email)
        return user

    async def login(self, credentials: CredentialStore, email: str, password: str) -> str:
        """Verify credentials and return a token carrying ``id`` and ``role``."""
        missing = _missing_fields(email=email, password=password)
        if missing:
            raise ValidationError(details={"missing": missing})

        user = await credentials.get_user_by_email(email)
        if user is None:
            SecurityLogger.log_login_attempt(email, success=False, failure_reason="user_not_found")
            raise NotFoundError("User not found")

        matches = await run_in_threadpool(
            self.verify_password, password, user.hashed_password
        )
        if not matches:
            SecurityLogger.log_login_attempt(email, success=False, failure_reason="invalid_credentials")
            raise InvalidCredentialsError()

        SecurityLogger.log_login_attempt(email, success=True)
        return self.create_access_token({"id": str(user.id), "role": user.role})
