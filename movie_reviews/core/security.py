"""Token verification and the request gate for protected routes."""
from typing import Optional

from fastapi import Header, Request
from jose import ExpiredSignatureError, JWTError, jwt

from ..config.settings import AuthSettings
from ..models.user import UserRole
from ..schemas.auth import TokenClaims
from .exceptions import AuthenticationError, InvalidTokenError, MissingTokenError
from .logging import SecurityLogger


class TokenVerifier:
    """Stateless verifier for session tokens.

    There is no revocation list and no refresh: a token with a valid
    signature is accepted until its expiry.
    """

    def __init__(self, auth_settings: AuthSettings):
        self.secret_key = auth_settings.secret_key
        self.algorithm = auth_settings.algorithm

    def verify(self, raw_token: Optional[str]) -> TokenClaims:
        """Validate signature and expiry and return the embedded claims."""
        if not raw_token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                raw_token, self.secret_key, algorithms=[self.algorithm]
            )
        except ExpiredSignatureError:
            raise InvalidTokenError(details={"reason": "expired"}) from None
        except JWTError:
            raise InvalidTokenError() from None

        user_id = payload.get("id")
        if not user_id:
            raise InvalidTokenError(details={"reason": "missing_claims"})

        return TokenClaims(
            id=str(user_id),
            role=payload.get("role") or UserRole.USER.value,
        )


async def get_current_claims(
    request: Request,
    authorization: Optional[str] = Header(default=None)
) -> TokenClaims:
    """Gate for protected routes.

    The ``Authorization`` header carries the raw token, without a
    ``Bearer`` scheme. Claims are kept on ``request.state.user``.
    """
    verifier: TokenVerifier = request.app.state.token_verifier

    try:
        claims = verifier.verify(authorization)
    except AuthenticationError as e:
        SecurityLogger.log_unauthorized_access(
            path=str(request.url.path),
            method=request.method,
            ip_address=request.client.host if request.client else None,
            reason=e.error_code
        )
        raise

    request.state.user = claims
    return claims
