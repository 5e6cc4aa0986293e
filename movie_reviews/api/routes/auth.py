"""Authentication routes."""
from fastapi import APIRouter, Depends, status

from ...core.auth import Authenticator
from ...schemas.auth import (
    RegisterRequest, RegisterResponse, LoginRequest, LoginResponse, UserResponse
)
from ...services.credential_store import CredentialStore
from ..dependencies import get_authenticator, get_credential_store

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED
)
async def register_user(
    register_request: RegisterRequest,
    authenticator: Authenticator = Depends(get_authenticator),
    credentials: CredentialStore = Depends(get_credential_store)
):
    """Register a new user."""
    user = await authenticator.register(
        credentials,
        username=register_request.username,
        email=register_request.email,
        password=register_request.password,
    )

    return RegisterResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=LoginResponse)
async def login_user(
    login_request: LoginRequest,
    authenticator: Authenticator = Depends(get_authenticator),
    credentials: CredentialStore = Depends(get_credential_store)
):
    """Login user and return a session token."""
    token = await authenticator.login(
        credentials, login_request.email, login_request.password
    )

    return LoginResponse(token=token)
