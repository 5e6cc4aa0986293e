"""Tests for token verification and the protected-route gate."""
import time
from datetime import timedelta

import pytest
from httpx import AsyncClient
from jose import jwt

from movie_reviews.core.exceptions import InvalidTokenError, MissingTokenError


def test_verify_valid_token(authenticator, token_verifier):
    token = authenticator.create_access_token({"id": "abc", "role": "admin"})

    claims = token_verifier.verify(token)

    assert claims.id == "abc"
    assert claims.role == "admin"


def test_token_expires_after_four_hours(authenticator):
    token = authenticator.create_access_token({"id": "abc", "role": "user"})

    payload = jwt.get_unverified_claims(token)

    assert payload["id"] == "abc"
    assert payload["role"] == "user"
    assert abs(payload["exp"] - (time.time() + 4 * 3600)) < 60


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_token(token_verifier, raw):
    with pytest.raises(MissingTokenError):
        token_verifier.verify(raw)


def test_expired_token_with_valid_signature(authenticator, token_verifier):
    token = authenticator.create_access_token(
        {"id": "abc", "role": "user"}, expires_delta=timedelta(hours=-4, seconds=-1)
    )

    with pytest.raises(InvalidTokenError) as exc_info:
        token_verifier.verify(token)

    assert exc_info.value.details == {"reason": "expired"}


def test_token_signed_with_other_secret(token_verifier):
    token = jwt.encode({"id": "abc", "role": "user"}, "some-other-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        token_verifier.verify(token)


def test_garbage_token(token_verifier):
    with pytest.raises(InvalidTokenError):
        token_verifier.verify("not-a-jwt")


def test_token_without_id_claim(authenticator, token_verifier):
    token = authenticator.create_access_token({"role": "user"})

    with pytest.raises(InvalidTokenError):
        token_verifier.verify(token)


async def test_protected_route_without_token(client: AsyncClient):
    response = await client.get("/movies")

    assert response.status_code == 401
    assert response.json()["error"] == "Access denied. Token not provided"


async def test_protected_route_with_invalid_token(client: AsyncClient):
    response = await client.get("/movies", headers={"Authorization": "garbage"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid token"


async def test_bearer_prefix_is_not_accepted(client: AsyncClient, auth_headers):
    response = await client.get(
        "/movies", headers={"Authorization": f"Bearer {auth_headers['Authorization']}"}
    )

    assert response.status_code == 401


async def test_protected_route_with_raw_token(client: AsyncClient, auth_headers):
    response = await client.get("/movies", headers=auth_headers)

    assert response.status_code == 200
    assert "X-Request-ID" in response.headers


async def test_token_gate_runs_before_body_validation(client: AsyncClient):
    response = await client.post("/reviews", json={})

    assert response.status_code == 401


async def test_public_routes(client: AsyncClient):
    assert (await client.get("/")).status_code == 200
    assert (await client.get("/health")).json() == {"status": "healthy"}
