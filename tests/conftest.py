"""Test configuration and fixtures."""
import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from movie_reviews.config.settings import AuthSettings, Settings
from movie_reviews.database import get_db
from movie_reviews.main import create_app
from movie_reviews.models.base import Base
from movie_reviews.schemas.movie import MovieCreate
from movie_reviews.schemas.review import ReviewCreate
from movie_reviews.services.credential_store import CredentialStore
from movie_reviews.services.entity_store import EntityStore

# In-memory SQLite shared across sessions through a single connection
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    """Settings with a known secret and a cheap bcrypt work factor."""
    return Settings(
        debug=True,
        auth=AuthSettings(secret_key="test-secret", bcrypt_rounds=4),
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def authenticator(app):
    return app.state.authenticator


@pytest.fixture
def token_verifier(app):
    return app.state.token_verifier


@pytest_asyncio.fixture
async def async_engine():
    """Create async engine for tests."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine):
    """Create async session for tests."""
    session_factory = async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(app, async_session):
    """Create test client with database dependency override."""

    async def override_get_db():
        yield async_session

    app.dependency_overrides[get_db] = override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def entity_store(async_session):
    return EntityStore(async_session)


@pytest.fixture
def credential_store(async_session):
    return CredentialStore(async_session)


@pytest_asyncio.fixture
async def test_user(authenticator, credential_store):
    """Create test user."""
    return await authenticator.register(
        credential_store,
        username="tester",
        email="test@example.com",
        password="testpassword123",
    )


@pytest.fixture
def auth_headers(authenticator, test_user):
    """Create authorization headers for test user. The raw token is the header value."""
    token = authenticator.create_access_token(
        {"id": str(test_user.id), "role": test_user.role}
    )

    return {"Authorization": token}


@pytest_asyncio.fixture
async def movie(entity_store):
    return await entity_store.create_movie(
        MovieCreate(title="Alien", director="Ridley Scott", release_year=1979, genre="Horror")
    )


@pytest_asyncio.fixture
async def movie_reviews(entity_store, movie, test_user):
    """Three reviews of ``movie`` by ``test_user``."""
    reviews = []
    for rating, comment in [(5, "Terrifying"), (4, "Great set design"), (3, "Slow start")]:
        reviews.append(
            await entity_store.create_review(
                ReviewCreate(
                    movie_id=str(movie.id),
                    user_id=str(test_user.id),
                    rating=rating,
                    comment=comment,
                )
            )
        )
    return reviews
