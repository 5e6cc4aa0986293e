"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings
from .core.auth import Authenticator
from .core.logging import configure_logging
from .core.security import TokenVerifier
from .database import init_db, close_db
from .api.middleware import (
    RequestLoggingMiddleware,
    ErrorHandlingMiddleware,
    SecurityHeadersMiddleware,
    register_exception_handlers,
)
from .api.routes import auth, movies, reviews
from .schemas.common import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    await init_db(app.state.settings.database)
    yield
    # Shutdown
    await close_db()


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging(app_settings.monitoring.log_level)

    app = FastAPI(
        title=app_settings.api.title,
        description=app_settings.api.description,
        version=app_settings.api.version,
        lifespan=lifespan
    )

    app.state.settings = app_settings

    # Signing secret is read once here and shared by reference
    app.state.authenticator = Authenticator(app_settings.auth)
    app.state.token_verifier = TokenVerifier(app_settings.auth)

    register_exception_handlers(app)

    # Add middleware
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(ErrorHandlingMiddleware, debug=app_settings.debug)
    app.add_middleware(RequestLoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth.router)
    app.include_router(movies.router)
    app.include_router(reviews.router)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": "Movie Reviews API",
            "version": app_settings.api.version,
            "status": "healthy"
        }

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="healthy")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "movie_reviews.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        workers=settings.api.workers if not settings.api.reload else 1,
    )
