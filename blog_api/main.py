"""Blog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogError → {"status": "error", "message": ...}
    - CORS configured from settings (not hardcoded)
    - TokenCodec and PasswordHasher built once here and parked on app.state
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - create_app(settings) factory: tests build an app with explicit settings
      and never depend on the process environment for the signing secret
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import auth, health, posts
from blog_api.config import Settings, get_settings
from blog_api.infrastructure.database import close_db, init_db
from blog_api.infrastructure.observability import setup_logging
from blog_api.infrastructure.password_hasher import PasswordHasher
from blog_api.infrastructure.token_codec import TokenCodec

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Blog API started")
    yield
    await close_db()
    logger.info("Blog API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one immutable settings object."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Blog API", version=health.SERVICE_VERSION, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_codec = TokenCodec.from_settings(settings)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(posts.router)

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("blog_api.main:app", host="0.0.0.0", port=3000)
