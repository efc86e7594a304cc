# Main application entry point
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth_router, health_router, notes_router, sharing_router
from .config import Settings, get_settings
from .core.errors import install_exception_handlers
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import RedisClient
from .database import Database
from .middleware import RateLimitMiddleware

# Setup logging first
setup_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    db: Database = app.state.db
    redis_client: RedisClient = app.state.redis

    # Startup
    logger.info(
        "Starting Fes Notes application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    try:
        await redis_client.connect()
        logger.info("Redis connection established")
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without rate limiting...")

    if os.getenv("FESNOTES_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to FESNOTES_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await db.create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    # Shutdown
    logger.info("Shutting down Fes Notes application")
    await redis_client.disconnect()
    await db.dispose()


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """Build the application around one store handle and one Redis client."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes with per-user read/edit sharing",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database or Database.from_settings(settings)
    app.state.redis = RedisClient(settings)

    # last added runs outermost, so logging also sees 429s
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    install_exception_handlers(app)

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(sharing_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_name} is running",
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    current = get_settings()
    uvicorn.run("fesnotes.main:app", host=current.host, port=current.port, reload=current.reload)
