"""FastAPI application for the Merry Mulligan scoring API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings, load_settings
from database.connection import db
from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool on startup, close on shutdown."""
    settings: Settings = app.state.settings
    await db.initialize(
        dsn=settings.DATABASE_URL,
        min_size=settings.DB_POOL_MIN_SIZE,
        max_size=settings.DB_POOL_MAX_SIZE,
    )
    if settings.APPLY_SCHEMA:
        await db.apply_schema()
    app.state.db_manager = DatabaseManager(db.pool)
    yield
    await db.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Merry Mulligan API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import course, feed, powerups, scores, teams, users
    app.include_router(course.router, prefix="/api/course", tags=["course"])
    app.include_router(teams.router, prefix="/api/teams", tags=["teams"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(scores.router, prefix="/api/scores", tags=["scores"])
    app.include_router(powerups.router, prefix="/api/powerups", tags=["powerups"])
    app.include_router(feed.router, prefix="/api/feed", tags=["feed"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    logger.debug("App created with CORS origins %s", settings.cors_origin_list)
    return app


app = create_app()
