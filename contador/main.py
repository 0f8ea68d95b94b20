"""Contador — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contador.adapters.persistence.database import Base, engine
from contador.config import settings
from contador.infrastructure.api.errors import register_exception_handlers
from contador.infrastructure.api.routes_health import router as health_router
from contador.infrastructure.api.routes_page import router as page_router
from contador.infrastructure.api.routes_people import router as people_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.kv_backend == "sql":
        try:
            async with engine.begin() as conn:
                if settings.create_schema:
                    await conn.run_sync(Base.metadata.create_all)
            logger.info("Database connection established")
        except Exception as e:
            logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Contador de Babaquinha",
        description="Named counters backed by a key-value store",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers; the page router is a catch-all and must come last
    app.include_router(health_router, prefix="/api")
    app.include_router(people_router, prefix="/api")
    app.include_router(page_router)

    return app


app = create_app()
