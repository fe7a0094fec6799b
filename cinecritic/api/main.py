"""
FastAPI application entry point for the CineCritic movie API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cinecritic.api.config import get_log_level
from cinecritic.api.error_handlers import register_error_handlers
from cinecritic.api.routers import movies
from cinecritic.database.connection import MongoManager
from cinecritic.database.init_db import init_database
from cinecritic.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to CineCritic - Movie Rating API 🎥"


async def _ensure_indexes(collection: Collection) -> None:
    try:
        await run_in_threadpool(init_database, collection)
    except PyMongoError as e:
        # Keep serving; store calls will fail with 500 until MongoDB is reachable
        logger.error("Failed to initialize MongoDB collection: %s", e)


def create_app(collection: Collection | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        collection: Movies collection to serve. When omitted, a MongoDB client
            is created on startup from the environment and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_api_logging(level=get_log_level())
        if collection is not None:
            await _ensure_indexes(collection)
            app.state.movie_collection = collection
            yield
            return

        manager = MongoManager()
        await _ensure_indexes(manager.collection)
        app.state.movie_collection = manager.collection
        try:
            yield
        finally:
            manager.close()

    app = FastAPI(
        title="CineCritic Movie Rating API",
        description="CRUD API for movies backed by MongoDB",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info("%s %s", request.method, target)
        return await call_next(request)

    register_error_handlers(app)
    app.include_router(movies.router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        """Welcome message."""
        return WELCOME_MESSAGE

    return app


app = create_app()
