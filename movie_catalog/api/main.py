"""
FastAPI application entry point for the Movie Catalog API.

Run: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog import __version__
from movie_catalog.api.config import get_api_host, get_api_port, get_database_path, get_log_level
from movie_catalog.api.routers import movies, reviews, watch_history, system
from movie_catalog.database.init_db import init_database
from movie_catalog.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(debug=get_log_level() == "DEBUG")
    init_database(db_path=get_database_path())
    logger.info("Movie Catalog API started")
    yield


app = FastAPI(
    title="Movie Catalog API",
    description="REST API for a movie catalog with reviews and watch history",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(reviews.router)
app.include_router(watch_history.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
