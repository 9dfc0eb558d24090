"""
FastAPI application entry point for the Movies API.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviedb import __version__
from moviedb.api.config import get_api_host, get_api_port, get_log_level
from moviedb.api.dependencies import get_manager
from moviedb.api.errors import register_error_handlers
from moviedb.api.routers import movies, system
from moviedb.database.migrations import migrate_latest
from moviedb.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movies API",
    description="REST API for creating, reading, updating and deleting movies",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movies API",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run():
    """Migrate the configured database to latest and serve the API."""
    configure_api_logging(level=get_log_level())
    applied = migrate_latest(get_manager())
    if applied:
        logger.info("Applied migrations: %s", ", ".join(applied))
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    run()
