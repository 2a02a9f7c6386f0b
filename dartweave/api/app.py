"""FastAPI application factory and lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from dartweave import __version__
from dartweave.api.routes import graph_router, router
from dartweave.config import settings
from dartweave.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler; runs setup on startup.

    Args:
        app: The FastAPI application instance.
    """
    setup_logging(settings.log_level, json_logs=settings.log_json)
    yield


def create_app() -> FastAPI:
    """Build and return the configured FastAPI application.

    Returns:
        A fully wired :class:`FastAPI` instance.
    """
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description=(
            "dartweave orders generated Flutter/Dart artifacts by their "
            "declared dependencies, reports unresolved references and "
            "injects relative import directives."
        ),
        lifespan=lifespan,
    )
    app.include_router(router, tags=["Health"])
    app.include_router(graph_router, tags=["Dependency Graph"])
    return app


app = create_app()
