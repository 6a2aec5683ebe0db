"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory store, enables CORS, serves the landing page and
the ``/public`` assets, includes the ``/api`` routers and registers the
JSON error handlers.  ``create_app`` builds a fresh, independent
application each time it is called; the module level ``app`` is the
instance served by uvicorn, e.g.::

    uvicorn exercise_tracker_api.app.main:app --reload
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InMemoryStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[InMemoryStore]
        Store backing the application.  A new, empty store is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so the setup below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.mount("/public", StaticFiles(directory=settings.static_dir), name="public")

    index_page = Path(settings.views_dir) / "index.html"

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(index_page, media_type="text/html")

    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "%s %s started (exercise response: %s)",
            settings.project_name,
            settings.api_version,
            settings.exercise_response,
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.store.clear()
        logger.info("%s stopped", settings.project_name)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
