"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from exercise_tracker.api.exercises import router as exercises_router
from exercise_tracker.api.landing import LANDING_PAGE_HTML
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_allowed_origins
from exercise_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    allowed_origins = parse_allowed_origins(container.settings.cors_allow_origins)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Exercise tracker starting",
            extra={"environment": container.settings.environment},
        )
        try:
            yield
        finally:
            try:
                await app.state.container.close_resources()
            except Exception:
                logger.exception("Failed to release store resources")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(exercises_router)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def landing_page() -> HTMLResponse:
        """Landing page with forms for the user and exercise endpoints."""
        return HTMLResponse(LANDING_PAGE_HTML)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
