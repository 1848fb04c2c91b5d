"""Main FastAPI application for Progressa."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from progressa_common.config import get_app_settings
from progressa_common.exceptions import register_workflow_error_handlers
from progressa_common.logging import setup_logging

from progressa_api.api.v1.router import v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """Application lifespan."""
    settings = get_app_settings()
    setup_logging(
        level=settings.LOG_LEVEL,
        enable_structured_logging=settings.STRUCTURED_LOGGING,
    )
    logger.info("Application started successfully")

    try:
        yield
    finally:
        logger.info("Application shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_app_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Starts certificate workflows and reports their progress. Progress "
            "is read from the running workflow while it is live and from its "
            "result once it has finished."
        ),
        version="0.1.0",
        debug=settings.DEBUG,
        lifespan=app_lifespan,
        openapi_tags=[
            {"name": "certificates", "description": "Certificate issuing workflows"},
        ],
    )

    register_workflow_error_handlers(app)
    app.include_router(v1_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
