"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from quote_form.api.maps import router as maps_router
from quote_form.api.submissions import router as submissions_router
from quote_form.config import settings

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        *(
            [structlog.dev.ConsoleRenderer()]
            if settings.environment == "development"
            else [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        ),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info(
        "app_starting",
        environment=settings.environment,
        from_email=settings.from_email,
        to_email=settings.to_email,
        has_resend_key=bool(settings.resend_api_key),
        verify_submissions=settings.verify_submissions,
        allow_attachments=settings.allow_attachments,
    )
    yield
    logger.info("app_shutting_down")


app = FastAPI(
    title="Quote Form API",
    description="Quote request form backend: emails submissions to the business",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(submissions_router)
app.include_router(maps_router)


@app.get("/api/health")
async def health():
    """Health check."""
    return {"status": "OK", "message": "Server is running"}
