"""
Standup Notes Backend - FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers and routers;
       run() serves it with uvicorn on the configured host/port.
Who:   `uvicorn standup_notes.main:app`, or the `standup-notes` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │                                                     │
    │  Routes:                                            │
    │   /notes  /notes/today  /notes/yesterday            │
    │   /summaries  /summaries/standup-summary  /health   │
    │                                                     │
    │  Exception Handlers:                                │
    │   InvalidInputError→400 │ UpstreamError→500 │ *→500 │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from standup_notes import __version__
from standup_notes.config import settings
from standup_notes.database import dispose_engine
from standup_notes.exceptions import InvalidInputError, UpstreamError
from standup_notes.middleware.logging import RequestLoggingMiddleware
from standup_notes.middleware.request_id import RequestIDMiddleware, request_id_var
from standup_notes.routes import health, notes, summaries

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging to stdout. Called once at startup."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-statement / per-connection chatter
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging and configuration check. Shutdown: close the pool."""
    setup_logging()
    logger.info("Standup Notes Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # CRUD endpoints do not need the completion key; keep serving
        logger.error("Configuration error: %s", str(e))

    logger.info("Listening on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Standup Notes Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request_id_var.get("")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error bodies.

        InvalidInputError → 400 {"error", "details", "request_id"}
        UpstreamError     → 500 {"error", "request_id"} (+ "details" when set)
        Exception         → 500 generic message, traceback logged
    """

    @app.exception_handler(InvalidInputError)
    async def handle_invalid_input(request: Request, exc: InvalidInputError):
        rid = _request_id(request)
        logger.warning("[%s] Invalid input: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(request: Request, exc: UpstreamError):
        rid = _request_id(request)
        logger.error(
            "[%s] %s: %s | Context: %s",
            rid,
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        content = {"error": exc.message, "request_id": rid}
        if exc.details is not None:
            content["details"] = exc.details
        return JSONResponse(status_code=500, content=content)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = _request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred",
                "request_id": rid,
            },
        )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Standup Notes API",
        description=(
            "Notes and standup summaries. Notes are stored as-is; standup "
            "summaries are generated from a day's notes by an LLM."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Executed in reverse order of addition: RequestID runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(summaries.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on settings.host:settings.port."""
    uvicorn.run(
        "standup_notes.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
