"""FastAPI application factory.

The generation config is checked once at startup so a missing key shows
up in the log before the first question does. Cross-origin access is off
unless origins are listed in ``CORS_ALLOW_ORIGINS``.
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from query_finder import __version__
from query_finder.api.routes import router as api_router
from query_finder.generation.config import get_generation_config

logger = logging.getLogger(__name__)


def allowed_origins_from_env() -> list[str]:
    """Parse the comma-separated ``CORS_ALLOW_ORIGINS`` setting."""
    raw = os.getenv("CORS_ALLOW_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    try:
        config = get_generation_config()
    except ValueError:
        logger.warning("No API key configured; /api/ask and the chat page will fail")
    else:
        logger.info(f"Answers generated by {config.model_name}")
    yield


def create_app(allowed_origins: list[str] | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        allowed_origins: Origins allowed to call the API from a browser.
            Read from the environment when not given.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Query Finder API",
        description=(
            "Ask questions of a hosted generative-language model, optionally "
            "with the text of an uploaded PDF or plain-text document as context."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    origins = allowed_origins if allowed_origins is not None else allowed_origins_from_env()
    if origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST"],
            allow_headers=["Content-Type"],
        )

    application.include_router(api_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "query-finder"}

    return application


app = create_app()
