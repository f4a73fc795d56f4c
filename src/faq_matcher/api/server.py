"""FastAPI application server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import JSONResponse, Response

from faq_matcher.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from faq_matcher.api.routes import router
from faq_matcher.assistant import FaqAssistant
from faq_matcher.config import get_settings
from faq_matcher.exceptions import FaqMatcherError
from faq_matcher.observability.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Configures logging and loads the intent catalog once; the catalog is
    read-only for the life of the process.
    """
    settings = get_settings()

    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service_name=settings.service_name,
    )

    logger.info("Starting FAQ matcher...")

    # Tests may attach their own assistant before startup
    if getattr(app.state, "assistant", None) is None:
        app.state.assistant = FaqAssistant.from_settings(settings)
    logger.info(
        "FAQ matcher ready",
        extra={
            "intents": len(app.state.assistant.catalog),
            "threshold": app.state.assistant.threshold,
        },
    )

    yield

    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=(
            "FAQ intent matching API. "
            "Maps free-text visitor questions to scripted FAQ answers."
        ),
        lifespan=lifespan,
    )

    # Domain exception handler: map FaqMatcherError to JSON response
    @app.exception_handler(FaqMatcherError)
    async def faq_matcher_error_handler(request: Request, exc: FaqMatcherError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers (X-Content-Type-Options, X-Frame-Options)
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(router)

    if settings.enable_metrics:

        @app.get("/metrics", include_in_schema=False)
        async def metrics():
            """Prometheus metrics endpoint."""
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "faq_matcher.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
