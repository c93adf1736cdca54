"""
FastAPI application entry point.
Mounts the v1 routes, Prometheus metrics and the auction error handlers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from auction_ledger.config import get_settings
from auction_ledger.api.error_handlers import register_error_handlers
from auction_ledger.api.v1.router import api_router
from auction_ledger.core.observability import setup_logging
from auction_ledger.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging. Shutdown: dispose of pooled DB connections."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("%s started", settings.app_name)
    yield
    await engine.dispose()
    logger.info("%s shutting down", settings.app_name)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Auction ledger: sellers list items, bidders place strictly increasing bids.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
