"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nft_marketplace.api.routes import accounts, collections, events, health, marketplace
from nft_marketplace.config import settings

logger = structlog.get_logger(__name__)


def configure_logging(level: str) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.log_level)
    logger.info("marketplace_starting")
    yield
    logger.info("marketplace_stopping")


def create_app() -> FastAPI:
    app = FastAPI(
        title="NFT Marketplace",
        description="NFT collections and a fixed-price marketplace that charges a flat fee.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(collections.router)
    app.include_router(marketplace.router)
    app.include_router(accounts.router)
    app.include_router(events.router)

    return app


app = create_app()
