"""
Application factory for the pricing API.

Builds the FastAPI application that exposes the pricing engine to the
register UI.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS
from .routes import pricing_router

logger = logging.getLogger(__name__)


def create_app(cors_origins: Optional[List[str]] = None) -> FastAPI:
    """
    Create a FastAPI application.

    Args:
        cors_origins: Allowed origins. Defaults to CORS_ORIGINS from config.

    Returns:
        Configured FastAPI application
    """
    origins = cors_origins or CORS_ORIGINS
    logger.info("Creating pricing API (CORS origins: %s)", ", ".join(origins))

    app = FastAPI(
        title="POS Pricing API",
        description="Cart tax decomposition, discounts and totals",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Versioned paths first, root paths kept for simple clients
    app.include_router(pricing_router, prefix="/api/v1")
    app.include_router(pricing_router)

    return app
