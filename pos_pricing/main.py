"""
ASGI entry point for the pricing API.

    uvicorn pos_pricing.main:app
"""

from .app_factory import create_app
from .logging_config import setup_logging

setup_logging()

app = create_app()
