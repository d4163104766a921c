"""
Logging configuration for the pricing engine.

Usage:
    from pos_pricing.logging_config import setup_logging
    setup_logging()  # Call once at application startup

Environment variables:
    POS_PRICING_LOG_LEVEL: Level for the pos_pricing loggers only
    LOG_LEVEL: Fallback when POS_PRICING_LOG_LEVEL is unset (default: INFO)

Levels used by the package:
    DEBUG: per-quote totals, rejected discount entries, missing tax profiles
    INFO: application startup, quotes rejected by the API
    WARNING: fallbacks to built-in tax defaults and ignored store settings
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# HTTP server and client loggers that log every request
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def resolve_level(level: str = None) -> str:
    """Pick the level name from the argument or the environment, INFO if unreadable."""
    if level is None:
        level = os.getenv("POS_PRICING_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    level = level.strip().upper()
    return level if level in VALID_LEVELS else "INFO"


def setup_logging(level: str = None) -> int:
    """
    Configure logging for the pricing API.

    Args:
        level: Log level name. If not provided, read from the environment.

    Returns:
        The numeric level applied to the pos_pricing loggers
    """
    name = resolve_level(level)
    numeric_level = getattr(logging, name)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("pos_pricing").setLevel(numeric_level)

    noisy_level = numeric_level if name == "DEBUG" else logging.WARNING
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)

    logging.getLogger(__name__).debug("Logging configured at %s level", name)
    return numeric_level
