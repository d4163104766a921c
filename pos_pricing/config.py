"""
Configuration Module for POS Pricing
====================================

This module centralizes the configuration settings and constants used by the
pricing engine. Values are read from environment variables (a local ``.env``
file is loaded first) so different stores or environments can change the
built-in tax fallbacks without code changes.

Configuration Categories:
-------------------------
- **Tax Defaults**: The fallback tax policy used when the caller does not
  supply one. These model a VAT-like regime: tax enabled, a 10% rate, and
  prices entered without tax.

- **Money Precision**: Quantum used when rounding monetary output, and the
  largest amount a cart line accepts.

- **CORS Settings**: Allowed origins for the pricing API boundary.

Environment Variables:
----------------------
- DEFAULT_TAX_RATE_PERCENT: Fallback tax rate in percent (default: 10)
- TAX_ENABLED: Whether tax applies when no policy is given (default: "true")
- PRICES_INCLUDE_TAX: Whether prices include tax when no policy is given
  (default: "false")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")

Usage:
------
    from pos_pricing.config import (
        DEFAULT_TAX_RATE_PERCENT,
        MONEY_PLACES,
    )
"""

import logging
import os
from decimal import Decimal, InvalidOperation
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_decimal(name: str, default: str) -> Decimal:
    """Read a finite Decimal from the environment, falling back to default."""
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, AttributeError):
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return Decimal(default)
    if not value.is_finite():
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return Decimal(default)
    return value


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


# =============================================================================
# Tax Defaults
# =============================================================================
# Used only when the caller passes no TaxPolicy. The 10% rate is a business
# assumption; every fallback to it is logged so incomplete store
# configuration does not go unnoticed.

DEFAULT_TAX_RATE_PERCENT: Decimal = _env_decimal("DEFAULT_TAX_RATE_PERCENT", "10")
DEFAULT_TAX_ENABLED: bool = _env_bool("TAX_ENABLED", "true")
DEFAULT_PRICES_INCLUDE_TAX: bool = _env_bool("PRICES_INCLUDE_TAX", "false")


# =============================================================================
# Money Precision
# =============================================================================

# All monetary output is quantized to cents
MONEY_PLACES: Decimal = Decimal("0.01")

# Largest unit price or line total a cart line accepts. Keeps every amount
# the engine derives within the default 28-digit Decimal precision.
MAX_LINE_AMOUNT: Decimal = Decimal("1000000000000000")


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins, e.g., "https://pos.myshop.com"
# Default "*" allows all origins (suitable for development only)

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]
