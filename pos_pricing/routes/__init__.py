"""
Routes Package for POS Pricing
==============================

API route definitions. Each module defines a FastAPI APIRouter with a prefix
and tags for OpenAPI documentation.

- pricing.py: Cart quotes and discount checks

Router Registration:
--------------------
Routers are registered by app_factory.create_app() under two prefixes:
1. /api/v1/* - Versioned API (recommended)
2. /* - Root paths

Error Handling:
---------------
- 422: Malformed request body, or discounts that violate their bounds
"""

from .pricing import pricing_router

__all__ = ["pricing_router"]
