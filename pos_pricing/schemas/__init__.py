"""
Schemas Package for POS Pricing
===============================

Pydantic models shared by the pricing services and the API routes.

Schema Organization:
--------------------
- **cart.py**: Cart lines, product tax profiles, tax policy, computed totals
- **discounts.py**: Discount kinds and discount specs
- **quote.py**: Request/response bodies for the pricing API

Usage:
------
    from pos_pricing.schemas import CartLine, TaxPolicy, DiscountSpec
"""

# Cart schemas
from .cart import (
    CartLine,
    ProductTaxProfile,
    TaxPolicy,
    LineBreakdown,
    CartTotals,
)

# Discount schemas
from .discounts import (
    DiscountKind,
    DiscountSpec,
)

# API schemas
from .quote import (
    QuoteRequest,
    DiscountCheckRequest,
    DiscountCheckResponse,
)

__all__ = [
    # Cart
    "CartLine",
    "ProductTaxProfile",
    "TaxPolicy",
    "LineBreakdown",
    "CartTotals",
    # Discounts
    "DiscountKind",
    "DiscountSpec",
    # API
    "QuoteRequest",
    "DiscountCheckRequest",
    "DiscountCheckResponse",
]
