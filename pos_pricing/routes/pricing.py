"""
Pricing Routes for POS Pricing
==============================

Endpoints the register UI calls to price a cart and to check a discount
before accepting it.

Endpoints:
----------
- POST /pricing/quote: Price a cart, rejecting invalid discounts
- POST /pricing/discounts/validate: Normalize and check a raw discount entry

Discount Gate:
--------------
The pricing services never refuse to compute; an oversized discount is
simply clamped. This router is where discounts are enforced: a quote whose
discounts violate the bounds is rejected with HTTP 422 and the list of
violations, so the cashier sees why.

    POST /pricing/quote
    {"lines": [...], "discounts": [{"kind": "PERCENTAGE", "value": "150"}]}

    422 {"detail": {"errors": ["Percentage discount cannot exceed 100%"]}}

Usage:
------
    Totals for a cart with a 10% discount:

    POST /pricing/quote
    {
        "lines": [{"product_id": "sku-1", "quantity": 1, "unit_price": "100"}],
        "products": {"sku-1": {"tax_rate": 10}},
        "discounts": [{"kind": "PERCENTAGE", "value": "10"}]
    }
"""

import logging

from fastapi import APIRouter, HTTPException

from ..schemas.cart import CartTotals
from ..schemas.quote import DiscountCheckRequest, DiscountCheckResponse, QuoteRequest
from ..services.pricing import apply_discounts, validate_discounts
from ..services.tax import decompose_cart
from ..services.validation import normalize_discount_input, validate_discount


logger = logging.getLogger(__name__)

# Router definition
pricing_router = APIRouter(prefix="/pricing", tags=["Pricing"])


# =============================================================================
# Pricing Endpoints
# =============================================================================

@pricing_router.post("/quote", response_model=CartTotals)
def quote_cart(payload: QuoteRequest) -> CartTotals:
    """Price a cart with its tax breakdown and discounts."""
    summary = decompose_cart(payload.lines, payload.products, payload.tax_policy)

    errors = validate_discounts(payload.discounts, summary.subtotal_with_tax)
    if errors:
        logger.info("Rejected quote with %d discount violation(s)", len(errors))
        raise HTTPException(status_code=422, detail={"errors": errors})

    return apply_discounts(summary, payload.discounts)


@pricing_router.post("/discounts/validate", response_model=DiscountCheckResponse)
def check_discount(payload: DiscountCheckRequest) -> DiscountCheckResponse:
    """Normalize a raw discount entry and report any bound violations."""
    errors = validate_discount(payload.value, payload.kind, payload.taxed_subtotal)
    return DiscountCheckResponse(
        value=normalize_discount_input(payload.value),
        valid=not errors,
        errors=errors,
    )
