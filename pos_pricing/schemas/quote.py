"""
Quote Schemas for the Pricing API
=================================

Request and response bodies for the pricing endpoints.

Endpoint Coverage:
------------------
- POST /pricing/quote: Price a cart with optional stacked discounts
- POST /pricing/discounts/validate: Check a raw discount entry

Example:
--------
    POST /pricing/quote
    {
        "lines": [{"product_id": "sku-1", "quantity": 2, "unit_price": "10.00"}],
        "products": {"sku-1": {"iva_rate": 10, "iva_included": false}},
        "discounts": [{"kind": "PERCENTAGE", "value": "10"}],
        "tax_policy": {"tax_enabled": true, "default_tax_rate_percent": "10"}
    }
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .cart import CartLine, ProductTaxProfile, TaxPolicy
from .discounts import DiscountKind, DiscountSpec


class QuoteRequest(BaseModel):
    """
    Body for POST /pricing/quote.

    Attributes:
        lines: Cart lines in display order
        products: Tax profiles keyed by product_id; products may be omitted
        discounts: Discounts applied in order, each on the remaining balance
        tax_policy: Store tax policy; built-in defaults when omitted
    """
    lines: List[CartLine] = Field(default_factory=list)
    products: Dict[str, ProductTaxProfile] = Field(default_factory=dict)
    discounts: List[DiscountSpec] = Field(default_factory=list)
    tax_policy: Optional[TaxPolicy] = None


class DiscountCheckRequest(BaseModel):
    """
    Body for POST /pricing/discounts/validate.

    ``value`` is whatever the discount field held; it is normalized before
    the bounds are checked.
    """
    value: Any = None
    kind: DiscountKind
    taxed_subtotal: Decimal = Field(default=Decimal("0"), ge=0)


class DiscountCheckResponse(BaseModel):
    """Result of a discount check."""
    value: Decimal
    valid: bool
    errors: List[str]
